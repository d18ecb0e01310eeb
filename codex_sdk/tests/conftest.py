import pytest

from ..constants import SCHEMA_SNAPSHOT
from ..schema.introspection import load_schema


@pytest.fixture(scope="session")
def schema():
    """Bundled introspection snapshot"""
    return load_schema(SCHEMA_SNAPSHOT)
