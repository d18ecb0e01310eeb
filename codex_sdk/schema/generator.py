"""
Operation document generator

Writes one `<Name>.graphql` file per root field of the schema:

    resources/
      generated_queries/GetNetworks.graphql
      generated_mutations/CreateApiTokens.graphql
      generated_subscriptions/OnPriceUpdated.graphql

The SDK crawls these directories to build its query/mutation/subscription
namespaces, so regenerating them is all that is needed when the upstream
schema changes.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Union

from ..constants import OPERATION_DIRECTORIES, OPERATION_KINDS
from .introspection import IntrospectionSchema
from .query_builder import capitalize, render_operation

logger = logging.getLogger(__name__)

GRAPHQL_SUFFIX = ".graphql"


def generate_operations(schema: IntrospectionSchema, kind: str) -> Dict[str, str]:
    """Render every root field of one operation kind

    Args:
        schema: Introspection schema
        kind: query, mutation or subscription

    Returns:
        {CapitalizedFieldName: document}; empty when the schema has no root
        type for this kind
    """
    types = {t.name: t for t in schema.types}
    return {
        capitalize(field_def.name): render_operation(kind, field_def, types)
        for field_def in schema.root_fields(kind)
    }


def generate_all(schema: IntrospectionSchema) -> Dict[str, Dict[str, str]]:
    """Documents for all operation kinds, keyed by kind"""
    return {kind: generate_operations(schema, kind) for kind in OPERATION_KINDS}


def write_operations(schema: IntrospectionSchema, out_dir: Union[str, Path]) -> List[Path]:
    """Write generated documents below out_dir

    Files of fields that no longer exist in the schema are removed so the
    directory always mirrors the current schema.

    Returns:
        Paths of the files written
    """
    out_dir = Path(out_dir)
    written: List[Path] = []

    for kind, documents in generate_all(schema).items():
        kind_dir = out_dir / OPERATION_DIRECTORIES[kind]
        kind_dir.mkdir(parents=True, exist_ok=True)

        for stale in kind_dir.glob(f"*{GRAPHQL_SUFFIX}"):
            if stale.stem not in documents:
                logger.info("Removing file: %s", stale.name)
                stale.unlink()

        for name, document in sorted(documents.items()):
            path = kind_dir / f"{name}{GRAPHQL_SUFFIX}"
            logger.info("Writing file: %s", path.name)
            path.write_text(document, encoding="utf-8")
            written.append(path)

    return written


def load_operations(directory: Union[str, Path]) -> Dict[str, str]:
    """Read `<Name>.graphql` documents back, sorted by name

    A missing directory yields an empty mapping.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return {}
    return {
        path.stem: path.read_text(encoding="utf-8")
        for path in sorted(directory.glob(f"*{GRAPHQL_SUFFIX}"))
    }


def stale_operations(schema: IntrospectionSchema, out_dir: Union[str, Path]) -> List[str]:
    """Compare generated output with what is on disk

    Returns:
        Sorted relative paths ("generated_queries/Token.graphql") that are
        missing, outdated or orphaned. Empty when the checked-in files match
        the generator output.
    """
    out_dir = Path(out_dir)
    stale: List[str] = []

    for kind, documents in generate_all(schema).items():
        dirname = OPERATION_DIRECTORIES[kind]
        on_disk = load_operations(out_dir / dirname)
        for name in set(documents) | set(on_disk):
            if documents.get(name) != on_disk.get(name):
                stale.append(f"{dirname}/{name}{GRAPHQL_SUFFIX}")

    return sorted(stale)


def operation_method_name(operation_name: str) -> str:
    """SDK attribute name for an operation: GetNetworks -> get_networks"""
    snake = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", operation_name)
    snake = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", snake)
    return snake.lower()
