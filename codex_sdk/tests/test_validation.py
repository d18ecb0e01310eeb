"""
Document validation tests

Every document the SDK ships must parse and validate against the schema.
"""

import pytest

from ..constants import OPERATION_DIRECTORIES, RESOURCES_DIR
from ..data.documents import DOCUMENTS
from ..schema.generator import load_operations
from ..schema.validation import (
    DocumentError,
    operation_name,
    operation_type,
    parse_document,
    validate_document,
)


def generated_documents():
    for kind, dirname in OPERATION_DIRECTORIES.items():
        for name, document in load_operations(RESOURCES_DIR / dirname).items():
            yield pytest.param(kind, document, id=f"{dirname}/{name}")


class TestShippedDocuments:
    """Hand-written operations with fragments"""

    @pytest.mark.parametrize("name", sorted(DOCUMENTS))
    def test_valid(self, schema, name):
        assert validate_document(schema, DOCUMENTS[name]) == []

    @pytest.mark.parametrize("name", sorted(DOCUMENTS))
    def test_operation_name_matches_key(self, name):
        assert operation_name(DOCUMENTS[name]) == name


class TestGeneratedDocuments:
    """resources/generated_*"""

    @pytest.mark.parametrize("kind,document", list(generated_documents()))
    def test_valid(self, schema, kind, document):
        assert validate_document(schema, document) == []
        assert operation_type(document) == kind


class TestValidateDocument:
    """Error reporting"""

    def test_unknown_field(self, schema):
        errors = validate_document(schema, "query Bad { getNetworks { id slug } }")
        assert len(errors) == 1
        assert "slug" in errors[0]

    def test_undefined_variable_type(self, schema):
        errors = validate_document(schema, "query Bad($x: Missing) { token(input: $x) { id } }")
        assert any("Missing" in e for e in errors)

    def test_syntax_error_is_reported(self, schema):
        errors = validate_document(schema, "query { getNetworks { id }")
        assert errors

    def test_accepts_graphql_schema(self, schema):
        assert validate_document(schema.to_graphql_schema(), "{ getNetworks { id } }") == []

    def test_rejects_other_objects(self):
        with pytest.raises(TypeError):
            validate_document({"__schema": {}}, "{ a }")


class TestOperationHelpers:
    """parse_document / operation_name / operation_type"""

    def test_parse_error(self):
        with pytest.raises(DocumentError):
            parse_document("query {")

    def test_anonymous_operation(self):
        assert operation_name("{ getNetworks { id } }") is None

    def test_multiple_operations(self):
        with pytest.raises(DocumentError):
            operation_name("query A { a } query B { b }")

    def test_fragments_are_not_operations(self):
        source = "query A { ...F } fragment F on Query { a }"
        assert operation_type(source) == "query"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
