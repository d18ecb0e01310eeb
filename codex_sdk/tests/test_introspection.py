"""
Introspection model tests
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from ..schema.introspection import (
    IntrospectionSchema,
    SchemaError,
    TypeRef,
    fetch_schema,
    load_schema,
    save_schema,
)


class TestTypeRef:
    """Wrapped type references"""

    def test_named_type_unwraps(self):
        ref = TypeRef.from_dict({
            "kind": "NON_NULL", "name": None,
            "ofType": {"kind": "LIST", "name": None, "ofType": {"kind": "OBJECT", "name": "ApiToken", "ofType": None}},
        })
        assert ref.named_type.name == "ApiToken"
        assert ref.of_type.kind == "LIST"

    def test_none(self):
        assert TypeRef.from_dict(None) is None


class TestIntrospectionSchema:
    """Loading the snapshot and payload shapes"""

    def test_root_types(self, schema):
        assert schema.query_type == "Query"
        assert schema.mutation_type == "Mutation"
        assert schema.subscription_type == "Subscription"
        assert [f.name for f in schema.root_fields("mutation")] == ["createApiTokens", "deleteApiToken"]

    def test_data_envelope(self, schema):
        wrapped = IntrospectionSchema.from_dict({"data": schema.raw})
        assert len(wrapped.types) == len(schema.types)

    def test_missing_schema(self):
        with pytest.raises(SchemaError):
            IntrospectionSchema.from_dict({"data": {}})

    def test_unknown_kind(self, schema):
        with pytest.raises(SchemaError):
            schema.root_type("fragment")

    def test_graphql_schema(self, schema):
        graphql_schema = schema.to_graphql_schema()
        assert "filterTokens" in graphql_schema.query_type.fields

    def test_save_round_trip(self, schema, tmp_path):
        path = save_schema(schema, tmp_path / "nested" / "schema.json")
        reloaded = load_schema(path)
        assert [t.name for t in reloaded.types] == [t.name for t in schema.types]

    def test_save_requires_payload(self, tmp_path):
        with pytest.raises(SchemaError):
            save_schema(IntrospectionSchema(types=[]), tmp_path / "schema.json")


class TestFetchSchema:
    """Download of the published schema"""

    @patch("codex_sdk.schema.introspection.requests.get")
    def test_fetch(self, mock_get, schema):
        mock_get.return_value = MagicMock(json=MagicMock(return_value=schema.raw))
        fetched = fetch_schema("https://schema.test/latest.json", timeout=5)

        assert fetched.find_type("Query") is not None
        mock_get.assert_called_once_with("https://schema.test/latest.json", timeout=5)

    @patch("codex_sdk.schema.introspection.requests.get")
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("offline")
        with pytest.raises(SchemaError, match="Failed to download"):
            fetch_schema("https://schema.test/latest.json")

    @patch("codex_sdk.schema.introspection.requests.get")
    def test_invalid_json(self, mock_get):
        mock_get.return_value = MagicMock(json=MagicMock(side_effect=ValueError("bad")))
        with pytest.raises(SchemaError, match="not valid JSON"):
            fetch_schema("https://schema.test/latest.json")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
