"""
Query builder tests

Leaf selection, variable derivation and document rendering.
"""

import pytest

from ..constants import MAX_SELECTION_DEPTH
from ..schema.introspection import InputValue, SchemaError, SchemaField, SchemaType, TypeRef
from ..schema.query_builder import (
    VariableSpec,
    capitalize,
    get_leaf_args,
    get_leaf_type,
    parse_variables,
    render_operation,
    transform_args_to_input_wrapper,
    type_object_to_string,
)


def scalar(name="String"):
    return TypeRef(kind="SCALAR", name=name)


def non_null(ref):
    return TypeRef(kind="NON_NULL", of_type=ref)


def list_of(ref):
    return TypeRef(kind="LIST", of_type=ref)


def obj(name):
    return TypeRef(kind="OBJECT", name=name)


def find_field(schema, kind, name):
    return next(f for f in schema.root_fields(kind) if f.name == name)


class TestTypeObjectToString:
    """SDL rendering of type references"""

    def test_named(self):
        assert type_object_to_string(scalar("Int")) == "Int"

    def test_non_null_list_of_non_null(self):
        """[ApiToken!]!"""
        ref = non_null(list_of(non_null(obj("ApiToken"))))
        assert type_object_to_string(ref) == "[ApiToken!]!"

    def test_nameless_named_type(self):
        with pytest.raises(SchemaError):
            type_object_to_string(TypeRef(kind="SCALAR"))


class TestTransformArgs:
    """Argument list rendering"""

    def test_single_required_arg(self):
        args = [InputValue(name="token", type=non_null(scalar()))]
        assert transform_args_to_input_wrapper(args) == "(token: String!)"

    def test_multiple_args(self):
        args = [
            InputValue(name="address", type=scalar()),
            InputValue(name="networkId", type=non_null(scalar("Int"))),
        ]
        assert transform_args_to_input_wrapper(args) == "(address: String, networkId: Int!)"

    def test_no_args(self):
        assert transform_args_to_input_wrapper([]) == ""


class TestGetLeafArgs:
    """Variable declarations derived from argument types"""

    def test_nullable_scalar(self):
        spec = get_leaf_args(scalar("Int"))
        assert spec == VariableSpec(type="Int")
        assert spec.declaration == "Int"

    def test_non_null_input(self):
        spec = get_leaf_args(non_null(TypeRef(kind="INPUT_OBJECT", name="TokenInput")))
        assert spec.declaration == "TokenInput!"

    def test_list_of_inputs(self):
        spec = get_leaf_args(list_of(TypeRef(kind="INPUT_OBJECT", name="TokenRanking")))
        assert spec.list is True
        assert spec.declaration == "[TokenRanking]"

    def test_required_list_of_required(self):
        """[String!]!"""
        spec = get_leaf_args(non_null(list_of(non_null(scalar()))))
        assert spec == VariableSpec(type="String!", required=True, list=True)
        assert spec.declaration == "[String!]!"

    def test_unknown_kind(self):
        with pytest.raises(SchemaError):
            get_leaf_args(TypeRef(kind="MYSTERY", name="X"))

    def test_parse_variables(self):
        args = [
            InputValue(name="input", type=non_null(TypeRef(kind="INPUT_OBJECT", name="CreateApiTokensInput"))),
            InputValue(name="limit", type=scalar("Int")),
        ]
        variables = parse_variables(args)
        assert list(variables) == ["input", "limit"]
        assert variables["input"].declaration == "CreateApiTokensInput!"


class TestGetLeafType:
    """Leaf selection"""

    def test_scalar_root_has_no_selection(self, schema):
        assert [f for f in get_leaf_type(non_null(scalar()), schema) if f] == []

    def test_object_root_is_flat(self, schema):
        assert get_leaf_type(obj("Network"), schema) == ["id", "name"]

    def test_nested_objects_are_keyed_by_field(self, schema):
        selection = get_leaf_type(obj("EnhancedToken"), schema)
        assert selection[:3] == ["id", "address", "networkId"]
        assert {"info": ["imageThumbUrl"]} in selection
        launchpad = next(s for s in selection if isinstance(s, dict) and "launchpad" in s)
        assert "graduationPercent" in launchpad["launchpad"]

    def test_lists_are_unwrapped(self, schema):
        selection = get_leaf_type(non_null(list_of(non_null(obj("ApiToken")))), schema)
        assert selection == ["id", "token", "expiresTimeString", "requestLimit", "remaining"]

    def test_union_is_skipped(self):
        assert get_leaf_type(TypeRef(kind="UNION", name="Event"), []) == []

    def test_unknown_kind(self):
        with pytest.raises(SchemaError):
            get_leaf_type(TypeRef(kind="MYSTERY", name="X"), [])

    def test_depth_limit(self):
        """Self-referencing types stop expanding at MAX_SELECTION_DEPTH"""
        node = SchemaType(
            kind="OBJECT",
            name="Node",
            fields=[
                SchemaField(name="value", type=scalar()),
                SchemaField(name="child", type=obj("Node")),
            ],
        )
        selection = get_leaf_type(obj("Node"), [node])

        depth = 0
        current = selection
        while True:
            nested = [s for s in current if isinstance(s, dict)]
            if not nested:
                break
            depth += 1
            current = nested[0]["child"]
        assert depth == MAX_SELECTION_DEPTH - 1

    def test_fields_with_required_args_are_skipped(self):
        holder = SchemaType(
            kind="OBJECT",
            name="Holder",
            fields=[
                SchemaField(name="plain", type=scalar()),
                SchemaField(
                    name="balance",
                    type=scalar("Float"),
                    args=[InputValue(name="token", type=non_null(scalar()))],
                ),
            ],
        )
        assert get_leaf_type(obj("Holder"), [holder]) == ["plain"]


class TestRenderOperation:
    """Complete documents"""

    def test_query_without_variables(self, schema):
        document = render_operation("query", find_field(schema, "query", "getNetworks"), schema)
        assert document == (
            "query GetNetworks {\n"
            "  getNetworks {\n"
            "    id\n"
            "    name\n"
            "  }\n"
            "}\n"
        )

    def test_mutation_with_required_input(self, schema):
        document = render_operation("mutation", find_field(schema, "mutation", "createApiTokens"), schema)
        assert document.startswith(
            "mutation CreateApiTokens($input: CreateApiTokensInput!) {\n"
            "  createApiTokens(input: $input) {\n"
        )

    def test_scalar_result_has_no_braces(self, schema):
        document = render_operation("mutation", find_field(schema, "mutation", "deleteApiToken"), schema)
        assert document == (
            "mutation DeleteApiToken($id: String!) {\n"
            "  deleteApiToken(id: $id)\n"
            "}\n"
        )

    def test_nested_indentation(self, schema):
        document = render_operation("query", find_field(schema, "query", "token"), schema)
        assert "    info {\n      imageThumbUrl\n    }\n" in document

    def test_nested_list_variables_keep_wrapping(self):
        field_def = SchemaField(
            name="bars",
            type=scalar("Float"),
            args=[
                InputValue(name="points", type=list_of(list_of(non_null(scalar("Float"))))),
                InputValue(name="ranges", type=non_null(list_of(non_null(list_of(scalar("Int")))))),
            ],
        )
        document = render_operation("query", field_def, [])
        assert document == (
            "query Bars($points: [[Float!]], $ranges: [[Int]!]!) {\n"
            "  bars(points: $points, ranges: $ranges)\n"
            "}\n"
        )

    def test_capitalize(self):
        assert capitalize("onPriceUpdated") == "OnPriceUpdated"
        assert capitalize("") == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
