"""
Type module generator tests
"""

import pytest

from .. import generated_types
from ..constants import TYPES_MODULE_PATH
from ..schema.introspection import InputValue, SchemaType, TypeRef
from ..schema.type_generator import (
    enum_member_name,
    is_types_module_stale,
    python_identifier,
    python_type,
    render_enum,
    render_input,
    render_types_module,
    render_union,
    write_types_module,
)


class TestNames:
    """Identifier mapping"""

    @pytest.mark.parametrize("value,expected", [
        ("createdAt", "CREATED_AT"),
        ("ASC", "ASC"),
        ("txnCount1", "TXN_COUNT1"),
        ("UnconfirmedDeployed", "UNCONFIRMED_DEPLOYED"),
        ("1D", "VALUE_1D"),
        ("buy-side", "BUY_SIDE"),
    ])
    def test_enum_member_name(self, value, expected):
        assert enum_member_name(value) == expected

    def test_keyword_fields(self):
        assert python_identifier("from") == "from_"
        assert python_identifier("address") == "address"


class TestPythonType:
    """Annotations"""

    def test_nullable_scalar(self, schema):
        types = {t.name: t for t in schema.types}
        assert python_type(TypeRef(kind="SCALAR", name="Int"), types) == "Optional[int]"

    def test_required_list(self, schema):
        types = {t.name: t for t in schema.types}
        ref = TypeRef(kind="NON_NULL", of_type=TypeRef(kind="LIST", of_type=TypeRef(
            kind="NON_NULL", of_type=TypeRef(kind="OBJECT", name="ApiToken"))))
        assert python_type(ref, types) == "List[ApiToken]"

    def test_json_scalar_is_any(self, schema):
        types = {t.name: t for t in schema.types}
        assert python_type(TypeRef(kind="SCALAR", name="JSON"), types) == "Any"

    def test_unknown_scalar(self):
        assert python_type(TypeRef(kind="SCALAR", name="BigDecimal"), {}) == "Any"


class TestRenderBlocks:
    """Single type renderers"""

    def test_enum(self):
        lines = render_enum(SchemaType(kind="ENUM", name="RankingDirection", enum_values=["ASC", "DESC"]))
        assert lines[2:] == [
            "class RankingDirection(str, Enum):",
            '    ASC = "ASC"',
            '    DESC = "DESC"',
        ]

    def test_input_required_fields_first(self):
        string = TypeRef(kind="SCALAR", name="String")
        schema_type = SchemaType(
            kind="INPUT_OBJECT",
            name="WebhookInput",
            input_fields=[
                InputValue(name="alertRecurrence", type=string),
                InputValue(name="callbackUrl", type=TypeRef(kind="NON_NULL", of_type=string)),
                InputValue(name="from", type=string),
            ],
        )
        assert render_input(schema_type, {})[2:] == [
            "@dataclass",
            "class WebhookInput(GraphQLInput):",
            "    callbackUrl: str",
            "    alertRecurrence: Optional[str] = None",
            '    from_: Optional[str] = field(default=None, metadata={"graphql_name": "from"})',
        ]

    def test_union(self):
        union = SchemaType(kind="UNION", name="PairEvent", possible_types=["Swap", "Mint"])
        assert render_union(union)[-1] == 'PairEvent = Union["Mint", "Swap"]'

    def test_empty_union(self):
        assert render_union(SchemaType(kind="UNION", name="Nothing"))[-1] == "Nothing = Any"


class TestTypesModule:
    """Whole-module output"""

    def test_checked_in_module_is_up_to_date(self, schema):
        assert TYPES_MODULE_PATH.read_text(encoding="utf-8") == render_types_module(schema)
        assert not is_types_module_stale(schema, TYPES_MODULE_PATH)

    def test_deterministic(self, schema):
        assert render_types_module(schema) == render_types_module(schema)

    def test_sections_in_order(self, schema):
        source = render_types_module(schema)
        positions = [source.index(f"# {title}") for title in ("Scalars", "Enumerations", "Inputs", "Objects")]
        assert positions == sorted(positions)
        assert "# Unions" not in source

    def test_custom_scalars_follow_builtins(self, schema):
        source = render_types_module(schema)
        assert "JSON = Any\nVoid = None\njoin__FieldSet = str\nlink__Import = str\n" in source
        assert generated_types.Void is None
        assert generated_types.join__FieldSet is str
        assert generated_types.link__Import is str

    def test_write_and_compile(self, schema, tmp_path):
        path = write_types_module(schema, tmp_path / "out" / "types.py")
        compile(path.read_text(), str(path), "exec")
        assert not is_types_module_stale(schema, path)

    def test_missing_module_is_stale(self, schema, tmp_path):
        assert is_types_module_stale(schema, tmp_path / "missing.py")


class TestGeneratedTypes:
    """Runtime behaviour of the generated dataclasses"""

    def test_object_from_dict(self):
        connection = generated_types.TokenFilterConnection.from_dict({
            "count": 1,
            "results": [{
                "priceUSD": "0.5",
                "token": {"id": "abc:1", "launchpad": {"graduationPercent": 42.5}},
            }, None],
        })
        assert connection.count == 1
        assert connection.results[0].token.launchpad.graduationPercent == 42.5
        assert connection.results[1] is None

    def test_enum_fields_are_decoded(self):
        event = generated_types.LaunchpadTokenEventOutput.from_dict({"eventType": "Migrated"})
        assert event.eventType is generated_types.LaunchpadTokenEventType.MIGRATED

    def test_input_to_dict_omits_none(self):
        filters = generated_types.TokenFilters(
            launchpadMigrated=False,
            marketCap=generated_types.NumberFilter(gte=1000.0),
        )
        assert filters.to_dict() == {"launchpadMigrated": False, "marketCap": {"gte": 1000.0}}

    def test_ranking_serialises_enums(self):
        ranking = generated_types.TokenRanking(
            attribute=generated_types.TokenRankingAttribute.TRENDING_SCORE,
            direction=generated_types.RankingDirection.DESC,
        )
        assert ranking.to_dict() == {"attribute": "trendingScore", "direction": "DESC"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
