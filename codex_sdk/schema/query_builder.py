"""
GraphQL operation builder

Derives a full operation document for a root field from the introspection
schema: every scalar/enum leaf reachable from the field's return type is
selected (down to MAX_SELECTION_DEPTH), and each field argument becomes an
operation variable with the same name.

    query Token($input: TokenInput!) {
      token(input: $input) {
        address
        exchanges {
          id
        }
      }
    }
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..constants import MAX_SELECTION_DEPTH
from .introspection import (
    InputValue,
    IntrospectionSchema,
    SchemaError,
    SchemaField,
    SchemaType,
    TypeRef,
)

# A selection is a list of leaf names and {field_name: nested selection} dicts
Fields = List[Union[str, Dict[str, "Fields"]]]
TypeIndex = Mapping[str, SchemaType]

INDENT = "  "


@dataclass(frozen=True)
class VariableSpec:
    """Variable declaration derived from an argument type

    type already carries the inner non-null marker ("ApiToken!");
    list and required describe the outer wrappers. Nested lists collapse
    into one list flag, so documents declare variables with
    type_object_to_string instead.
    """
    type: str
    required: bool = False
    list: bool = False

    @property
    def declaration(self) -> str:
        rendered = f"[{self.type}]" if self.list else self.type
        if self.required:
            rendered += "!"
        return rendered


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def _type_index(all_types: Union[IntrospectionSchema, Sequence[SchemaType], TypeIndex]) -> TypeIndex:
    if isinstance(all_types, IntrospectionSchema):
        return {t.name: t for t in all_types.types}
    if isinstance(all_types, Mapping):
        return all_types
    return {t.name: t for t in all_types}


def _has_required_args(field_def: SchemaField) -> bool:
    return any(
        arg.type.kind == "NON_NULL" and arg.default_value is None
        for arg in field_def.args
    )


def get_leaf_type(
    type_ref: Optional[TypeRef],
    all_types: Union[IntrospectionSchema, Sequence[SchemaType], TypeIndex],
    result: Optional[Fields] = None,
    current_name: str = "",
    level: int = 0,
) -> Fields:
    """Collect the leaf selection for a type

    Args:
        type_ref: Type to expand
        all_types: Schema (or its types) used to resolve object fields
        result: Selection collected so far
        current_name: Name of the field being expanded
        level: Nesting level; 0 is the root field itself

    Returns:
        Selection list. At level 0 the object's leaves are returned flat,
        deeper objects are nested under their field name.

    Raises:
        SchemaError: Unknown type kind
    """
    result = list(result or [])
    types = _type_index(all_types)
    if level > MAX_SELECTION_DEPTH or type_ref is None or not type_ref.kind:
        return result
    if type_ref.kind == "UNION":
        return result

    if type_ref.kind in ("SCALAR", "ENUM"):
        return result + [current_name]

    if type_ref.kind in ("OBJECT", "INTERFACE"):
        sub_type = types.get(type_ref.name)
        leaves: Fields = []
        for sub_field in (sub_type.fields if sub_type else []):
            # Nested fields with mandatory arguments cannot be selected bare
            if _has_required_args(sub_field):
                continue
            leaves.extend(get_leaf_type(sub_field.type, types, [], sub_field.name, level + 1))
        if level == 0:
            return result + leaves
        if not leaves:
            return result
        return result + [{current_name: leaves}]

    if type_ref.kind in ("LIST", "NON_NULL"):
        return get_leaf_type(type_ref.of_type, types, result, current_name, level)

    raise SchemaError(f"Unknown type {type_ref.name} {type_ref.kind}")


def get_leaf_args(type_ref: TypeRef, result: Optional[dict] = None) -> VariableSpec:
    """Variable declaration for an argument type

    Raises:
        SchemaError: Unknown type kind
    """
    result = dict(result or {})
    inner = type_ref.of_type

    if type_ref.kind == "NON_NULL" and inner is not None and inner.kind in (
        "INPUT_OBJECT", "SCALAR", "OBJECT", "ENUM"
    ):
        return VariableSpec(**{**result, "type": f"{inner.name}!"})

    if type_ref.kind in ("SCALAR", "OBJECT", "ENUM", "INPUT_OBJECT"):
        return VariableSpec(**{**result, "type": type_ref.name})

    if type_ref.kind == "LIST":
        return get_leaf_args(inner, {**result, "list": True})

    if type_ref.kind == "NON_NULL":
        return get_leaf_args(inner, {**result, "required": True})

    raise SchemaError(f"Unknown type {type_ref.name} {type_ref.kind}")


def parse_variables(args: Iterable[InputValue]) -> Dict[str, VariableSpec]:
    """Map each argument name to its variable declaration"""
    return {arg.name: get_leaf_args(arg.type) for arg in args}


def type_object_to_string(type_ref: TypeRef) -> str:
    """Render a type reference in SDL notation, e.g. [ApiToken!]!"""
    if type_ref.kind == "NON_NULL":
        return f"{type_object_to_string(type_ref.of_type)}!"
    if type_ref.kind == "LIST":
        return f"[{type_object_to_string(type_ref.of_type)}]"
    if not type_ref.name:
        raise SchemaError(f"Named type without a name ({type_ref.kind})")
    return type_ref.name


def transform_args_to_input_wrapper(args: Iterable[InputValue]) -> str:
    """Render an argument list as it appears in SDL: (token: String!)"""
    rendered = [f"{arg.name}: {type_object_to_string(arg.type)}" for arg in args]
    if not rendered:
        return ""
    return f"({', '.join(rendered)})"


def describe_field(field_def: SchemaField) -> str:
    """One-line SDL signature of a root field"""
    return (
        f"{field_def.name}{transform_args_to_input_wrapper(field_def.args)}: "
        f"{type_object_to_string(field_def.type)}"
    )


def render_selection(fields: Fields, depth: int = 1) -> List[str]:
    """Render a selection list as indented lines"""
    lines: List[str] = []
    for item in fields:
        if isinstance(item, str):
            lines.append(f"{INDENT * depth}{item}")
            continue
        for name, nested in item.items():
            lines.append(f"{INDENT * depth}{name} {{")
            lines.extend(render_selection(nested, depth + 1))
            lines.append(f"{INDENT * depth}}}")
    return lines


def render_operation(
    kind: str,
    field_def: SchemaField,
    all_types: Union[IntrospectionSchema, Sequence[SchemaType], TypeIndex],
) -> str:
    """Render the complete operation document for a root field

    Args:
        kind: query, mutation or subscription
        field_def: Root field of the matching root type
        all_types: Schema used to resolve the return type

    Returns:
        GraphQL document text, newline terminated
    """
    variables = parse_variables(field_def.args)
    selection = [f for f in get_leaf_type(field_def.type, all_types, [], "") if f]

    header = f"{kind} {capitalize(field_def.name)}"
    if variables:
        declarations = ", ".join(f"${arg.name}: {type_object_to_string(arg.type)}" for arg in field_def.args)
        header += f"({declarations})"

    call = field_def.name
    if variables:
        call += "(" + ", ".join(f"{name}: ${name}" for name in variables) + ")"

    lines = [f"{header} {{"]
    if selection:
        lines.append(f"{INDENT}{call} {{")
        lines.extend(render_selection(selection, depth=2))
        lines.append(f"{INDENT}}}")
    else:
        lines.append(f"{INDENT}{call}")
    lines.append("}")
    return "\n".join(lines) + "\n"
