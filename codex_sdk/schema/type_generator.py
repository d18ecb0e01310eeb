"""
Python type module generator

Mirrors every named type of the schema as Python source:
- SCALAR       -> alias (ID = str, JSON = Any, ...)
- ENUM         -> class X(str, Enum)
- INPUT_OBJECT -> @dataclass based on GraphQLInput (None fields omitted)
- OBJECT       -> @dataclass based on GraphQLObject (all fields optional)
- UNION        -> Union[...] alias

Output is deterministic (types sorted by name) so the checked-in module can
be compared byte for byte with a fresh generation.
"""

import keyword
import re
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..constants import SCALAR_TYPES, UNKNOWN_SCALAR_TYPE
from .introspection import IntrospectionSchema, SchemaType, TypeRef

HEADER = '''"""
GraphQL schema types

Generated from the Codex introspection schema by codex_sdk.schema.type_generator.
Do not edit by hand; run scripts/build_types.py instead.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

from codex_sdk.schema.runtime import GraphQLInput, GraphQLObject
'''

BUILTIN_SCALARS = ("ID", "String", "Boolean", "Int", "Float")


def python_identifier(name: str) -> str:
    """Field name usable as a Python attribute"""
    if keyword.iskeyword(name):
        return f"{name}_"
    return name


def enum_member_name(value: str) -> str:
    """createdAt -> CREATED_AT, 1D -> VALUE_1D"""
    snake = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", value)
    snake = re.sub(r"[^0-9A-Za-z_]", "_", snake).upper()
    if not snake or snake[0].isdigit():
        snake = f"VALUE_{snake}"
    if keyword.iskeyword(snake):
        snake = f"{snake}_"
    return snake


def scalar_python_type(name: str) -> str:
    return SCALAR_TYPES.get(name, UNKNOWN_SCALAR_TYPE)


def python_type(type_ref: TypeRef, types: Dict[str, SchemaType], optional: bool = True) -> str:
    """Annotation for a type reference"""
    if type_ref.kind == "NON_NULL":
        return python_type(type_ref.of_type, types, optional=False)

    if type_ref.kind == "LIST":
        rendered = f"List[{python_type(type_ref.of_type, types)}]"
    else:
        named = types.get(type_ref.name)
        if type_ref.kind == "SCALAR" or (named is not None and named.kind == "SCALAR"):
            rendered = scalar_python_type(type_ref.name)
        else:
            rendered = type_ref.name

    if optional and rendered not in ("Any", "None"):
        return f"Optional[{rendered}]"
    return rendered


def _docstring(description: Optional[str], indent: str = "    ") -> List[str]:
    if not description:
        return []
    first_line = description.strip().splitlines()[0].replace('"""', "'''").strip()
    if not first_line:
        return []
    return [f'{indent}"""{first_line}"""']


def _field_line(name: str, annotation: str, required: bool) -> str:
    attr = python_identifier(name)
    if attr != name:
        if required:
            return f'    {attr}: {annotation} = field(metadata={{"graphql_name": "{name}"}})'
        return f'    {attr}: {annotation} = field(default=None, metadata={{"graphql_name": "{name}"}})'
    if required:
        return f"    {attr}: {annotation}"
    return f"    {attr}: {annotation} = None"


def render_scalars(schema: IntrospectionSchema) -> List[str]:
    lines = ["", "", "# Scalars"]
    custom = sorted(
        t.name for t in schema.types
        if t.kind == "SCALAR" and not t.is_internal and t.name not in BUILTIN_SCALARS
    )
    for name in list(BUILTIN_SCALARS) + custom:
        lines.append(f"{name} = {scalar_python_type(name)}")
    return lines


def render_enum(schema_type: SchemaType) -> List[str]:
    lines = ["", "", f"class {schema_type.name}(str, Enum):"]
    lines.extend(_docstring(schema_type.description))
    seen = set()
    for value in schema_type.enum_values:
        member = enum_member_name(value)
        while member in seen:
            member += "_"
        seen.add(member)
        lines.append(f'    {member} = "{value}"')
    if not schema_type.enum_values:
        lines.append("    pass")
    return lines


def render_input(schema_type: SchemaType, types: Dict[str, SchemaType]) -> List[str]:
    lines = ["", "", "@dataclass", f"class {schema_type.name}(GraphQLInput):"]
    lines.extend(_docstring(schema_type.description))

    # Dataclass fields without defaults must come first
    required = [f for f in schema_type.input_fields if f.type.kind == "NON_NULL"]
    optional = [f for f in schema_type.input_fields if f.type.kind != "NON_NULL"]
    for input_field in required:
        lines.append(_field_line(input_field.name, python_type(input_field.type, types), True))
    for input_field in optional:
        lines.append(_field_line(input_field.name, python_type(input_field.type, types), False))
    if not schema_type.input_fields:
        lines.append("    pass")
    return lines


def render_object(schema_type: SchemaType, types: Dict[str, SchemaType]) -> List[str]:
    lines = ["", "", "@dataclass", f"class {schema_type.name}(GraphQLObject):"]
    lines.extend(_docstring(schema_type.description))
    for object_field in schema_type.fields:
        # Responses are partial selections, so every field may be absent
        annotation = python_type(object_field.type, types, optional=True)
        if not annotation.startswith("Optional[") and annotation not in ("Any", "None"):
            annotation = f"Optional[{annotation}]"
        lines.append(_field_line(object_field.name, annotation, False))
    if not schema_type.fields:
        lines.append("    pass")
    return lines


def render_union(schema_type: SchemaType) -> List[str]:
    if not schema_type.possible_types:
        return ["", "", f"{schema_type.name} = Any"]
    members = ", ".join(f'"{name}"' for name in sorted(schema_type.possible_types))
    return ["", "", f"{schema_type.name} = Union[{members}]"]


def render_types_module(schema: IntrospectionSchema) -> str:
    """Python source mirroring the schema"""
    types = {t.name: t for t in schema.types}
    named = sorted((t for t in schema.types if not t.is_internal), key=lambda t: t.name)

    lines = HEADER.rstrip("\n").splitlines()
    lines.extend(render_scalars(schema))

    sections = (
        ("Enumerations", "ENUM", render_enum),
        ("Inputs", "INPUT_OBJECT", lambda t: render_input(t, types)),
        ("Objects", "OBJECT", lambda t: render_object(t, types)),
        ("Interfaces", "INTERFACE", lambda t: render_object(t, types)),
        ("Unions", "UNION", render_union),
    )
    for title, kind, render in sections:
        members = [t for t in named if t.kind == kind]
        if not members:
            continue
        lines.extend(["", "", f"# {title}"])
        for schema_type in members:
            block = render(schema_type)
            # First section entry follows the comment directly
            lines.extend(block[2:] if lines[-1].startswith("# ") else block)

    return "\n".join(lines) + "\n"


def write_types_module(schema: IntrospectionSchema, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_types_module(schema), encoding="utf-8")
    return path


def is_types_module_stale(schema: IntrospectionSchema, path: Union[str, Path]) -> bool:
    path = Path(path)
    if not path.exists():
        return True
    return path.read_text(encoding="utf-8") != render_types_module(schema)
