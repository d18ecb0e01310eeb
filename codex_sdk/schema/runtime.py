"""
Runtime support for generated type modules

Generated dataclasses keep the schema's field names (camelCase). Fields whose
name is a Python keyword get a trailing underscore and record the original
name in `metadata["graphql_name"]`.
"""

import sys
import typing
from dataclasses import Field, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, get_type_hints

GRAPHQL_NAME = "graphql_name"


def serialize(value: Any) -> Any:
    """Convert inputs, enums and lists into JSON-ready values"""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [serialize(v) for v in value]
    if isinstance(value, GraphQLInput):
        return value.to_dict()
    return value


def _graphql_names(cls) -> Dict[str, str]:
    return {f.name: f.metadata.get(GRAPHQL_NAME, f.name) for f in fields(cls)}


def _hints(cls) -> Dict[str, Any]:
    module = sys.modules.get(cls.__module__)
    return get_type_hints(cls, vars(module) if module else None)


def decode(hint: Any, value: Any) -> Any:
    """Decode a JSON value according to a type hint"""
    if value is None:
        return None

    origin = typing.get_origin(hint)
    if origin is typing.Union:
        candidates = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(candidates) == 1:
            return decode(candidates[0], value)
        # Unions of object types: pick by __typename when present
        typename = value.get("__typename") if isinstance(value, dict) else None
        for candidate in candidates:
            if getattr(candidate, "__name__", None) == typename:
                return decode(candidate, value)
        return value

    if origin in (list, typing.List):
        (item_hint,) = typing.get_args(hint) or (Any,)
        return [decode(item_hint, v) for v in value]

    if isinstance(hint, type):
        if issubclass(hint, Enum):
            return hint(value)
        if is_dataclass(hint) and isinstance(value, dict):
            return hint.from_dict(value)

    return value


class GraphQLObject:
    """Base of generated output types"""

    @classmethod
    def from_dict(cls, data: dict):
        hints = _hints(cls)
        kwargs = {}
        for attr, graphql_name in _graphql_names(cls).items():
            if graphql_name in data:
                kwargs[attr] = decode(hints.get(attr, Any), data[graphql_name])
        return cls(**kwargs)


class GraphQLInput:
    """Base of input types; None fields are omitted"""

    @classmethod
    def field_graphql_name(cls, f: Field) -> str:
        return f.metadata.get(GRAPHQL_NAME, f.name)

    def to_dict(self) -> dict:
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            data[self.field_graphql_name(f)] = serialize(value)
        return data
