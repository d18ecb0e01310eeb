"""
Introspection schema model

The published Codex schema is distributed as a standard GraphQL
introspection result (`{"__schema": {...}}`). These dataclasses mirror the
parts of it the generators need:
- TypeRef: a (possibly wrapped) type reference, e.g. [ApiToken!]!
- InputValue: an argument or input object field
- SchemaField: an output field, with its arguments
- SchemaType: a named type (OBJECT, INPUT_OBJECT, ENUM, SCALAR, UNION, ...)
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import requests
from graphql import build_client_schema

from ..constants import SCHEMA_URL

logger = logging.getLogger(__name__)

WRAPPER_KINDS = ("NON_NULL", "LIST")
NAMED_KINDS = ("SCALAR", "OBJECT", "INTERFACE", "UNION", "ENUM", "INPUT_OBJECT")


class SchemaError(Exception):
    """Malformed or unsupported schema"""
    pass


@dataclass(frozen=True)
class TypeRef:
    """Type reference. Wrapper kinds carry of_type, named kinds carry name."""
    kind: Optional[str]
    name: Optional[str] = None
    of_type: Optional["TypeRef"] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["TypeRef"]:
        if not data:
            return None
        return cls(
            kind=data.get("kind"),
            name=data.get("name"),
            of_type=cls.from_dict(data.get("ofType")),
        )

    @property
    def named_type(self) -> Optional["TypeRef"]:
        """Innermost named type, with all NON_NULL/LIST wrappers removed"""
        ref = self
        while ref is not None and ref.kind in WRAPPER_KINDS:
            ref = ref.of_type
        return ref

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "name": self.name,
            "ofType": self.of_type.to_dict() if self.of_type else None,
        }


@dataclass(frozen=True)
class InputValue:
    """Argument of a field, or field of an input object"""
    name: str
    type: TypeRef
    description: Optional[str] = None
    default_value: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "InputValue":
        return cls(
            name=data["name"],
            type=TypeRef.from_dict(data["type"]),
            description=data.get("description"),
            default_value=data.get("defaultValue"),
        )


@dataclass(frozen=True)
class SchemaField:
    """Output field of an object or interface"""
    name: str
    type: TypeRef
    args: List[InputValue] = field(default_factory=list)
    description: Optional[str] = None
    is_deprecated: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "SchemaField":
        return cls(
            name=data["name"],
            type=TypeRef.from_dict(data["type"]),
            args=[InputValue.from_dict(a) for a in data.get("args") or []],
            description=data.get("description"),
            is_deprecated=bool(data.get("isDeprecated", False)),
        )


@dataclass(frozen=True)
class SchemaType:
    """Named type of the schema"""
    kind: str
    name: str
    description: Optional[str] = None
    fields: List[SchemaField] = field(default_factory=list)
    input_fields: List[InputValue] = field(default_factory=list)
    enum_values: List[str] = field(default_factory=list)
    possible_types: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "SchemaType":
        return cls(
            kind=data["kind"],
            name=data["name"],
            description=data.get("description"),
            fields=[SchemaField.from_dict(f) for f in data.get("fields") or []],
            input_fields=[InputValue.from_dict(f) for f in data.get("inputFields") or []],
            enum_values=[v["name"] for v in data.get("enumValues") or []],
            possible_types=[t["name"] for t in data.get("possibleTypes") or []],
        )

    @property
    def is_internal(self) -> bool:
        """Introspection meta types (__Schema, __Type, ...)"""
        return self.name.startswith("__")


@dataclass
class IntrospectionSchema:
    """Parsed introspection result

    Keeps the raw payload around so graphql-core can rebuild a full
    GraphQLSchema for document validation.
    """
    types: List[SchemaType]
    query_type: Optional[str] = "Query"
    mutation_type: Optional[str] = None
    subscription_type: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        self._by_name = {t.name: t for t in self.types}

    @classmethod
    def from_dict(cls, data: dict) -> "IntrospectionSchema":
        """Accepts `{"__schema": ...}` or `{"data": {"__schema": ...}}`"""
        if "data" in data and isinstance(data["data"], dict):
            data = data["data"]
        schema = data.get("__schema")
        if not schema:
            raise SchemaError("Introspection result has no '__schema' field")

        def root_name(key: str) -> Optional[str]:
            root = schema.get(key)
            return root.get("name") if root else None

        return cls(
            types=[SchemaType.from_dict(t) for t in schema.get("types") or []],
            query_type=root_name("queryType"),
            mutation_type=root_name("mutationType"),
            subscription_type=root_name("subscriptionType"),
            raw={"__schema": schema},
        )

    def find_type(self, name: Optional[str]) -> Optional[SchemaType]:
        if name is None:
            return None
        return self._by_name.get(name)

    def root_type(self, kind: str) -> Optional[SchemaType]:
        """Root type for an operation kind (query, mutation, subscription)"""
        names = {
            "query": self.query_type,
            "mutation": self.mutation_type,
            "subscription": self.subscription_type,
        }
        if kind not in names:
            raise SchemaError(f"Unknown operation kind: {kind}")
        return self.find_type(names[kind])

    def root_fields(self, kind: str) -> List[SchemaField]:
        root = self.root_type(kind)
        return list(root.fields) if root else []

    def to_graphql_schema(self):
        """Build a graphql-core GraphQLSchema from the introspection payload"""
        if not self.raw:
            raise SchemaError("Schema was not loaded from an introspection payload")
        return build_client_schema(self.raw)


def load_schema(path: Union[str, Path]) -> IntrospectionSchema:
    """Load an introspection JSON file from disk"""
    with open(path, "r", encoding="utf-8") as f:
        return IntrospectionSchema.from_dict(json.load(f))


def save_schema(schema: IntrospectionSchema, path: Union[str, Path]) -> Path:
    """Write the introspection payload back to disk (the format load_schema reads)"""
    if not schema.raw:
        raise SchemaError("Schema was not loaded from an introspection payload")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(schema.raw, f, indent=2)
        f.write("\n")
    return path


def fetch_schema(url: str = SCHEMA_URL, timeout: float = 30.0) -> IntrospectionSchema:
    """Download the published schema

    Args:
        url: Location of the introspection JSON
        timeout: Request timeout (seconds)

    Returns:
        Parsed IntrospectionSchema

    Raises:
        SchemaError: Download failed or the payload is not an introspection result
    """
    logger.info("Fetching schema from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.exceptions.RequestException as e:
        raise SchemaError(f"Failed to download schema from {url}: {e}") from e
    except ValueError as e:
        raise SchemaError(f"Schema at {url} is not valid JSON") from e

    schema = IntrospectionSchema.from_dict(payload)
    logger.info("Fetched schema with %d types", len(schema.types))
    return schema
