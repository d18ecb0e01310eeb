"""
Codex API constants

Endpoints of the hosted GraphQL API and the scalar mapping table used when
mirroring the schema into Python:
- ID / String / Boolean / Int / Float: built-in GraphQL scalars
- JSON / Void: custom scalars of the Codex schema
- join__FieldSet / link__Import: Apollo Federation metadata scalars
"""

from pathlib import Path
from typing import Dict

# Hosted endpoints
DEFAULT_API_URL: str = "https://graph.codex.io/graphql"
DEFAULT_WS_URL: str = "wss://graph.codex.io/graphql"
SCHEMA_URL: str = "https://graph.codex.io/schema/latest.json"

# GraphQL scalar -> Python type name
SCALAR_TYPES: Dict[str, str] = {
    "ID": "str",
    "String": "str",
    "Boolean": "bool",
    "Int": "int",
    "Float": "float",
    "JSON": "Any",
    "Void": "None",
    "join__FieldSet": "str",
    "link__Import": "str",
}

# Fallback for custom scalars missing from SCALAR_TYPES
UNKNOWN_SCALAR_TYPE: str = "Any"

# Leaf expansion stops below this nesting level
MAX_SELECTION_DEPTH: int = 8

# Root operation kinds and the directories their documents live in
OPERATION_KINDS = ("query", "mutation", "subscription")
OPERATION_DIRECTORIES: Dict[str, str] = {
    "query": "generated_queries",
    "mutation": "generated_mutations",
    "subscription": "generated_subscriptions",
}

RESOURCES_DIR: Path = Path(__file__).parent / "resources"

# Introspection snapshot the checked-in documents and type module were generated from
SCHEMA_SNAPSHOT: Path = RESOURCES_DIR / "schema.json"
TYPES_MODULE_PATH: Path = Path(__file__).parent / "generated_types.py"

# Well-known network IDs
NETWORK_IDS: Dict[str, int] = {
    "ethereum": 1,
    "bsc": 56,
    "base": 8453,
    "arbitrum": 42161,
    "solana": 1399811149,
}

# Short-lived API tokens
TOKEN_EXPIRY_MS: int = 60 * 60 * 1000  # 1 hour
REFRESH_BUFFER_MS: int = 5 * 60 * 1000  # 5 minutes

# Launchpad feed
LAUNCHPAD_PAGE_SIZE: int = 20
LAUNCHPAD_COLUMN_CAP: int = 50
