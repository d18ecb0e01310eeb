#!/usr/bin/env python3
"""
Build the Python type module from the schema snapshot

Writes codex_sdk/generated_types.py: enums, input dataclasses and object
dataclasses mirroring codex_sdk/resources/schema.json.

Usage:
    python scripts/build_types.py
    python scripts/build_types.py --check
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from codex_sdk.constants import SCHEMA_SNAPSHOT, TYPES_MODULE_PATH
from codex_sdk.schema import SchemaError, is_types_module_stale, load_schema, write_types_module


def main():
    parser = argparse.ArgumentParser(description="Generate the Python type module from the schema snapshot")
    parser.add_argument("--schema", type=str, default=str(SCHEMA_SNAPSHOT), help="Introspection JSON file")
    parser.add_argument("--out", type=str, default=str(TYPES_MODULE_PATH), help="Output module path")
    parser.add_argument("--check", action="store_true", help="Exit 1 when the module is out of date")
    args = parser.parse_args()

    try:
        schema = load_schema(args.schema)
    except (OSError, ValueError, SchemaError) as e:
        print(f"✗ Could not load schema: {e}")
        return 1

    if args.check:
        if is_types_module_stale(schema, args.out):
            print(f"✗ {args.out} is out of date. Run scripts/build_types.py to regenerate.")
            return 1
        print("✓ Type module is up to date")
        return 0

    path = write_types_module(schema, args.out)
    print(f"✓ Wrote {len(schema.types)} schema types to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
