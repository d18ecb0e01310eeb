#!/usr/bin/env python3
"""
Generate operation documents from the Codex schema

One document per root field is written to
codex_sdk/resources/generated_{queries,mutations,subscriptions}/. The schema
used is saved as codex_sdk/resources/schema.json so the output can be
reproduced (and checked) offline.

Usage:
    # Fetch the published schema, refresh the snapshot and the documents
    python scripts/generate_queries.py

    # Use a local introspection file
    python scripts/generate_queries.py --schema /path/to/schema.json

    # Regenerate from the bundled snapshot without network access
    python scripts/generate_queries.py --offline

    # Exit 1 when the checked-in documents differ from the generator output
    python scripts/generate_queries.py --offline --check
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from codex_sdk import configure_logging
from codex_sdk.constants import RESOURCES_DIR, SCHEMA_SNAPSHOT, SCHEMA_URL
from codex_sdk.schema import SchemaError, fetch_schema, load_schema, save_schema, stale_operations, write_operations


def load(args):
    """Schema from --schema, the snapshot (--offline) or the published URL"""
    if args.schema:
        print(f"Loading schema from {args.schema}")
        return load_schema(args.schema), True
    if args.offline:
        print(f"Loading snapshot {SCHEMA_SNAPSHOT}")
        return load_schema(SCHEMA_SNAPSHOT), False
    print(f"Fetching schema from {args.url}")
    return fetch_schema(args.url), True


def main():
    parser = argparse.ArgumentParser(
        description="Generate GraphQL operation documents for every root field",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--schema", type=str, help="Introspection JSON file")
    source.add_argument("--offline", action="store_true", help="Use the bundled schema snapshot")
    parser.add_argument("--url", type=str, default=SCHEMA_URL, help="Published schema URL")
    parser.add_argument("--out", type=str, default=str(RESOURCES_DIR), help="Output directory")
    parser.add_argument("--check", action="store_true", help="Only report stale files")
    parser.add_argument("--verbose", action="store_true", help="Log every file written")
    args = parser.parse_args()

    if args.verbose:
        configure_logging()

    try:
        schema, refresh_snapshot = load(args)
    except (OSError, ValueError, SchemaError) as e:
        print(f"✗ Could not load schema: {e}")
        return 1

    if args.check:
        stale = stale_operations(schema, args.out)
        if stale:
            print(f"✗ {len(stale)} document(s) out of date:")
            for path in stale:
                print(f"  - {path}")
            print("Run scripts/generate_queries.py to regenerate.")
            return 1
        print("✓ Operation documents are up to date")
        return 0

    written = write_operations(schema, args.out)
    print(f"✓ Wrote {len(written)} documents to {args.out}")

    if refresh_snapshot:
        save_schema(schema, SCHEMA_SNAPSHOT)
        print(f"✓ Saved schema snapshot to {SCHEMA_SNAPSHOT}")
        print("  Next: python scripts/build_types.py")
    return 0


if __name__ == "__main__":
    sys.exit(main())
