#!/usr/bin/env python3
"""
Launchpad Token Collection Script

Pages through the LaunchpadTokens query for each launchpad column
(new / completing / completed) and stores the rows as one table.

Usage:
    python scripts/collect_launchpad_tokens.py --network solana
    python scripts/collect_launchpad_tokens.py --network 1399811149 --pages 5 --format csv
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

import pandas as pd

sys.path.insert(0, str(Path(__file__).parent.parent))

from codex_sdk import Codex, CodexClientError, LaunchpadColumn, LaunchpadFeed, NETWORK_IDS
from codex_sdk.data.types import TokenFilterResult


def flatten(row: TokenFilterResult, column: LaunchpadColumn) -> dict:
    """One table row per token result"""
    token = row.token
    launchpad = row.launchpad
    return {
        "column": column.value,
        "token_id": row.token_id,
        "address": token.address if token else None,
        "network_id": token.network_id if token else None,
        "name": token.name if token else None,
        "symbol": token.symbol if token else None,
        "price_usd": row.price_usd,
        "change1": row.change1,
        "holders": row.holders,
        "market_cap": row.market_cap,
        "liquidity": row.liquidity,
        "txn_count1": row.txn_count1,
        "volume24": row.volume24,
        "created_at": row.created_at,
        "launchpad_name": launchpad.launchpad_name if launchpad else None,
        "graduation_percent": launchpad.graduation_percent if launchpad else None,
        "completed": launchpad.completed if launchpad else None,
        "migrated": launchpad.migrated if launchpad else None,
        "migrated_at": launchpad.migrated_at if launchpad else None,
    }


def collect_column(feed: LaunchpadFeed, column: LaunchpadColumn, pages: int, delay: float) -> pd.DataFrame:
    """
    Collect up to `pages` pages of one column.

    Args:
        feed: Feed providing the column's query variables
        column: Launchpad column
        pages: Maximum number of pages
        delay: Pause between requests (seconds)

    Returns:
        DataFrame of flattened rows (empty when nothing matched)
    """
    records: List[dict] = []
    for page, results in enumerate(feed.iter_pages(column, pages)):
        records.extend(flatten(r, column) for r in results)
        print(f"    Page {page + 1}: {len(results)} tokens")
        time.sleep(delay)

    return pd.DataFrame.from_records(records)


def resolve_network(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    if value.lower() in NETWORK_IDS:
        return NETWORK_IDS[value.lower()]
    return int(value)


def main():
    parser = argparse.ArgumentParser(description="Collect launchpad tokens into a CSV or parquet file")
    parser.add_argument("--network", type=str, default=None, help="Network name or ID (default: all)")
    parser.add_argument("--pages", type=int, default=3, help="Pages per column")
    parser.add_argument("--page-size", type=int, default=20, help="Tokens per page")
    parser.add_argument("--delay", type=float, default=0.5, help="Seconds between requests")
    parser.add_argument("--format", choices=["parquet", "csv"], default="parquet", help="Output format")
    parser.add_argument("--out-dir", type=str, default="data/launchpads", help="Output directory")
    args = parser.parse_args()

    try:
        network_id = resolve_network(args.network)
    except ValueError:
        print(f"✗ Unknown network: {args.network}")
        return 1

    print("=" * 70)
    print(" " * 20 + "LAUNCHPAD TOKEN COLLECTION")
    print("=" * 70)

    frames = []
    with Codex() as sdk:
        feed = LaunchpadFeed(sdk, network_id=network_id, page_size=args.page_size)

        for i, column in enumerate(LaunchpadColumn):
            print(f"\n[{i + 1}/{len(LaunchpadColumn)}] {column.value}")
            try:
                df = collect_column(feed, column, args.pages, args.delay)
            except CodexClientError as e:
                print(f"    ✗ Failed: {e}")
                continue
            print(f"    ✓ {len(df)} tokens")
            frames.append(df)

    frames = [df for df in frames if not df.empty]
    if not frames:
        print("\n✗ No tokens collected")
        return 1

    df = pd.concat(frames, ignore_index=True)
    df["created_at"] = pd.to_datetime(df["created_at"], unit="s", errors="coerce")
    df["migrated_at"] = pd.to_datetime(df["migrated_at"], unit="s", errors="coerce")

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    suffix = network_id if network_id else "all"
    output_file = out_dir / f"launchpad_tokens_{suffix}.{args.format}"

    if args.format == "csv":
        df.to_csv(output_file, index=False)
    else:
        df.to_parquet(output_file, index=False, compression="snappy")

    print("\nSummary")
    print("-" * 70)
    for column, count in df["column"].value_counts().items():
        print(f"  {column}: {count}")
    print(f"  File: {output_file.absolute()}")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
