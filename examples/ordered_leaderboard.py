#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from opencloud.datastores import Universe


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the top of an ordered data store")
    p.add_argument("store", nargs="?", default="Leaderboard")
    p.add_argument("limit", nargs="?", type=int, default=10)
    p.add_argument("--ascending", action="store_true")
    p.add_argument("--min", type=int, default=None, help="Only entries with value >= min")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    value_filter = f"entry >= {args.min}" if args.min is not None else None

    async with Universe.from_env() as universe:
        store = universe.get_ordered_data_store(args.store)
        pages = store.get_sorted(
            ascending=args.ascending, page_size=min(args.limit, 50), filter=value_filter
        )

        print("=" * 45)
        print(f"{'Rank':>5} | {'Key':25} | {'Value':>8}")
        print("-" * 45)
        rank = 0
        async for entry in pages:
            rank += 1
            print(f"{rank:>5} | {entry.key:25} | {entry.value:>8}")
            if rank >= args.limit:
                break
        print("=" * 45)


if __name__ == "__main__":
    asyncio.run(main())
