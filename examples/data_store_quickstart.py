#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from opencloud.datastores import DataStoreSetOptions, Universe


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Write, read and list a standard data store")
    p.add_argument("store", nargs="?", default="Inventory")
    p.add_argument("key", nargs="?", default="player_1")
    p.add_argument("--scope", default="global")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with Universe.from_env() as universe:
        store = universe.get_data_store(args.store, args.scope)

        options = DataStoreSetOptions()
        options.set_metadata({"source": "quickstart"})
        version = await store.set(args.key, {"gold": 10, "items": ["sword"]}, [1], options)
        value, info = await store.get(args.key)

        print("=" * 65)
        print(f"Store      : {store.name} ({store.scope})")
        print(f"Key        : {args.key}")
        print(f"Version    : {version}")
        print(f"Value      : {value}")
        print(f"User ids   : {info.get_user_ids()}")
        print(f"Metadata   : {info.get_metadata()}")
        print("=" * 65)
        print(f"{'Key':30} | {'Scope':>15}")
        print("-" * 48)
        async for entry in store.list_keys(page_size=10):
            print(f"{entry.key:30} | {entry.scope:>15}")
        print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
