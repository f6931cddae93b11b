#!/usr/bin/env python3
"""Example: Quickstart — session-file-store

Minimal working example: create a record, save it as a JSON file, load it
back, update it, and delete it.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install session-file-store
"""
from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path

import session_file_store
from session_file_store import DecodeError, FileStore, Record


async def run(directory: str) -> None:
    store = FileStore(directory, "prefix-", ".json")

    # Step 1: Create a session record
    record = Record.new({"count": 0})
    await store.create(record)
    print(f"Created {record.id} at {store.path(record.id)}")

    # Step 2: Load, update and save it
    loaded = await store.load(record.id)
    loaded.data["count"] += 1
    await store.save(loaded)
    print(f"Count is now {(await store.load(record.id)).data['count']}")

    # Step 3: Delete it; a later load fails
    await store.delete(record.id)
    try:
        await store.load(record.id)
    except DecodeError as exc:
        print(f"Load after delete failed: {exc.message}")

    print(f"Files left: {len(list(Path(directory).iterdir()))}")


def main() -> None:
    print(f"session-file-store version: {session_file_store.__version__}")
    with tempfile.TemporaryDirectory() as tmpdir:
        asyncio.run(run(tmpdir))


if __name__ == "__main__":
    main()
