#!/usr/bin/env python3
"""Example: LockingStore

Shows many concurrent saves to one session id through a ``LockingStore``,
so that each write completes before the next one starts.

Usage:
    python examples/02_locking_store.py
"""
from __future__ import annotations

import asyncio
import tempfile

from session_file_store import FileStore, LockingStore, Record, SessionId


async def run(directory: str) -> None:
    store = LockingStore(FileStore(directory, "s-", ".json", atomic_writes=True))
    session_id = SessionId.generate()

    await asyncio.gather(
        *(store.save(Record(id=session_id, data={"n": n})) for n in range(10))
    )
    final = await store.load(session_id)
    print(f"Final payload for {session_id}: {final.data}")


def main() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        asyncio.run(run(tmpdir))


if __name__ == "__main__":
    main()
