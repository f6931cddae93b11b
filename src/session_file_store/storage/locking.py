"""Per-session locking wrapper for any ``SessionStore``.

``FileStore`` does no coordination of its own.  ``LockingStore`` serializes
operations that target the same session id within one process, so that a
``save`` never interleaves with a ``load`` or another ``save`` of the same
record.  Operations on different ids run concurrently.  Locks held by other
processes are not visible; use a different backend for that.

Classes
-------
- LockingStore  — wraps a store with one ``asyncio.Lock`` per session id
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from session_file_store.session.record import SessionIdLike
from session_file_store.storage.base import SessionStore

logger = logging.getLogger(__name__)


class LockingStore(SessionStore):
    """Serialize same-id operations on an inner store.

    Locks are created on demand and discarded once no coroutine holds or
    waits for them, so the lock table only ever covers in-flight ids.

    Parameters
    ----------
    inner:
        The store every operation is delegated to.
    """

    def __init__(self, inner: SessionStore) -> None:
        self._inner = inner
        self._locks: dict[str, asyncio.Lock] = {}
        self._waiters: dict[str, int] = {}

    @property
    def inner(self) -> SessionStore:
        return self._inner

    @asynccontextmanager
    async def _locked(self, session_id: SessionIdLike) -> AsyncIterator[None]:
        key = str(session_id)
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._waiters[key] -= 1
            if self._waiters[key] == 0:
                del self._waiters[key]
                del self._locks[key]
                logger.debug("LockingStore: released lock for %r", key)

    def active_locks(self) -> int:
        """Return the number of session ids currently locked or awaited."""
        return len(self._locks)

    # ------------------------------------------------------------------
    # SessionStore interface
    # ------------------------------------------------------------------

    async def create(self, record: Any) -> None:
        async with self._locked(record.id):
            await self._inner.create(record)

    async def save(self, record: Any) -> None:
        async with self._locked(record.id):
            await self._inner.save(record)

    async def load(self, session_id: SessionIdLike) -> Any | None:
        async with self._locked(session_id):
            return await self._inner.load(session_id)

    async def delete(self, session_id: SessionIdLike) -> None:
        async with self._locked(session_id):
            await self._inner.delete(session_id)

    def __repr__(self) -> str:
        return f"LockingStore(inner={self._inner!r})"


__all__ = ["LockingStore"]
