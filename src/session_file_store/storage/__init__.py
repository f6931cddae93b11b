"""Storage subpackage.

All stores implement the ``SessionStore`` ABC.

Public surface
--------------
- SessionStore     — abstract base class
- FileStore        — one file per session record
- FileStoreConfig  — immutable FileStore configuration
- LockingStore     — per-session-id asyncio locking wrapper
"""
from __future__ import annotations

from session_file_store.storage.base import SessionStore
from session_file_store.storage.filesystem import FileStore, FileStoreConfig
from session_file_store.storage.locking import LockingStore

__all__ = [
    "FileStore",
    "FileStoreConfig",
    "LockingStore",
    "SessionStore",
]
