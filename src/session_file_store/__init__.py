"""session-file-store — file-per-session persistence for session frameworks.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> from session_file_store import FileStore
>>> store = FileStore("/tmp/sessions", "s-", ".json")
>>> store.path("abc123").endswith("s-abc123.json")
True
"""
from __future__ import annotations

from session_file_store.errors import DecodeError, SessionStoreError
from session_file_store.session.codec import (
    CodecError,
    JsonRecordCodec,
    RecordCodec,
    YamlRecordCodec,
)
from session_file_store.session.record import (
    Record,
    SessionId,
    SessionIdLike,
    SessionRecord,
)
from session_file_store.storage.base import SessionStore
from session_file_store.storage.filesystem import FileStore, FileStoreConfig
from session_file_store.storage.locking import LockingStore

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "DecodeError",
    "SessionStoreError",
    # Session types
    "Record",
    "SessionId",
    "SessionIdLike",
    "SessionRecord",
    # Codecs
    "CodecError",
    "JsonRecordCodec",
    "RecordCodec",
    "YamlRecordCodec",
    # Storage
    "FileStore",
    "FileStoreConfig",
    "LockingStore",
    "SessionStore",
]
