"""Session value types and record serialization.

Public surface
--------------
- SessionId        — opaque session token
- Record           — session payload plus expiry metadata
- SessionIdLike    — protocol for identifiers
- SessionRecord    — protocol for records
- RecordCodec      — abstract codec
- JsonRecordCodec  — JSON codec (default)
- YamlRecordCodec  — YAML codec
- CodecError       — codec failure
"""
from __future__ import annotations

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

__all__ = [
    "CodecError",
    "JsonRecordCodec",
    "Record",
    "RecordCodec",
    "SessionId",
    "SessionIdLike",
    "SessionRecord",
    "YamlRecordCodec",
]
