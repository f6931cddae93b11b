"""Session identifier and record value types.

These are the types a session framework hands to a store.  The store treats
both as opaque: it only renders identifiers with ``str()`` and only reads a
record's ``id`` attribute.  The concrete ``SessionId`` and ``Record`` here are
the default pair; anything satisfying ``SessionIdLike`` / ``SessionRecord``
works with a matching codec.

Classes
-------
- SessionIdLike  — protocol: anything with a stable string rendering
- SessionRecord  — protocol: anything exposing an ``id`` attribute
- SessionId      — opaque session token
- Record         — session payload plus expiry metadata
"""
from __future__ import annotations

import base64
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field, GetCoreSchemaHandler
from pydantic_core import core_schema

DEFAULT_EXPIRY: timedelta = timedelta(weeks=2)

_ID_BYTES = 16


@runtime_checkable
class SessionIdLike(Protocol):
    """An identifier that renders to a unique, filesystem-safe string."""

    def __str__(self) -> str: ...


@runtime_checkable
class SessionRecord(Protocol):
    """A record that exposes the identifier it is stored under."""

    id: Any


class SessionId:
    """Opaque session token.

    Wraps a non-empty string.  Two ids are equal when their strings are
    equal.  Pydantic validates a ``SessionId`` field from either a string or
    an existing ``SessionId`` and serializes it back to its string form.

    Parameters
    ----------
    value:
        The token text.

    Raises
    ------
    ValueError
        If ``value`` is empty.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"SessionId expects a str, got {type(value).__name__}")
        if not value:
            raise ValueError("SessionId must not be empty")
        self._value = value

    @classmethod
    def generate(cls) -> SessionId:
        """Return a new random id: 128 bits, unpadded URL-safe base64."""
        raw = secrets.token_bytes(_ID_BYTES)
        return cls(base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii"))

    @classmethod
    def _validate(cls, value: object) -> SessionId:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        raise ValueError(f"Cannot interpret {value!r} as a SessionId")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"SessionId({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SessionId):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


def _default_expiry() -> datetime:
    return datetime.now(timezone.utc) + DEFAULT_EXPIRY


class Record(BaseModel):
    """One session's persisted state.

    Parameters
    ----------
    id:
        The session identifier; the record is stored under ``str(id)``.
    data:
        Arbitrary JSON-compatible session payload.
    expiry_date:
        When the session expires (UTC).  Evaluated by the framework, never
        by the store.
    """

    id: SessionId
    data: dict[str, Any] = Field(default_factory=dict)
    expiry_date: datetime = Field(default_factory=_default_expiry)

    @classmethod
    def new(cls, data: dict[str, Any] | None = None) -> Record:
        """Return a record with a freshly generated id."""
        return cls(id=SessionId.generate(), data=data or {})


__all__ = [
    "DEFAULT_EXPIRY",
    "Record",
    "SessionId",
    "SessionIdLike",
    "SessionRecord",
]
