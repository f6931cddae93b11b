"""Exception types raised at the storage boundary.

Every storage failure, whatever its cause, surfaces as ``DecodeError`` so
that a session framework has a single error kind to handle.  The message
carries the underlying failure's text; callers that need to tell a missing
file from a corrupt document must inspect it.

Classes
-------
- SessionStoreError  — base class for all package errors
- DecodeError        — the single boundary error kind
"""
from __future__ import annotations


class SessionStoreError(Exception):
    """Base class for errors raised by session stores."""


class DecodeError(SessionStoreError):
    """Raised when a record cannot be encoded, written, read, decoded or removed.

    Parameters
    ----------
    message:
        Human-readable description derived from the underlying failure.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


__all__ = ["DecodeError", "SessionStoreError"]
