"""Abstract base class for session stores.

A session framework drives a store through exactly four coroutines:
``create``, ``save``, ``load`` and ``delete``.  The framework owns the
record and identifier types; the store only persists them.

Classes
-------
- SessionStore  — abstract base for all stores
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from session_file_store.session.record import SessionIdLike


class SessionStore(ABC):
    """Capability interface consumed by a session framework.

    All methods are coroutines.  Implementations raise
    ``session_file_store.errors.SessionStoreError`` subclasses on failure.
    """

    @abstractmethod
    async def create(self, record: Any) -> None:
        """Persist a newly minted ``record``.

        Parameters
        ----------
        record:
            The record to store.  The framework may have just assigned its
            ``id``.
        """

    @abstractmethod
    async def save(self, record: Any) -> None:
        """Persist ``record``, replacing any previous state for its id.

        Parameters
        ----------
        record:
            The record to store.
        """

    @abstractmethod
    async def load(self, session_id: SessionIdLike) -> Any | None:
        """Return the record stored under ``session_id``.

        Parameters
        ----------
        session_id:
            The session to retrieve.

        Returns
        -------
        Any | None
            The stored record, or ``None`` where the implementation treats
            absence as a valid outcome.
        """

    @abstractmethod
    async def delete(self, session_id: SessionIdLike) -> None:
        """Remove the record stored under ``session_id``.

        Parameters
        ----------
        session_id:
            The session to remove.
        """


__all__ = ["SessionStore"]
