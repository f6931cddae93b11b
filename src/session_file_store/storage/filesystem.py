"""Filesystem session store.

Persists each session record as one file under a base directory.  The file
for a session lives at::

    <directory><os.sep><prefix><session id><suffix>

For example ``FileStore("/var/lib/sessions", "prefix-", ".json")`` produces
files such as ``/var/lib/sessions/prefix-CI4afkzk6tVMRb50lMyZAA.json``.

There is no locking, no cache and no index: the directory is the store of
record.  Two concurrent saves of the same session race and the last write
wins.  Wrap the store in ``LockingStore`` when that matters.

Classes
-------
- FileStoreConfig  — immutable directory / prefix / suffix configuration
- FileStore        — file-per-session ``SessionStore``
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from session_file_store.errors import DecodeError
from session_file_store.session.codec import CodecError, JsonRecordCodec, RecordCodec
from session_file_store.session.record import SessionIdLike
from session_file_store.storage.base import SessionStore

logger = logging.getLogger(__name__)

_TEMP_SUFFIX = ".tmp"


class FileStoreConfig(BaseModel):
    """Where and how a ``FileStore`` lays out its files.

    Parameters
    ----------
    directory:
        Base directory.  Omit any trailing path separator; one is always
        inserted between the directory and the file name.
    prefix:
        Prepended to every file name.  Defaults to ``""``.
    suffix:
        Appended to every file name, typically an extension such as
        ``".json"``.  Defaults to ``""``.
    atomic_writes:
        Write to a temporary file and rename it over the target instead of
        overwriting in place.  Defaults to False.
    """

    directory: str
    prefix: str = ""
    suffix: str = ""
    atomic_writes: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_yaml(cls, path: str | Path, **overrides: object) -> FileStoreConfig:
        """Load a configuration mapping from the YAML file at ``path``.

        Keyword ``overrides`` replace the file's values before validation.

        Raises
        ------
        OSError
            If the file cannot be read.
        yaml.YAMLError
            If the file is not valid YAML.
        pydantic.ValidationError
            If the merged mapping is not a valid configuration.
        """
        with open(path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if isinstance(data, dict):
            data = {**data, **overrides}
        return cls.model_validate(data)


class FileStore(SessionStore):
    """Stores each session record in its own file.

    ``create`` and ``save`` are the same operation: both serialize the
    record and overwrite whatever is at its path.  ``load`` never returns
    ``None``; a missing file raises ``DecodeError`` like any other failure.

    Parameters
    ----------
    directory:
        Base directory for session files.  Not created by the store.
    prefix:
        File name prefix.
    suffix:
        File name suffix.
    codec:
        Record codec.  Defaults to ``JsonRecordCodec()``.
    atomic_writes:
        See ``FileStoreConfig.atomic_writes``.
    """

    def __init__(
        self,
        directory: str | os.PathLike[str],
        prefix: str = "",
        suffix: str = "",
        *,
        codec: RecordCodec | None = None,
        atomic_writes: bool = False,
    ) -> None:
        self._config = FileStoreConfig(
            directory=os.fspath(directory),
            prefix=prefix,
            suffix=suffix,
            atomic_writes=atomic_writes,
        )
        self._codec: RecordCodec = codec or JsonRecordCodec()

    @classmethod
    def in_dir(cls, directory: str | os.PathLike[str]) -> FileStore:
        """Return a store over ``directory`` with no prefix or suffix."""
        return cls(directory)

    @classmethod
    def from_config(
        cls, config: FileStoreConfig, *, codec: RecordCodec | None = None
    ) -> FileStore:
        """Return a store built from an existing ``FileStoreConfig``."""
        return cls(
            config.directory,
            config.prefix,
            config.suffix,
            codec=codec,
            atomic_writes=config.atomic_writes,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> FileStoreConfig:
        return self._config

    @property
    def codec(self) -> RecordCodec:
        return self._codec

    def path(self, session_id: SessionIdLike) -> str:
        """Return the file path a session with ``session_id`` lives at.

        Pure string concatenation; touches nothing on disk.
        """
        return (
            self._config.directory
            + os.sep
            + self._config.prefix
            + str(session_id)
            + self._config.suffix
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _write(self, record: Any) -> None:
        path = Path(self.path(record.id))
        try:
            serialized = self._codec.encode(record)
        except CodecError as exc:
            raise DecodeError(str(exc)) from exc

        try:
            if self._config.atomic_writes:
                self._replace(path, serialized)
            else:
                path.write_text(serialized, encoding="utf-8")
        except OSError as exc:
            raise DecodeError(str(exc)) from exc

    @staticmethod
    def _replace(path: Path, serialized: str) -> None:
        tmp_path = path.with_name(path.name + _TEMP_SUFFIX)
        try:
            tmp_path.write_text(serialized, encoding="utf-8")
            tmp_path.replace(path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    # ------------------------------------------------------------------
    # SessionStore interface
    # ------------------------------------------------------------------

    async def create(self, record: Any) -> None:
        """Write ``record`` to its path, overwriting any existing file.

        Raises
        ------
        DecodeError
            If the record cannot be serialized or the file cannot be written.
        """
        self._write(record)
        logger.debug("FileStore: created record %r", str(record.id))

    async def save(self, record: Any) -> None:
        """Write ``record`` to its path, overwriting any existing file.

        Raises
        ------
        DecodeError
            If the record cannot be serialized or the file cannot be written.
        """
        self._write(record)
        logger.debug("FileStore: saved record %r", str(record.id))

    async def load(self, session_id: SessionIdLike) -> Any | None:
        """Read and decode the record stored under ``session_id``.

        Returns
        -------
        Any
            The decoded record.  Never ``None``.

        Raises
        ------
        DecodeError
            If the file is missing or unreadable, or its content does not
            decode to a record.
        """
        path = Path(self.path(session_id))
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DecodeError(str(exc)) from exc
        try:
            record = self._codec.decode(raw)
        except CodecError as exc:
            raise DecodeError(str(exc)) from exc
        logger.debug("FileStore: loaded record %r", str(session_id))
        return record

    async def delete(self, session_id: SessionIdLike) -> None:
        """Remove the file for ``session_id``.

        Raises
        ------
        DecodeError
            If the file does not exist or cannot be removed.
        """
        try:
            Path(self.path(session_id)).unlink()
        except OSError as exc:
            raise DecodeError(str(exc)) from exc
        logger.debug("FileStore: deleted record %r", str(session_id))

    def __repr__(self) -> str:
        return (
            f"FileStore(directory={self._config.directory!r}, "
            f"prefix={self._config.prefix!r}, suffix={self._config.suffix!r})"
        )


__all__ = ["FileStore", "FileStoreConfig"]
