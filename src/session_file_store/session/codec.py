"""Record serialization for file-backed stores.

A codec turns a record into the text written to disk and back again.  JSON
is the default; YAML is available for stores whose files are meant to be
read by people.  Both produce sorted keys so that saving an unchanged record
twice yields byte-identical files.

Classes
-------
- CodecError        — raised when a record cannot be encoded or decoded
- RecordCodec       — abstract base for codecs
- JsonRecordCodec   — JSON via the standard library
- YamlRecordCodec   — YAML via PyYAML
"""
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

import yaml
from pydantic import BaseModel

from session_file_store.session.record import Record


class CodecError(ValueError):
    """Raised when a record cannot be encoded to or decoded from text."""


class RecordCodec(ABC):
    """Convert records to and from their on-disk text form."""

    @abstractmethod
    def encode(self, record: Any) -> str:
        """Return the serialized form of ``record``.

        Raises
        ------
        CodecError
            If the record (or its payload) is not serializable.
        """

    @abstractmethod
    def decode(self, raw: str) -> Any:
        """Reconstruct a record from ``raw``.

        Raises
        ------
        CodecError
            If ``raw`` is malformed or does not describe a valid record.
        """


class _ModelCodec(RecordCodec):
    """Shared pydantic plumbing for the bundled codecs."""

    def __init__(self, record_type: type[BaseModel] = Record) -> None:
        self.record_type = record_type

    def _to_data(self, record: BaseModel) -> dict[str, Any]:
        try:
            return record.model_dump(mode="json")
        except (ValueError, TypeError) as exc:
            raise CodecError(str(exc)) from exc

    def _from_data(self, data: object) -> BaseModel:
        if not isinstance(data, dict):
            raise CodecError(
                f"Expected a mapping for {self.record_type.__name__}, "
                f"got {type(data).__name__}"
            )
        try:
            return self.record_type.model_validate(data)
        except ValueError as exc:
            raise CodecError(str(exc)) from exc


class JsonRecordCodec(_ModelCodec):
    """Encode records as JSON documents.

    Parameters
    ----------
    record_type:
        Pydantic model to validate decoded documents against.  Defaults to
        ``Record``.
    indent:
        Indentation level; ``None`` (default) writes a compact document.
    """

    def __init__(
        self, record_type: type[BaseModel] = Record, *, indent: int | None = None
    ) -> None:
        super().__init__(record_type)
        self.indent = indent

    def encode(self, record: BaseModel) -> str:
        data = self._to_data(record)
        try:
            return json.dumps(data, indent=self.indent, sort_keys=True)
        except (ValueError, TypeError) as exc:
            raise CodecError(str(exc)) from exc

    def decode(self, raw: str) -> BaseModel:
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise CodecError(str(exc)) from exc
        return self._from_data(data)

    def __repr__(self) -> str:
        return f"JsonRecordCodec(record_type={self.record_type.__name__})"


class YamlRecordCodec(_ModelCodec):
    """Encode records as YAML documents."""

    def encode(self, record: BaseModel) -> str:
        data = self._to_data(record)
        try:
            return yaml.safe_dump(
                data, default_flow_style=False, allow_unicode=True, sort_keys=True
            )
        except yaml.YAMLError as exc:
            raise CodecError(str(exc)) from exc

    def decode(self, raw: str) -> BaseModel:
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise CodecError(str(exc)) from exc
        return self._from_data(data)

    def __repr__(self) -> str:
        return f"YamlRecordCodec(record_type={self.record_type.__name__})"


__all__ = ["CodecError", "JsonRecordCodec", "RecordCodec", "YamlRecordCodec"]
