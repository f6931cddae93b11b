"""Unit tests for session_file_store.session.record."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from session_file_store.session.record import (
    DEFAULT_EXPIRY,
    Record,
    SessionId,
    SessionIdLike,
    SessionRecord,
)


class TestSessionId:
    def test_str_renders_value(self) -> None:
        assert str(SessionId("abc123")) == "abc123"

    def test_empty_value_rejected(self) -> None:
        with pytest.raises(ValueError):
            SessionId("")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            SessionId(42)  # type: ignore[arg-type]

    def test_equality_and_hash_by_value(self) -> None:
        assert SessionId("a") == SessionId("a")
        assert SessionId("a") != SessionId("b")
        assert len({SessionId("a"), SessionId("a")}) == 1

    def test_not_equal_to_plain_string(self) -> None:
        assert SessionId("a") != "a"

    def test_generate_is_url_safe_and_unpadded(self) -> None:
        token = str(SessionId.generate())
        assert len(token) == 22
        assert "=" not in token
        assert "/" not in token
        assert "+" not in token

    def test_generate_is_unique(self) -> None:
        ids = {SessionId.generate() for _ in range(100)}
        assert len(ids) == 100

    def test_repr(self) -> None:
        assert repr(SessionId("abc")) == "SessionId('abc')"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(SessionId("abc"), SessionIdLike)


class TestRecord:
    def test_id_validated_from_string(self) -> None:
        record = Record(id="abc123")
        assert record.id == SessionId("abc123")

    def test_id_accepts_session_id(self) -> None:
        session_id = SessionId("abc123")
        assert Record(id=session_id).id is session_id

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Record(id="")

    def test_non_string_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Record(id=123)

    def test_id_serializes_as_string(self) -> None:
        dumped = Record(id="abc123", data={"count": 3}).model_dump(mode="json")
        assert dumped["id"] == "abc123"
        assert dumped["data"] == {"count": 3}

    def test_default_expiry_in_future(self) -> None:
        before = datetime.now(timezone.utc)
        record = Record(id="abc123")
        assert record.expiry_date >= before + DEFAULT_EXPIRY

    def test_new_generates_id(self) -> None:
        first = Record.new()
        second = Record.new({"k": "v"})
        assert first.id != second.id
        assert second.data == {"k": "v"}
        assert first.data == {}

    def test_satisfies_protocol(self) -> None:
        assert isinstance(Record(id="abc"), SessionRecord)

    def test_json_round_trip_preserves_id(self) -> None:
        record = Record(id="abc123", data={"count": 3})
        restored = Record.model_validate_json(record.model_dump_json())
        assert restored == record
