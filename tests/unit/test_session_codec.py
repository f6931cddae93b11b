"""Unit tests for session_file_store.session.codec."""
from __future__ import annotations

import json

import pytest
from pydantic import BaseModel

from session_file_store.session.codec import (
    CodecError,
    JsonRecordCodec,
    RecordCodec,
    YamlRecordCodec,
)
from session_file_store.session.record import Record, SessionId


@pytest.fixture()
def record() -> Record:
    return Record(id=SessionId("abc123"), data={"count": 3, "tags": ["a", "b"]})


class TestJsonRecordCodec:
    def test_encode_produces_sorted_compact_json(self, record: Record) -> None:
        raw = JsonRecordCodec().encode(record)
        assert list(json.loads(raw)) == ["data", "expiry_date", "id"]
        assert "\n" not in raw

    def test_indent_option(self, record: Record) -> None:
        raw = JsonRecordCodec(indent=2).encode(record)
        assert "\n" in raw

    def test_decode_returns_equal_record(self, record: Record) -> None:
        codec = JsonRecordCodec()
        assert codec.decode(codec.encode(record)) == record

    def test_encode_is_deterministic(self, record: Record) -> None:
        codec = JsonRecordCodec()
        assert codec.encode(record) == codec.encode(record)

    def test_decode_malformed_raises(self) -> None:
        with pytest.raises(CodecError):
            JsonRecordCodec().decode("{broken")

    def test_decode_non_mapping_raises(self) -> None:
        with pytest.raises(CodecError, match="mapping"):
            JsonRecordCodec().decode("[1, 2, 3]")

    def test_decode_invalid_record_raises(self) -> None:
        with pytest.raises(CodecError):
            JsonRecordCodec().decode('{"id": ""}')

    def test_encode_unserializable_raises(self) -> None:
        with pytest.raises(CodecError):
            JsonRecordCodec().encode(Record(id="abc", data={"x": object()}))

    def test_custom_record_type(self) -> None:
        class Cart(BaseModel):
            id: SessionId
            items: list[str] = []

        codec = JsonRecordCodec(Cart)
        cart = Cart(id="c1", items=["apple"])
        assert codec.decode(codec.encode(cart)) == cart

    def test_codec_error_is_value_error(self) -> None:
        assert issubclass(CodecError, ValueError)

    def test_is_record_codec(self) -> None:
        assert isinstance(JsonRecordCodec(), RecordCodec)


class TestYamlRecordCodec:
    def test_round_trip(self, record: Record) -> None:
        codec = YamlRecordCodec()
        assert codec.decode(codec.encode(record)) == record

    def test_encode_is_block_style(self, record: Record) -> None:
        raw = YamlRecordCodec().encode(record)
        assert "id: abc123" in raw
        assert "count: 3" in raw

    def test_decode_malformed_raises(self) -> None:
        with pytest.raises(CodecError):
            YamlRecordCodec().decode("id: [unclosed")

    def test_decode_scalar_raises(self) -> None:
        with pytest.raises(CodecError):
            YamlRecordCodec().decode("just a string")

    def test_repr_names_record_type(self) -> None:
        assert "Record" in repr(YamlRecordCodec())
