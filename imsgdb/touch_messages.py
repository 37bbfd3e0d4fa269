"""Payloads of the individual Digital Touch animations."""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar

from imsgdb.wire import WireType, encode_field, iter_fields

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class _Codec:
    wire_type: WireType
    decode: Callable[[Any], Any]
    encode: Callable[[Any], Any]


def _decode_int64(value: int) -> int:
    return value - (1 << 64) if value > _INT64_MAX else value


def _encode_int64(value: int) -> int:
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value does not fit in int64: {value}")
    return value


def _encode_uint64(value: int) -> int:
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"value does not fit in uint64: {value}")
    return value


_BYTES = _Codec(WireType.LEN, bytes, bytes)
_INT64 = _Codec(WireType.VARINT, _decode_int64, _encode_int64)
_UINT64 = _Codec(WireType.VARINT, int, _encode_uint64)
_FLOAT = _Codec(
    WireType.I32,
    lambda raw: struct.unpack("<f", raw)[0],
    lambda value: struct.pack("<f", value),
)

_M = TypeVar("_M", bound="_TouchPayload")


@dataclass(frozen=True)
class _TouchPayload:
    """Shared decoding and encoding for the flat touch payload messages."""

    _FIELDS: ClassVar[tuple[tuple[int, str, _Codec], ...]] = ()

    @classmethod
    def _decode(cls: type[_M], data: bytes) -> _M:
        spec = {number: (name, codec) for number, name, codec in cls._FIELDS}
        values: dict[str, Any] = {}
        unknown = bytearray()
        for number, wire_type, value in iter_fields(data):
            entry = spec.get(number)
            if entry is not None and entry[1].wire_type is wire_type:
                name, codec = entry
                values[name] = codec.decode(value)
            else:
                unknown += encode_field(number, wire_type, value)
        return cls(**values, unknown_fields=bytes(unknown))

    def _encode(self) -> bytes:
        out = bytearray()
        for number, name, codec in self._FIELDS:
            value = getattr(self, name)
            if value:
                out += encode_field(number, codec.wire_type, codec.encode(value))
        out += self.unknown_fields
        return bytes(out)


@dataclass(frozen=True)
class TapMessage(_TouchPayload):
    """A sequence of taps on the screen."""

    delays: bytes = b""
    location: bytes = b""
    color: bytes = b""
    unknown_fields: bytes = field(default=b"", repr=False)

    _FIELDS = (
        (2, "delays", _BYTES),
        (3, "location", _BYTES),
        (4, "color", _BYTES),
    )

    @classmethod
    def parse(cls, data: bytes) -> TapMessage:
        """Decode from wire bytes; raises ProtobufDecodeError on bad data."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the message; fields holding their default value are left out."""
        return self._encode()


@dataclass(frozen=True)
class SketchMessage(_TouchPayload):
    """A hand-drawn sketch made of coloured strokes."""

    strokes_count: int = 0
    strokes: bytes = b""
    colors: bytes = b""
    unknown_fields: bytes = field(default=b"", repr=False)

    _FIELDS = (
        (1, "strokes_count", _INT64),
        (2, "strokes", _BYTES),
        (3, "colors", _BYTES),
    )

    @classmethod
    def parse(cls, data: bytes) -> SketchMessage:
        """Decode from wire bytes; raises ProtobufDecodeError on bad data."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the message; fields holding their default value are left out."""
        return self._encode()


@dataclass(frozen=True)
class KissMessage(_TouchPayload):
    """A sequence of kisses placed on the screen."""

    delays: bytes = b""
    points: bytes = b""
    rotations: bytes = b""
    unknown_fields: bytes = field(default=b"", repr=False)

    _FIELDS = (
        (1, "delays", _BYTES),
        (2, "points", _BYTES),
        (3, "rotations", _BYTES),
    )

    @classmethod
    def parse(cls, data: bytes) -> KissMessage:
        """Decode from wire bytes; raises ProtobufDecodeError on bad data."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the message; fields holding their default value are left out."""
        return self._encode()


@dataclass(frozen=True)
class HeartbeatMessage(_TouchPayload):
    """A beating heart, optionally broken part way through."""

    bpm: float = 0.0
    duration: int = 0
    heart_broken_at: float = 0.0
    unknown_fields: bytes = field(default=b"", repr=False)

    _FIELDS = (
        (1, "bpm", _FLOAT),
        (2, "duration", _UINT64),
        (6, "heart_broken_at", _FLOAT),
    )

    @classmethod
    def parse(cls, data: bytes) -> HeartbeatMessage:
        """Decode from wire bytes; raises ProtobufDecodeError on bad data."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the message; fields holding their default value are left out."""
        return self._encode()


@dataclass(frozen=True)
class FireballMessage(_TouchPayload):
    """A fireball dragged across the screen."""

    duration: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0
    delays: bytes = b""
    points: bytes = b""
    unknown_fields: bytes = field(default=b"", repr=False)

    _FIELDS = (
        (1, "duration", _FLOAT),
        (2, "start_x", _FLOAT),
        (3, "start_y", _FLOAT),
        (4, "delays", _BYTES),
        (5, "points", _BYTES),
    )

    @classmethod
    def parse(cls, data: bytes) -> FireballMessage:
        """Decode from wire bytes; raises ProtobufDecodeError on bad data."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the message; fields holding their default value are left out."""
        return self._encode()