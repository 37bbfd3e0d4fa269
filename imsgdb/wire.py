"""Reading and writing the protobuf binary wire format."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum
from typing import Union

_MAX_VARINT_BYTES = 10
_UINT64_MASK = (1 << 64) - 1
_MAX_FIELD_NUMBER = (1 << 29) - 1
_MAX_TAG = 0xFFFFFFFF

FieldValue = Union[int, bytes]


class WireType(IntEnum):
    """How a field's value is laid out on the wire."""

    VARINT = 0
    I64 = 1
    LEN = 2
    SGROUP = 3
    EGROUP = 4
    I32 = 5


class ProtobufDecodeError(ValueError):
    """Raised when bytes are not valid protobuf wire data."""


_FIXED_SIZES = {WireType.I32: 4, WireType.I64: 8}


def decode_varint(data: bytes, pos: int = 0) -> tuple[int, int]:
    """Read a varint at ``pos``; return its unsigned 64-bit value and the next offset."""
    result = 0
    for index, byte in enumerate(data[pos : pos + _MAX_VARINT_BYTES]):
        result |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            return result & _UINT64_MASK, pos + index + 1
    if len(data) - pos >= _MAX_VARINT_BYTES:
        raise ProtobufDecodeError("varint is longer than 10 bytes")
    raise ProtobufDecodeError("truncated varint")


def encode_varint(value: int) -> bytes:
    """Encode an integer as a varint; negative values use 64-bit two's complement."""
    if value < 0:
        value += 1 << 64
    if not 0 <= value <= _UINT64_MASK:
        raise ValueError(f"value does not fit in 64 bits: {value}")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _read_tag(data: bytes, pos: int) -> tuple[int, WireType, int]:
    key, pos = decode_varint(data, pos)
    if key > _MAX_TAG:
        raise ProtobufDecodeError(f"tag out of range: {key}")
    number = key >> 3
    if number == 0:
        raise ProtobufDecodeError("field number 0 is not allowed")
    try:
        wire_type = WireType(key & 0x07)
    except ValueError:
        raise ProtobufDecodeError(f"unknown wire type {key & 0x07}") from None
    return number, wire_type, pos


def _take(data: bytes, pos: int, size: int) -> tuple[bytes, int]:
    end = pos + size
    if end > len(data):
        raise ProtobufDecodeError(
            f"need {size} bytes at offset {pos}, only {len(data) - pos} left"
        )
    return data[pos:end], end


def _read_value(
    data: bytes, pos: int, number: int, wire_type: WireType
) -> tuple[FieldValue, int]:
    if wire_type is WireType.VARINT:
        return decode_varint(data, pos)
    if wire_type in _FIXED_SIZES:
        return _take(data, pos, _FIXED_SIZES[wire_type])
    if wire_type is WireType.LEN:
        length, pos = decode_varint(data, pos)
        return _take(data, pos, length)
    if wire_type is WireType.SGROUP:
        start = pos
        while pos < len(data):
            tag_start = pos
            inner_number, inner_type, pos = _read_tag(data, pos)
            if inner_type is WireType.EGROUP:
                if inner_number != number:
                    raise ProtobufDecodeError(
                        f"group {number} closed by end-group {inner_number}"
                    )
                return data[start:tag_start], pos
            _, pos = _read_value(data, pos, inner_number, inner_type)
        raise ProtobufDecodeError(f"group {number} is not closed")
    raise ProtobufDecodeError(f"unexpected end-group tag for field {number}")


def iter_fields(data: bytes) -> Iterator[tuple[int, WireType, FieldValue]]:
    """Yield ``(field number, wire type, value)`` for each field in a message.

    Varints come back as unsigned integers; fixed-width, length-delimited and
    group fields come back as their raw bytes.
    """
    buffer = bytes(data)
    pos = 0
    while pos < len(buffer):
        number, wire_type, pos = _read_tag(buffer, pos)
        value, pos = _read_value(buffer, pos, number, wire_type)
        yield number, wire_type, value


def encode_field(number: int, wire_type: WireType | int, value: FieldValue) -> bytes:
    """Encode one field: its tag followed by its value in the given wire type."""
    wire_type = WireType(wire_type)
    if not 1 <= number <= _MAX_FIELD_NUMBER:
        raise ValueError(f"field number out of range: {number}")
    tag = encode_varint((number << 3) | wire_type)
    if wire_type is WireType.VARINT:
        if not isinstance(value, int):
            raise TypeError("a varint field needs an integer value")
        return tag + encode_varint(value)
    if isinstance(value, int):
        raise TypeError(f"a {wire_type.name} field needs a bytes value")
    payload = bytes(value)
    if wire_type is WireType.LEN:
        return tag + encode_varint(len(payload)) + payload
    if wire_type in _FIXED_SIZES:
        size = _FIXED_SIZES[wire_type]
        if len(payload) != size:
            raise ValueError(
                f"a {wire_type.name} field needs {size} bytes, got {len(payload)}"
            )
        return tag + payload
    if wire_type is WireType.SGROUP:
        return tag + payload + encode_varint((number << 3) | WireType.EGROUP)
    raise ValueError("an end-group tag cannot be written on its own")