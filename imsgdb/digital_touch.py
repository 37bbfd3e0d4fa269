"""Digital Touch messages: animated sketches, taps, kisses, heartbeats and fireballs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from imsgdb.wire import ProtobufDecodeError, WireType, encode_field, iter_fields

_KIND_FIELD = 1
_PAYLOAD_FIELD = 3
_ID_FIELD = 5


class DigitalTouch(IntEnum):
    """The kind of animation a Digital Touch message carries."""

    UNKNOWN = 0
    TAP = 1
    HEARTBEAT = 3
    SKETCH = 4
    KISS = 7
    FIREBALL = 8


def _as_int32(value: int) -> int:
    """Truncate an unsigned varint to a signed 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


@dataclass(frozen=True)
class BaseMessage:
    """The outer message wrapping every Digital Touch payload."""

    touch_kind: int = 0
    """The raw kind value; see ``kind`` for the decoded animation type."""
    touch_payload: bytes = b""
    """The encoded payload of the specific animation."""
    id: str = ""
    """An identifier for the message."""
    unknown_fields: bytes = field(default=b"", repr=False)

    @property
    def kind(self) -> DigitalTouch:
        """The animation type, or UNKNOWN for values that are not recognised."""
        try:
            return DigitalTouch(self.touch_kind)
        except ValueError:
            return DigitalTouch.UNKNOWN

    @classmethod
    def parse(cls, data: bytes) -> BaseMessage:
        """Decode a message from wire bytes.

        Raises ProtobufDecodeError if the bytes are not valid wire data or the
        identifier is not valid UTF-8.
        """
        touch_kind = 0
        touch_payload = b""
        message_id = ""
        unknown = bytearray()
        for number, wire_type, value in iter_fields(data):
            if number == _KIND_FIELD and wire_type is WireType.VARINT:
                touch_kind = _as_int32(value)
            elif number == _PAYLOAD_FIELD and wire_type is WireType.LEN:
                touch_payload = bytes(value)
            elif number == _ID_FIELD and wire_type is WireType.LEN:
                try:
                    message_id = bytes(value).decode("utf-8")
                except UnicodeDecodeError as error:
                    raise ProtobufDecodeError(f"invalid UTF-8 in ID: {error}") from error
            else:
                unknown += encode_field(number, wire_type, value)
        return cls(
            touch_kind=touch_kind,
            touch_payload=touch_payload,
            id=message_id,
            unknown_fields=bytes(unknown),
        )

    def to_bytes(self) -> bytes:
        """Encode the message; fields holding their default value are left out."""
        out = bytearray()
        if self.touch_kind:
            out += encode_field(_KIND_FIELD, WireType.VARINT, int(self.touch_kind))
        if self.touch_payload:
            out += encode_field(_PAYLOAD_FIELD, WireType.LEN, self.touch_payload)
        if self.id:
            out += encode_field(_ID_FIELD, WireType.LEN, self.id.encode("utf-8"))
        out += self.unknown_fields
        return bytes(out)


def from_payload(payload: bytes) -> DigitalTouch | None:
    """Read the animation type from a raw database payload.

    Returns None when the payload cannot be decoded.
    """
    try:
        message = BaseMessage.parse(payload)
    except ProtobufDecodeError:
        return None
    return message.kind