"""Error types raised while reading and decoding iMessage data."""

from __future__ import annotations

from enum import Enum, auto
from string import Formatter
from typing import Any, ClassVar


def _arity(template: str) -> int:
    """Count the distinct positional fields a message template uses."""
    fields = {name for _, name, _, _ in Formatter().parse(template) if name is not None}
    return len(fields)


class _KindedError(Exception):
    """Base for errors that carry a kind and the values its message needs."""

    _kind_type: ClassVar[type[Enum]] = Enum
    _templates: ClassVar[dict[Enum, str]] = {}

    def _setup(self, kind: Enum, args: tuple[Any, ...]) -> None:
        if not isinstance(kind, self._kind_type):
            raise TypeError(
                f"{type(self).__name__} needs a {self._kind_type.__name__}, got {kind!r}"
            )
        expected = _arity(self._templates[kind])
        if len(args) != expected:
            raise TypeError(
                f"{type(self).__name__} of kind {kind.name} takes {expected} "
                f"value(s), got {len(args)}"
            )
        self.kind = kind
        self.details = args
        Exception.__init__(self, self._render())

    def _render(self) -> str:
        return self._templates[self.kind].format(*self.details)


class AttachmentErrorKind(Enum):
    FILE_NOT_FOUND = auto()
    UNREADABLE = auto()


class AttachmentError(_KindedError):
    """Errors that can happen when working with attachment table data."""

    _kind_type = AttachmentErrorKind
    _templates = {
        AttachmentErrorKind.FILE_NOT_FOUND: "File not found at location: {0}",
        AttachmentErrorKind.UNREADABLE: "Unable to read file at {0}: {1}",
    }

    def __init__(self, kind: AttachmentErrorKind, *args: Any) -> None:
        self._setup(kind, args)

    def __str__(self) -> str:
        return self._render()


class HandwritingErrorKind(Enum):
    PROTOBUF_ERROR = auto()
    INVALID_FRAME_SIZE = auto()
    XZ_ERROR = auto()
    COMPRESSION_UNKNOWN = auto()
    INVALID_STROKES_LENGTH = auto()
    CONVERSION_ERROR = auto()
    DECOMPRESSED_NOT_SET = auto()
    INVALID_DECOMPRESSED_LENGTH = auto()
    RESIZE_ERROR = auto()


class HandwritingError(_KindedError):
    """Errors that can happen when parsing handwriting data."""

    _kind_type = HandwritingErrorKind
    _templates = {
        HandwritingErrorKind.PROTOBUF_ERROR: "failed to parse handwriting protobuf: {0}",
        HandwritingErrorKind.INVALID_FRAME_SIZE: "expected size 8, got {0}",
        HandwritingErrorKind.XZ_ERROR: "failed to decompress xz: {0}",
        HandwritingErrorKind.COMPRESSION_UNKNOWN: "compress method unknown",
        HandwritingErrorKind.INVALID_STROKES_LENGTH: "can't access index {0} on array length {1}",
        HandwritingErrorKind.CONVERSION_ERROR: "failed to convert num",
        HandwritingErrorKind.DECOMPRESSED_NOT_SET: (
            "decompressed length not set on compressed message"
        ),
        HandwritingErrorKind.INVALID_DECOMPRESSED_LENGTH: (
            "expected decompressed length of {0}, got {1}"
        ),
        HandwritingErrorKind.RESIZE_ERROR: "failed to resize handwriting coordinates: {0}",
    }

    def __init__(self, kind: HandwritingErrorKind, *args: Any) -> None:
        self._setup(kind, args)

    def __str__(self) -> str:
        return self._render()


class MessageErrorKind(Enum):
    MISSING_DATA = auto()
    NO_TEXT = auto()
    STREAM_TYPED_PARSE_ERROR = auto()
    TYPED_STREAM_PARSE_ERROR = auto()
    PLIST_PARSE_ERROR = auto()
    INVALID_TIMESTAMP = auto()


class MessageError(_KindedError):
    """Errors that can happen when working with message table data."""

    _kind_type = MessageErrorKind
    _templates = {
        MessageErrorKind.MISSING_DATA: "No attributedBody found!",
        MessageErrorKind.NO_TEXT: "Message has no text!",
        MessageErrorKind.STREAM_TYPED_PARSE_ERROR: (
            "Failed to parse attributedBody with legacy parser: {0}"
        ),
        MessageErrorKind.TYPED_STREAM_PARSE_ERROR: "Failed to parse attributedBody: {0}",
        MessageErrorKind.PLIST_PARSE_ERROR: "Failed to parse plist data: {0}",
        MessageErrorKind.INVALID_TIMESTAMP: "Timestamp is invalid: {0}",
    }

    def __init__(self, kind: MessageErrorKind, *args: Any) -> None:
        self._setup(kind, args)

    def __str__(self) -> str:
        return self._render()


class PlistParseErrorKind(Enum):
    MISSING_KEY = auto()
    NO_VALUE_AT_INDEX = auto()
    INVALID_TYPE = auto()
    INVALID_TYPE_INDEX = auto()
    INVALID_DICTIONARY_SIZE = auto()
    NO_PAYLOAD = auto()
    WRONG_MESSAGE_TYPE = auto()
    INVALID_EDITED_MESSAGE = auto()
    STREAM_TYPED_ERROR = auto()
    HANDWRITING_ERROR = auto()
    DIGITAL_TOUCH_ERROR = auto()


class PlistParseError(_KindedError):
    """Errors that can happen when parsing plist payload data."""

    _kind_type = PlistParseErrorKind
    _templates = {
        PlistParseErrorKind.MISSING_KEY: "Expected key {0}, found nothing!",
        PlistParseErrorKind.NO_VALUE_AT_INDEX: (
            "Payload referenced index {0}, but there is no data!"
        ),
        PlistParseErrorKind.INVALID_TYPE: "Invalid data found at {0}, expected {1}",
        PlistParseErrorKind.INVALID_TYPE_INDEX: (
            "Invalid data found at object index {0}, expected {1}"
        ),
        PlistParseErrorKind.INVALID_DICTIONARY_SIZE: (
            "Invalid dictionary size, found {0} keys and {1} values"
        ),
        PlistParseErrorKind.NO_PAYLOAD: "Unable to acquire payload data!",
        PlistParseErrorKind.WRONG_MESSAGE_TYPE: "Message is not an app message!",
        PlistParseErrorKind.INVALID_EDITED_MESSAGE: (
            "Unable to parse message from binary data: {0}"
        ),
        PlistParseErrorKind.STREAM_TYPED_ERROR: "{0}",
        PlistParseErrorKind.HANDWRITING_ERROR: "{0}",
        PlistParseErrorKind.DIGITAL_TOUCH_ERROR: "Unable to parse Digital Touch Message!",
    }

    def __init__(self, kind: PlistParseErrorKind, *args: Any) -> None:
        self._setup(kind, args)

    def __str__(self) -> str:
        return self._render()


class StreamTypedErrorKind(Enum):
    NO_START_PATTERN = auto()
    NO_END_PATTERN = auto()
    INVALID_PREFIX = auto()
    INVALID_TIMESTAMP = auto()


class StreamTypedError(_KindedError):
    """Errors from the legacy simple typedstream parser."""

    _kind_type = StreamTypedErrorKind
    _templates = {
        StreamTypedErrorKind.NO_START_PATTERN: "No start pattern found!",
        StreamTypedErrorKind.NO_END_PATTERN: "No end pattern found!",
        StreamTypedErrorKind.INVALID_PREFIX: "Prefix length is not standard!",
        StreamTypedErrorKind.INVALID_TIMESTAMP: "Timestamp integer is not valid!",
    }

    def __init__(self, kind: StreamTypedErrorKind) -> None:
        self._setup(kind, ())

    def __str__(self) -> str:
        return self._render()


class TableErrorKind(Enum):
    ATTACHMENT = auto()
    CHAT_TO_HANDLE = auto()
    CHAT = auto()
    HANDLE = auto()
    MESSAGES = auto()
    CANNOT_CONNECT = auto()
    CANNOT_READ = auto()


class TableError(_KindedError):
    """Errors that can happen when extracting data from a SQLite table."""

    _kind_type = TableErrorKind
    _templates = {
        TableErrorKind.ATTACHMENT: "Failed to parse attachment row: {0}",
        TableErrorKind.CHAT_TO_HANDLE: "Failed to parse chat handle row: {0}",
        TableErrorKind.CHAT: "Failed to parse chat row: {0}",
        TableErrorKind.HANDLE: "Failed to parse handle row: {0}",
        TableErrorKind.MESSAGES: "Failed to parse messages row: {0}",
        TableErrorKind.CANNOT_CONNECT: "{0}",
        TableErrorKind.CANNOT_READ: "{0}",
    }

    def __init__(self, kind: TableErrorKind, *args: Any) -> None:
        self._setup(kind, args)

    def __str__(self) -> str:
        return self._render()


class TypedStreamErrorKind(Enum):
    OUT_OF_BOUNDS = auto()
    INVALID_HEADER = auto()
    SLICE_ERROR = auto()
    STRING_PARSE_ERROR = auto()
    INVALID_ARRAY = auto()
    INVALID_POINTER = auto()


class TypedStreamError(_KindedError):
    """Errors from the typedstream deserializer."""

    _kind_type = TypedStreamErrorKind
    _templates = {
        TypedStreamErrorKind.OUT_OF_BOUNDS: "Index {0:x} is outside of range {1:x}!",
        TypedStreamErrorKind.INVALID_HEADER: "Invalid typedstream header!",
        TypedStreamErrorKind.SLICE_ERROR: "Unable to slice source stream: {0}",
        TypedStreamErrorKind.STRING_PARSE_ERROR: "Failed to parse string: {0}",
        TypedStreamErrorKind.INVALID_ARRAY: "Failed to parse array data",
        TypedStreamErrorKind.INVALID_POINTER: "Failed to parse pointer: {0}",
    }

    def __init__(self, kind: TypedStreamErrorKind, *args: Any) -> None:
        self._setup(kind, args)

    def __str__(self) -> str:
        return self._render()