import pytest

from imsgdb.errors import (
    AttachmentError,
    AttachmentErrorKind,
    HandwritingError,
    HandwritingErrorKind,
    MessageError,
    MessageErrorKind,
    PlistParseError,
    PlistParseErrorKind,
    StreamTypedError,
    StreamTypedErrorKind,
    TableError,
    TableErrorKind,
    TypedStreamError,
    TypedStreamErrorKind,
)


def test_attachment_file_not_found():
    err = AttachmentError(AttachmentErrorKind.FILE_NOT_FOUND, "/tmp/a.png")
    assert str(err) == "File not found at location: /tmp/a.png"
    assert err.kind is AttachmentErrorKind.FILE_NOT_FOUND
    assert err.details == ("/tmp/a.png",)


def test_attachment_unreadable():
    err = AttachmentError(AttachmentErrorKind.UNREADABLE, "/tmp/a.png", "denied")
    assert str(err) == "Unable to read file at /tmp/a.png: denied"


def test_handwriting_messages():
    assert str(HandwritingError(HandwritingErrorKind.INVALID_FRAME_SIZE, 3)) == (
        "expected size 8, got 3"
    )
    assert str(HandwritingError(HandwritingErrorKind.COMPRESSION_UNKNOWN)) == (
        "compress method unknown"
    )
    assert str(HandwritingError(HandwritingErrorKind.INVALID_STROKES_LENGTH, 5, 2)) == (
        "can't access index 5 on array length 2"
    )
    assert str(
        HandwritingError(HandwritingErrorKind.INVALID_DECOMPRESSED_LENGTH, 10, 7)
    ) == "expected decompressed length of 10, got 7"


def test_message_errors():
    assert str(MessageError(MessageErrorKind.MISSING_DATA)) == "No attributedBody found!"
    assert str(MessageError(MessageErrorKind.NO_TEXT)) == "Message has no text!"
    assert str(MessageError(MessageErrorKind.INVALID_TIMESTAMP, -4)) == (
        "Timestamp is invalid: -4"
    )


def test_message_error_wraps_plist_error():
    inner = PlistParseError(PlistParseErrorKind.NO_PAYLOAD)
    outer = MessageError(MessageErrorKind.PLIST_PARSE_ERROR, inner)
    assert str(outer) == "Failed to parse plist data: Unable to acquire payload data!"


def test_message_error_wraps_legacy_error():
    inner = StreamTypedError(StreamTypedErrorKind.NO_START_PATTERN)
    outer = MessageError(MessageErrorKind.STREAM_TYPED_PARSE_ERROR, inner)
    assert str(outer) == (
        "Failed to parse attributedBody with legacy parser: No start pattern found!"
    )


def test_plist_errors():
    assert str(PlistParseError(PlistParseErrorKind.MISSING_KEY, "userInfo")) == (
        "Expected key userInfo, found nothing!"
    )
    assert str(
        PlistParseError(PlistParseErrorKind.INVALID_TYPE, "root", "dictionary")
    ) == "Invalid data found at root, expected dictionary"
    assert str(PlistParseError(PlistParseErrorKind.INVALID_DICTIONARY_SIZE, 2, 3)) == (
        "Invalid dictionary size, found 2 keys and 3 values"
    )
    assert str(PlistParseError(PlistParseErrorKind.WRONG_MESSAGE_TYPE)) == (
        "Message is not an app message!"
    )


def test_plist_error_passes_through_inner_message():
    inner = HandwritingError(HandwritingErrorKind.CONVERSION_ERROR)
    err = PlistParseError(PlistParseErrorKind.HANDWRITING_ERROR, inner)
    assert str(err) == str(inner)


def test_stream_typed_errors():
    assert str(StreamTypedError(StreamTypedErrorKind.NO_END_PATTERN)) == (
        "No end pattern found!"
    )
    assert str(StreamTypedError(StreamTypedErrorKind.INVALID_PREFIX)) == (
        "Prefix length is not standard!"
    )


def test_table_errors():
    assert str(TableError(TableErrorKind.CHAT, "bad row")) == (
        "Failed to parse chat row: bad row"
    )
    assert str(TableError(TableErrorKind.CANNOT_CONNECT, "no such file")) == "no such file"


def test_typed_stream_out_of_bounds_uses_hex():
    err = TypedStreamError(TypedStreamErrorKind.OUT_OF_BOUNDS, 255, 16)
    assert str(err) == "Index ff is outside of range 10!"


def test_typed_stream_pointer_uses_decimal():
    err = TypedStreamError(TypedStreamErrorKind.INVALID_POINTER, 200)
    assert str(err) == "Failed to parse pointer: 200"


def test_error_carries_kind_and_message_args():
    err = PlistParseError(PlistParseErrorKind.NO_PAYLOAD)
    assert err.kind is PlistParseErrorKind.NO_PAYLOAD
    assert err.details == ()
    assert err.args == ("Unable to acquire payload data!",)


def test_wrong_arity_rejected():
    with pytest.raises(TypeError):
        AttachmentError(AttachmentErrorKind.FILE_NOT_FOUND)
    with pytest.raises(TypeError):
        MessageError(MessageErrorKind.NO_TEXT, "extra")


def test_wrong_kind_rejected():
    with pytest.raises(TypeError):
        TableError(MessageErrorKind.NO_TEXT)