# imsgdb

Pure-Python parsers for the structured payloads stored with iMessage
messages. It has no runtime dependencies.

## What it covers

- **App messages** (`imsgdb.app.AppMessage`): balloons made by apps and by
  built-in features such as Apple Pay, Check In and Find My.
  `AppMessage.from_map(payload)` builds one; `parse_query_string()` splits a
  URL that starts with `?` into a dict, skipping pairs that are not exactly
  `key=value`.
- **App Store links** (`imsgdb.app_store.AppStoreMessage`): link previews
  for App Store apps. A preview whose metadata names an album is rejected
  as the wrong message type.
- **Collaboration links** (`imsgdb.collaboration.CollaborationMessage`):
  previews for shared documents, for example from Freeform or Pages.
  `get_url()` returns the collaboration URL, or the original URL when there
  is none.
- **Digital Touch** (`imsgdb.digital_touch`): `from_payload(data)` decodes
  the outer protobuf message and returns a `DigitalTouch` member (`TAP`,
  `HEARTBEAT`, `SKETCH`, `KISS`, `FIREBALL`, or `UNKNOWN` for values it does
  not recognise). It returns `None` when the bytes cannot be decoded.
  `BaseMessage` exposes the outer message itself, with `parse()` and
  `to_bytes()`.
- **Digital Touch bodies** (`imsgdb.touch_messages`): `TapMessage`,
  `SketchMessage`, `KissMessage`, `HeartbeatMessage` and `FireballMessage`,
  each with `parse()` and `to_bytes()`. Unknown fields are kept and written
  back out.
- **Protobuf wire format** (`imsgdb.wire`): `decode_varint`,
  `encode_varint`, `iter_fields` and `encode_field`, with `WireType` and
  `ProtobufDecodeError`.
- **Expressives** (`imsgdb.expressives`): `BubbleEffect`, `ScreenEffect` and
  the `Expressive` container, built with `Expressive.screen()`,
  `Expressive.bubble()`, `Expressive.unknown()` or `Expressive.none()`.
- **Payload helpers** (`imsgdb.payload`): `get_string_from_dict`,
  `get_string_from_nested_dict`, `get_float_from_nested_dict` and
  `require_dict_key`.
- **Errors** (`imsgdb.errors`): `AttachmentError`, `HandwritingError`,
  `MessageError`, `PlistParseError`, `StreamTypedError`, `TableError` and
  `TypedStreamError`. Each takes a member of its matching `...Kind` enum and
  the values its message needs, available as `kind` and `details`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

The balloon parsers take a payload already decoded into plain Python
values: dicts, lists, strings and numbers. Archived URLs are dicts holding
the link under `NS.relative`; archived dates hold a float under `NS.time`.

```python
from imsgdb.app import AppMessage
from imsgdb.digital_touch import BaseMessage, DigitalTouch, from_payload

payload = {
    "an": "Check In",
    "URL": {"NS.relative": "?messageType=1&interfaceVersion=1"},
    "userInfo": {"caption": "Check In: Timer Started"},
}
balloon = AppMessage.from_map(payload)
print(balloon.caption)               # Check In: Timer Started
print(balloon.parse_query_string())  # {'messageType': '1', 'interfaceVersion': '1'}

raw = BaseMessage(touch_kind=DigitalTouch.SKETCH).to_bytes()
print(from_payload(raw))             # DigitalTouch.SKETCH
```

A payload that is not a dict, or lacks a required key, raises
`imsgdb.errors.PlistParseError`.

## What it does not do

The package works only on payloads handed to it. It does not open or query
the Messages database, does not read binary property lists or unpack keyed
archives into the dicts the parsers expect, and does not read attachment
files. The error types for tables, attachments, handwriting and typedstream
data are provided, but no reader in this package raises them.