"""Parsers for iMessage payloads: app balloons, links, Digital Touch and expressives."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "app_store",
    "collaboration",
    "digital_touch",
    "errors",
    "expressives",
    "payload",
    "touch_messages",
    "wire",
]