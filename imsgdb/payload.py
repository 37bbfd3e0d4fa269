"""Helpers for reading values out of decoded plist payload dictionaries."""

from __future__ import annotations

from typing import Any

from imsgdb.errors import PlistParseError, PlistParseErrorKind


def get_string_from_dict(payload: Any, key: str) -> str | None:
    """Return ``payload[key]`` if payload is a dict and the value is a string."""
    if not isinstance(payload, dict):
        return None
    value = payload.get(key)
    return value if isinstance(value, str) else None


def _nested(payload: Any, key: str, inner_key: str) -> Any:
    if not isinstance(payload, dict):
        return None
    nested = payload.get(key)
    if not isinstance(nested, dict):
        return None
    return nested.get(inner_key)


def get_string_from_nested_dict(payload: Any, key: str) -> str | None:
    """Return the ``NS.relative`` string of an archived URL stored under ``key``."""
    value = _nested(payload, key, "NS.relative")
    return value if isinstance(value, str) else None


def get_float_from_nested_dict(payload: Any, key: str) -> float | None:
    """Return the ``NS.time`` real of an archived date stored under ``key``."""
    value = _nested(payload, key, "NS.time")
    return value if isinstance(value, float) else None


def require_dict_key(payload: Any, key: str) -> Any:
    """Return ``payload[key]``, raising PlistParseError if payload is not a dict
    or the key is absent."""
    if not isinstance(payload, dict):
        raise PlistParseError(PlistParseErrorKind.INVALID_TYPE, "root", "dictionary")
    try:
        return payload[key]
    except KeyError:
        raise PlistParseError(PlistParseErrorKind.MISSING_KEY, key) from None