"""Link previews generated for apps in the App Store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from imsgdb.errors import PlistParseError, PlistParseErrorKind
from imsgdb.payload import (
    get_string_from_dict,
    get_string_from_nested_dict,
    require_dict_key,
)


def _metadata_and_body(payload: Any) -> tuple[Any, Any]:
    """Return the app metadata under ``specialization`` and the rich link body."""
    body = require_dict_key(payload, "richLinkMetadata")
    return require_dict_key(body, "specialization"), body


@dataclass(frozen=True)
class AppStoreMessage:
    """A URL preview whose link points at an app in the App Store."""

    url: str | None = None
    """The URL that ended up serving content, after all redirects."""
    original_url: str | None = None
    """The original URL, before any redirects."""
    app_name: str | None = None
    """The full name of the app in the App Store."""
    description: str | None = None
    """The short description of the app in the App Store."""
    platform: str | None = None
    """The platform the app is compiled for."""
    genre: str | None = None
    """The app's genre."""

    @classmethod
    def from_map(cls, payload: Any) -> AppStoreMessage:
        """Build a message from a decoded payload dictionary.

        Raises PlistParseError with kind NO_PAYLOAD when the rich link metadata
        or its specialization is missing, and WRONG_MESSAGE_TYPE when the
        specialization describes a music album rather than an app.
        """
        try:
            app_metadata, body = _metadata_and_body(payload)
        except PlistParseError as error:
            raise PlistParseError(PlistParseErrorKind.NO_PAYLOAD) from error

        if get_string_from_dict(app_metadata, "album") is not None:
            raise PlistParseError(PlistParseErrorKind.WRONG_MESSAGE_TYPE)

        return cls(
            url=get_string_from_nested_dict(body, "URL"),
            original_url=get_string_from_nested_dict(body, "originalURL"),
            app_name=get_string_from_dict(app_metadata, "name"),
            description=get_string_from_dict(app_metadata, "subtitle"),
            platform=get_string_from_dict(app_metadata, "platform"),
            genre=get_string_from_dict(app_metadata, "genre"),
        )