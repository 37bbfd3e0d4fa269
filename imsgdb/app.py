"""Messages that third-party and system apps place in a conversation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from imsgdb.payload import (
    get_string_from_dict,
    get_string_from_nested_dict,
    require_dict_key,
)


@dataclass(frozen=True)
class AppMessage:
    """A message template layout generated by an app, such as Apple Pay or a game."""

    image: str | None = None
    """An image used to represent the message in the transcript."""
    url: str | None = None
    """A URL pointing to a media file used to represent the message."""
    title: str | None = None
    """The title for the image or media file."""
    subtitle: str | None = None
    """The subtitle for the image or media file."""
    caption: str | None = None
    """A left-aligned caption for the message bubble."""
    subcaption: str | None = None
    """A left-aligned subcaption for the message bubble."""
    trailing_caption: str | None = None
    """A right-aligned caption for the message bubble."""
    trailing_subcaption: str | None = None
    """A right-aligned subcaption for the message bubble."""
    app_name: str | None = None
    """The name of the app that created this message."""
    ldtext: str | None = None
    """Text shown in the centre of the bubble; set only for system messages."""

    @classmethod
    def from_map(cls, payload: Any) -> AppMessage:
        """Build a message from a decoded payload dictionary.

        Raises PlistParseError if the payload is not a dictionary or has no
        ``userInfo`` entry.
        """
        user_info = require_dict_key(payload, "userInfo")
        return cls(
            image=get_string_from_dict(payload, "image"),
            url=get_string_from_nested_dict(payload, "URL"),
            title=get_string_from_dict(user_info, "image-title"),
            subtitle=get_string_from_dict(user_info, "image-subtitle"),
            caption=get_string_from_dict(user_info, "caption"),
            subcaption=get_string_from_dict(user_info, "subcaption"),
            trailing_caption=get_string_from_dict(user_info, "secondary-subcaption"),
            trailing_subcaption=get_string_from_dict(user_info, "tertiary-subcaption"),
            app_name=get_string_from_dict(payload, "an"),
            ldtext=get_string_from_dict(payload, "ldtext"),
        )

    def parse_query_string(self) -> dict[str, str]:
        """Return the key/value pairs of a URL that is a bare query string.

        Only URLs starting with ``?`` are read; pairs that do not split into
        exactly one key and one value are skipped.
        """
        if not self.url or not self.url.startswith("?"):
            return {}
        pairs: dict[str, str] = {}
        for part in self.url[1:].split("&"):
            pieces = part.split("=")
            if len(pieces) == 2:
                key, value = pieces
                pairs[key] = value
        return pairs