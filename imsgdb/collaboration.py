"""Link previews generated for Collaboration links, such as from Pages or Freeform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from imsgdb.errors import PlistParseError, PlistParseErrorKind
from imsgdb.payload import (
    get_float_from_nested_dict,
    get_string_from_dict,
    get_string_from_nested_dict,
    require_dict_key,
)


def _meta_and_base(payload: Any) -> tuple[Any, Any]:
    """Return the ``collaborationMetadata`` dictionary and the rich link body."""
    base = require_dict_key(payload, "richLinkMetadata")
    return require_dict_key(base, "collaborationMetadata"), base


def _dig_string(payload: Any, *keys: str) -> str | None:
    """Follow a chain of dictionary keys and return the string at the end, if any."""
    current = payload
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current if isinstance(current, str) else None


@dataclass(frozen=True)
class CollaborationMessage:
    """A URL preview for a shared collaboration session."""

    original_url: str | None = None
    """The URL the user interacts with to start the share session."""
    url: str | None = None
    """The unique URL for the collaboration item."""
    title: str | None = None
    """The title of the shared file."""
    creation_date: float | None = None
    """The date the session was initiated."""
    bundle_id: str | None = None
    """The bundle ID of the application that generated the message."""
    app_name: str | None = None
    """The name of the application that generated the message."""

    @classmethod
    def from_map(cls, payload: Any) -> CollaborationMessage:
        """Build a message from a decoded payload dictionary.

        Raises PlistParseError with kind NO_PAYLOAD when the rich link metadata
        or its collaboration metadata is missing.
        """
        try:
            meta, base = _meta_and_base(payload)
        except PlistParseError as error:
            raise PlistParseError(PlistParseErrorKind.NO_PAYLOAD) from error

        return cls(
            original_url=get_string_from_nested_dict(base, "originalURL"),
            url=get_string_from_dict(meta, "collaborationIdentifier"),
            title=get_string_from_dict(meta, "title"),
            creation_date=get_float_from_nested_dict(meta, "creationDate"),
            bundle_id=_dig_string(
                meta, "containerSetupInfo", "containerID", "ContainerIdentifier"
            ),
            app_name=_dig_string(base, "specialization2", "specialization", "application"),
        )

    def get_url(self) -> str | None:
        """Return the collaboration URL, falling back to the original URL."""
        return self.url if self.url is not None else self.original_url