"""Expressive send effects chosen by holding the send button."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class BubbleEffect(Enum):
    """Effects that alter the display of a single chat bubble."""

    SLAM = auto()
    LOUD = auto()
    GENTLE = auto()
    INVISIBLE_INK = auto()


class ScreenEffect(Enum):
    """Effects that alter the entire background of the message view."""

    CONFETTI = auto()
    ECHO = auto()
    FIREWORKS = auto()
    BALLOONS = auto()
    HEART = auto()
    LASERS = auto()
    SHOOTING_STAR = auto()
    SPARKLES = auto()
    SPOTLIGHT = auto()


class ExpressiveKind(Enum):
    """Which family of effect an expressive belongs to."""

    SCREEN = auto()
    BUBBLE = auto()
    UNKNOWN = auto()
    NONE = auto()


_Detail = Union[ScreenEffect, BubbleEffect, str, None]

_DETAIL_TYPES: dict[ExpressiveKind, type | None] = {
    ExpressiveKind.SCREEN: ScreenEffect,
    ExpressiveKind.BUBBLE: BubbleEffect,
    ExpressiveKind.UNKNOWN: str,
    ExpressiveKind.NONE: None,
}


@dataclass(frozen=True)
class Expressive:
    """An expressive effect attached to a message.

    ``detail`` holds the screen or bubble effect, the raw identifier of an
    unrecognised effect, or None when the message is not an expressive.
    """

    kind: ExpressiveKind
    detail: _Detail = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ExpressiveKind):
            raise TypeError(f"expected an ExpressiveKind, got {self.kind!r}")
        expected = _DETAIL_TYPES[self.kind]
        if expected is None:
            if self.detail is not None:
                raise TypeError("an expressive of kind NONE carries no detail")
        elif not isinstance(self.detail, expected):
            raise TypeError(
                f"an expressive of kind {self.kind.name} needs a "
                f"{expected.__name__}, got {self.detail!r}"
            )

    @classmethod
    def screen(cls, effect: ScreenEffect) -> Expressive:
        """An effect that uses the entire screen."""
        return cls(ExpressiveKind.SCREEN, effect)

    @classmethod
    def bubble(cls, effect: BubbleEffect) -> Expressive:
        """An effect displayed on a single bubble."""
        return cls(ExpressiveKind.BUBBLE, effect)

    @classmethod
    def unknown(cls, name: str) -> Expressive:
        """A new or unrecognised effect, kept by its identifier."""
        return cls(ExpressiveKind.UNKNOWN, name)

    @classmethod
    def none(cls) -> Expressive:
        """The message carries no expressive effect."""
        return cls(ExpressiveKind.NONE)