"""RGBA colours and the palette shared by the interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in self:
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def __add__(self, other: object) -> Color:
        """Add channel by channel, saturating at 255."""
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(min(x + y, 255) for x, y in zip(self, other)))

    def __sub__(self, other: object) -> Color:
        """Subtract channel by channel, saturating at 0."""
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(max(x - y, 0) for x, y in zip(self, other)))


NEUTRAL_WHITE = Color(241, 241, 243)
NEUTRAL_GRAY = Color(41, 41, 43)
DARK_GRAY = Color(31, 31, 33)
LIGHT_GRAY = Color(61, 61, 63)
GOLD_YELLOW = Color(240, 174, 0)
DARK_YELLOW = Color(199, 144, 0)
DARK_GREEN = Color(35, 144, 0)
WARNING_RED = Color(197, 17, 19)
DARK_BLUE = Color(7, 35, 72)
NAVY_BLUE = Color(2, 57, 107)
TRANSPARENT = Color(0, 0, 0, 0)
HALF_TRANSPARENT = Color(0, 0, 0, 127)
QUARTER_TRANSPARENT = Color(0, 0, 0, 63)
OPAQUE_BLACK = Color(0, 0, 0, 255)
OPAQUE_WHITE = Color(255, 255, 255, 255)