"""Color representation for Braille art."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from braille_art.core.constants import CSI, RESET


@dataclass(frozen=True, slots=True)
class Color:
    """
    A 24-bit true color value.

    Colors are immutable and compare by value, so they can be used
    directly to detect color runs while rendering.
    """
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Create a Color from a 24-bit integer such as 0xFF8800.

        Bits above the lowest 24 are ignored.
        """
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(r, g, b)

    @classmethod
    def mean(cls, colors: Iterable[Color]) -> Color | None:
        """
        Average colors channel by channel.

        Each channel is the truncated integer mean, so averaging 0xFF0000
        and 0x0000FF gives 0x7F007F. Duplicates count once per occurrence.

        Returns:
            The mean color, or None when no colors are given.
        """
        count = 0
        r = g = b = 0
        for color in colors:
            r += color.r
            g += color.g
            b += color.b
            count += 1
        if count == 0:
            return None
        return cls(r // count, g // count, b // count)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> int:
        """Return the color as a 24-bit integer."""
        return (self.r << 16) | (self.g << 8) | self.b

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for a true color foreground."""
        return f"38;2;{self.r};{self.g};{self.b}"


def colorize(
    color: Color | None = None,
    char: str | None = None,
    append_end: bool = False,
) -> str:
    """
    Wrap a character in foreground color escapes.

    Args:
        color: Foreground color to switch to, or None to emit no color code
        char: Character to emit after the color code, if any
        append_end: Append a reset sequence after the character

    Returns:
        The assembled text fragment (possibly empty)
    """
    parts: list[str] = []
    if color is not None:
        parts.append(f"{CSI}{color.to_sgr_fg()}m")
    if char is not None:
        parts.append(char)
    if append_end:
        parts.append(RESET)
    return "".join(parts)
