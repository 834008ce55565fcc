"""Cell - one character position of the Braille canvas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from braille_art.core.color import Color, colorize
from braille_art.core.constants import BRAILLE_BASE


@dataclass(frozen=True, slots=True)
class Empty:
    """Nothing drawn; renders as a space."""


@dataclass(frozen=True, slots=True)
class Dots:
    """Set sub-pixel dots, one bit per Braille dot."""
    mask: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.mask <= 0xFF:
            raise ValueError(f"Dot mask must be 0-255, got {self.mask}")


@dataclass(frozen=True, slots=True)
class Char:
    """A literal character overriding any dots."""
    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Char content must be a single character, got {self.char!r}")


Content = Union[Empty, Dots, Char]

EMPTY = Empty()


@dataclass(slots=True)
class Cell:
    """
    The state of a single output character.

    A cell holds exactly one kind of content (empty, Braille dots or a
    literal character) together with the colors drawn into it. The
    rendered color is the mean of all accumulated colors, so a cell hit
    by the same color three times and another color once leans toward
    the first.
    """
    content: Content = EMPTY
    colors: list[Color] = field(default_factory=list)

    def copy(self) -> Cell:
        """Create a copy of this cell."""
        return Cell(content=self.content, colors=list(self.colors))

    def is_empty(self) -> bool:
        """Check if nothing has been drawn into this cell."""
        return isinstance(self.content, Empty) and not self.colors

    # -- dots -----------------------------------------------------------

    def set_dot(self, mask: int) -> None:
        """Set dot bits, replacing a character or empty content."""
        old = self.content.mask if isinstance(self.content, Dots) else 0
        self.content = Dots(old | mask)

    def unset_dot(self, mask: int) -> None:
        """Clear dot bits. Has no effect unless the cell holds dots."""
        if isinstance(self.content, Dots):
            self.content = Dots(self.content.mask & ~mask & 0xFF)

    def toggle_dot(self, mask: int) -> None:
        """Flip dot bits. Has no effect unless the cell holds dots."""
        if isinstance(self.content, Dots):
            self.content = Dots(self.content.mask ^ mask)

    def dot_is_set(self, mask: int) -> bool:
        """Check whether any of the given dot bits is set."""
        return isinstance(self.content, Dots) and self.content.mask & mask != 0

    # -- characters -----------------------------------------------------

    def set_char(self, char: str) -> None:
        """Replace the content with a literal character."""
        self.content = Char(char)

    def unset_char(self) -> None:
        """Remove a literal character and its color. No-op for other content."""
        if isinstance(self.content, Char):
            self.content = EMPTY
            self.colors = []

    # -- colors ---------------------------------------------------------

    def set_color(self, color: Color | None) -> None:
        """Replace all accumulated colors with a single color (or none)."""
        self.colors = [] if color is None else [color]

    def add_color(self, color: Color | None) -> None:
        """Accumulate one more color for averaging. None is ignored."""
        if color is not None:
            self.colors.append(color)

    def effective_color(self) -> Color | None:
        """Mean of the accumulated colors, or None if there are none."""
        return Color.mean(self.colors)

    @property
    def color(self) -> Color | None:
        return self.effective_color()

    # -- rendering ------------------------------------------------------

    @property
    def glyph(self) -> str:
        """The display character for this cell's content."""
        content = self.content
        if isinstance(content, Char):
            return content.char
        if isinstance(content, Dots):
            return chr(BRAILLE_BASE + content.mask)
        return " "

    def render_char(self, prev_color: Color | None) -> tuple[str, Color | None]:
        """
        Render this cell following a cell of color prev_color.

        A color escape is only emitted when the color changes. Leaving a
        colored run emits a reset first.

        Args:
            prev_color: Effective color of the previously rendered cell

        Returns:
            Tuple of (text fragment, this cell's effective color)
        """
        color = self.effective_color()
        if color == prev_color:
            return colorize(None, self.glyph), color

        parts: list[str] = []
        if prev_color is not None:
            parts.append(colorize(append_end=True))
        parts.append(colorize(color, self.glyph))
        return "".join(parts), color
