"""Canvas - sparse grid of Braille cells addressed in sub-pixel coordinates."""

from __future__ import annotations

import logging
from typing import Iterator

from braille_art.core.cell import Cell, Char
from braille_art.core.color import Color
from braille_art.core.constants import CELL_HEIGHT, CELL_WIDTH, PIXEL_MAP

logger = logging.getLogger(__name__)


class Canvas:
    """
    A drawing surface made of Braille characters.

    All drawing operations take sub-pixel coordinates: every terminal
    cell is 2 sub-pixels wide and 4 tall. Cells are stored sparsely and
    created on first draw.

    The width and height given at construction are a minimum size only.
    Drawing outside of them grows the rendered output to fit.

    Example:
        >>> canvas = Canvas(10, 10)
        >>> canvas.set(5, 4)
        >>> canvas.line(2, 2, 8, 8)
        >>> print(canvas.frame())
    """

    def __init__(self, width: int, height: int):
        """
        Create an empty canvas.

        Args:
            width: Minimum width in sub-pixels
            height: Minimum height in sub-pixels
        """
        self.width = width // CELL_WIDTH
        self.height = height // CELL_HEIGHT
        self._pixels: dict[tuple[int, int], Cell] = {}
        self._color: Color | None = None

    def __repr__(self) -> str:
        return (
            f"Canvas(width={self.width}, height={self.height}, "
            f"cells={len(self._pixels)}, color={self._color!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._color == other._color
            and self._pixels == other._pixels
        )

    def __len__(self) -> int:
        """Number of cells that have been drawn into."""
        return len(self._pixels)

    def __getitem__(self, pos: tuple[int, int]) -> bool:
        """Check a sub-pixel using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def copy(self) -> Canvas:
        """Create an independent copy of this canvas."""
        new = Canvas(0, 0)
        new.width = self.width
        new.height = self.height
        new._color = self._color
        new._pixels = {key: cell.copy() for key, cell in self._pixels.items()}
        return new

    # -- coordinates ----------------------------------------------------

    @staticmethod
    def _locate(x: int, y: int) -> tuple[tuple[int, int], int]:
        """Map a sub-pixel to its cell key and dot bit."""
        if x < 0 or y < 0:
            raise ValueError(f"Coordinates must be non-negative, got ({x}, {y})")
        key = (x // CELL_WIDTH, y // CELL_HEIGHT)
        return key, PIXEL_MAP[y % CELL_HEIGHT][x % CELL_WIDTH]

    def _cell(self, key: tuple[int, int]) -> Cell:
        """Get the cell for a key, creating it on first use."""
        cell = self._pixels.get(key)
        if cell is None:
            cell = self._pixels[key] = Cell()
        return cell

    # -- state ----------------------------------------------------------

    @property
    def color(self) -> Color | None:
        """Color applied to subsequent draws, or None for the terminal default."""
        return self._color

    def set_color(self, color: int) -> None:
        """Set the draw color from a 24-bit integer such as 0xFF0000."""
        self._color = Color.from_hex(color)

    def reset_color(self) -> None:
        """Draw in the terminal's default color again."""
        self._color = None

    def clear(self) -> None:
        """Remove everything drawn. Size and draw color are kept."""
        logger.debug("Clearing canvas with %d cells", len(self._pixels))
        self._pixels.clear()

    # -- dots -----------------------------------------------------------

    def set(self, x: int, y: int) -> None:
        """Set the sub-pixel at (x, y) in the current draw color."""
        key, dot = self._locate(x, y)
        cell = self._cell(key)
        cell.set_dot(dot)
        cell.add_color(self._color)

    def unset(self, x: int, y: int) -> None:
        """Clear the sub-pixel at (x, y)."""
        key, dot = self._locate(x, y)
        cell = self._pixels.get(key)
        if cell is not None:
            cell.unset_dot(dot)

    def toggle(self, x: int, y: int) -> None:
        """Flip the sub-pixel at (x, y)."""
        key, dot = self._locate(x, y)
        cell = self._pixels.get(key)
        if cell is not None:
            cell.toggle_dot(dot)

    def get(self, x: int, y: int) -> bool:
        """Check whether the sub-pixel at (x, y) is set."""
        key, dot = self._locate(x, y)
        cell = self._pixels.get(key)
        return cell is not None and cell.dot_is_set(dot)

    # -- characters -----------------------------------------------------

    def set_char(self, x: int, y: int, char: str) -> None:
        """Put a character in the cell containing (x, y)."""
        key, _ = self._locate(x, y)
        content = Char(char)
        cell = self._cell(key)
        cell.content = content
        cell.set_color(self._color)

    def unset_char(self, x: int, y: int) -> None:
        """Remove a character from the cell containing (x, y)."""
        key, _ = self._locate(x, y)
        cell = self._pixels.get(key)
        if cell is not None:
            cell.unset_char()

    def text(self, x: int, y: int, max_width: int, text: str) -> None:
        """
        Write text starting at (x, y), one character per cell.

        Characters are placed every 2 sub-pixels. A character is skipped,
        along with the rest of the text, once its offset exceeds max_width.
        """
        for i, char in enumerate(text):
            offset = i * CELL_WIDTH
            if offset > max_width:
                return
            self.set_char(x + offset, y, char)

    # -- shapes ---------------------------------------------------------

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a straight line from (x1, y1) to (x2, y2), both ends included."""
        xdiff = abs(x2 - x1)
        ydiff = abs(y2 - y1)
        xdir = 1 if x1 <= x2 else -1
        ydir = 1 if y1 <= y2 else -1
        steps = max(xdiff, ydiff)

        if steps == 0:
            self.set(x1, y1)
            return

        for i in range(steps + 1):
            x = x1 + (i * xdiff // steps) * xdir
            y = y1 + (i * ydiff // steps) * ydir
            self.set(x, y)

    # -- grid access ----------------------------------------------------

    def extent(self) -> tuple[int, int]:
        """
        Get the last cell column and row to render.

        This is the larger of the nominal size and the furthest cell
        drawn into.
        """
        max_col = self.width
        max_row = self.height
        for col, row in self._pixels:
            max_col = max(max_col, col)
            max_row = max(max_row, row)
        if max_col > self.width or max_row > self.height:
            logger.debug(
                "Canvas grew past nominal size %dx%d to %dx%d",
                self.width, self.height, max_col, max_row,
            )
        return max_col, max_row

    def cell_at(self, col: int, row: int) -> Cell:
        """Get the cell at a cell position, or an empty cell if none was drawn."""
        cell = self._pixels.get((col, row))
        return cell if cell is not None else Cell()

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over drawn cells as (col, row, cell) tuples, row by row."""
        for col, row in sorted(self._pixels, key=lambda key: (key[1], key[0])):
            yield col, row, self._pixels[(col, row)]

    # -- output ---------------------------------------------------------

    def rows(self) -> list[str]:
        """
        Render each row of cells to a string.

        Each row is four sub-pixels tall since a Braille character spans
        two by four dots.
        """
        from braille_art.render.terminal import TerminalRenderer
        return TerminalRenderer().rows(self)

    def frame(self) -> str:
        """Render the canvas to a single string."""
        return "\n".join(self.rows())
