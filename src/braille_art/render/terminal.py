"""Render a Braille canvas to terminal escape sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING

from braille_art.core.color import Color, colorize

if TYPE_CHECKING:
    from braille_art.core.canvas import Canvas


class TerminalRenderer:
    """
    Render a Canvas to text with 24-bit ANSI foreground colors.

    Optimizes output by only emitting SGR codes when the color changes,
    so a run of same-colored cells costs a single escape sequence.

    With reset_at_end=False a row that ends colored is left open, and the
    terminal keeps that color into the uncolored cells that start the
    next row. Only disable it when the caller resets the terminal itself.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def rows(self, canvas: Canvas) -> list[str]:
        """Render canvas to one string per row of cells."""
        max_col, max_row = canvas.extent()
        lines: list[str] = []

        for row in range(max_row + 1):
            line_parts: list[str] = []
            prev_color: Color | None = None

            for col in range(max_col + 1):
                text, prev_color = canvas.cell_at(col, row).render_char(prev_color)
                line_parts.append(text)

            # Reset at end of each colored line to prevent color bleeding
            if prev_color is not None and self.reset_at_end:
                line_parts.append(colorize(append_end=True))

            lines.append("".join(line_parts))

        return lines

    def render(self, canvas: Canvas) -> str:
        """Render canvas to ANSI string."""
        return "\n".join(self.rows(canvas))
