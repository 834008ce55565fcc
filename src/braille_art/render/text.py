"""Render a Braille canvas to plain text (strip colors)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from braille_art.core.canvas import Canvas


class TextRenderer:
    """Render a Canvas to plain text without any styling."""

    def __init__(self, preserve_whitespace: bool = True):
        self.preserve_whitespace = preserve_whitespace

    def render(self, canvas: Canvas) -> str:
        """Render canvas to plain text."""
        max_col, max_row = canvas.extent()
        lines: list[str] = []

        for row in range(max_row + 1):
            line = "".join(canvas.cell_at(col, row).glyph for col in range(max_col + 1))
            if not self.preserve_whitespace:
                line = line.rstrip(" ")
            lines.append(line)

        result = "\n".join(lines)

        if not self.preserve_whitespace:
            # Remove trailing empty lines
            result = result.rstrip("\n")

        return result
