"""
braille-art: terminal graphics with Unicode Braille characters

Each character cell packs a 2x4 block of dots, giving eight times the
resolution of plain text, with optional 24-bit color.

Quick Start:
    >>> import braille_art as braille
    >>> canvas = braille.Canvas(10, 10)
    >>> canvas.set_color(0x00FF00)
    >>> canvas.line(2, 2, 8, 8)
    >>> print(canvas.frame())

Features:
    - Sparse sub-pixel canvas that grows to fit what is drawn
    - Lines, points and text overlay
    - Per-cell color averaging rendered as true color escapes
    - Minimal escape output: one sequence per color run
    - Turtle graphics
"""

__version__ = "0.1.0"

# Core types
from braille_art.core.cell import Cell
from braille_art.core.canvas import Canvas
from braille_art.core.color import Color

# Rendering
from braille_art.render.terminal import TerminalRenderer
from braille_art.render.text import TextRenderer

# Creation
from braille_art.create.turtle import Turtle

def turtle(x: float = 0.0, y: float = 0.0) -> Turtle:
    """Start drawing with a turtle on a fresh canvas."""
    return Turtle(x, y)

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Canvas",
    "Color",
    # Rendering
    "TerminalRenderer",
    "TextRenderer",
    # Creation
    "turtle",
    "Turtle",
]
