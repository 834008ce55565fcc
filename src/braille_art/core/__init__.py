"""Core data structures for Braille art representation."""

from braille_art.core.cell import Cell, Char, Dots, Empty
from braille_art.core.canvas import Canvas
from braille_art.core.color import Color

__all__ = ["Cell", "Char", "Dots", "Empty", "Canvas", "Color"]
