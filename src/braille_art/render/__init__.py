"""Renderers for outputting Braille canvases."""

from braille_art.render.terminal import TerminalRenderer
from braille_art.render.text import TextRenderer

__all__ = ["TerminalRenderer", "TextRenderer"]
