"""Creation tools for drawing on Braille canvases."""

from braille_art.create.turtle import Turtle

__all__ = ["Turtle"]
