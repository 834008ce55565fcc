"""Shared pytest fixtures."""

import pytest

from braille_art.core.canvas import Canvas


@pytest.fixture
def canvas() -> Canvas:
    """A 10x10 sub-pixel canvas (5x2 cells nominal)."""
    return Canvas(10, 10)


@pytest.fixture
def empty_canvas() -> Canvas:
    """A zero-sized canvas that renders only what is drawn."""
    return Canvas(0, 0)


@pytest.fixture
def example_canvas(canvas: Canvas) -> Canvas:
    """A point plus a diagonal line."""
    canvas.set(5, 4)
    canvas.line(2, 2, 8, 8)
    return canvas
