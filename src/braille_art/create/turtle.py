"""Turtle graphics on top of a Braille canvas."""

from __future__ import annotations

import logging
import math

from braille_art.core.canvas import Canvas
from braille_art.core.constants import CELL_HEIGHT, CELL_WIDTH

logger = logging.getLogger(__name__)

# Furthest sub-pixel reachable on a 16-bit cell grid.
MAX_X = 0xFFFF * CELL_WIDTH + CELL_WIDTH - 1
MAX_Y = 0xFFFF * CELL_HEIGHT + CELL_HEIGHT - 1


def _to_pixel(value: float, limit: int) -> int:
    """
    Round half away from zero and clamp into [0, limit].

    NaN maps to 0, and infinities saturate like any other out of range
    value.
    """
    if math.isnan(value):
        logger.debug("Clamping NaN coordinate to 0")
        return 0
    if value <= 0:
        if value <= -0.5:
            logger.debug("Clamping coordinate %r to 0", value)
        return 0
    if value >= limit:
        logger.debug("Clamping coordinate %r to %d", value, limit)
        return limit
    return math.floor(value + 0.5)


class Turtle:
    """
    A 'turtle' that walks around a canvas drawing lines.

    The turtle starts with its brush down, facing right. Angles are in
    degrees and positive rotation turns clockwise, since y grows
    downward on a terminal.

    Example:
        >>> t = Turtle(10, 10)
        >>> for _ in range(4):
        ...     t.forward(20)
        ...     t.right(90)
        >>> print(t.frame())
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, canvas: Canvas | None = None):
        self.x = x
        self.y = y
        self.brush = True
        self.rotation = 0.0
        self.canvas = canvas if canvas is not None else Canvas(0, 0)

    @classmethod
    def from_canvas(cls, x: float, y: float, canvas: Canvas) -> Turtle:
        """Create a turtle drawing on an existing canvas."""
        return cls(x, y, canvas)

    def width(self, width: int) -> Turtle:
        """Set the canvas width in cells."""
        self.canvas.width = width
        return self

    def height(self, height: int) -> Turtle:
        """Set the canvas height in cells."""
        self.canvas.height = height
        return self

    def up(self) -> None:
        """Lift the brush."""
        self.brush = False

    def down(self) -> None:
        """Put the brush down."""
        self.brush = True

    def toggle(self) -> None:
        """Toggle the brush."""
        self.brush = not self.brush

    def forward(self, dist: float) -> None:
        """Move forward by dist sub-pixels."""
        rad = math.radians(self.rotation)
        self.teleport(self.x + math.cos(rad) * dist, self.y + math.sin(rad) * dist)

    def back(self, dist: float) -> None:
        """Move backward by dist sub-pixels."""
        self.forward(-dist)

    def teleport(self, x: float, y: float) -> None:
        """
        Move to (x, y).

        Draws a line from the old position when the brush is down. Positions
        are rounded and clamped onto the canvas grid before drawing, so NaN
        and infinite coordinates never raise.
        """
        if self.brush:
            self.canvas.line(
                _to_pixel(self.x, MAX_X),
                _to_pixel(self.y, MAX_Y),
                _to_pixel(x, MAX_X),
                _to_pixel(y, MAX_Y),
            )
        self.x = x
        self.y = y

    def right(self, angle: float) -> None:
        """Turn clockwise by angle degrees."""
        self.rotation += angle

    def left(self, angle: float) -> None:
        """Turn counter-clockwise by angle degrees."""
        self.rotation -= angle

    def frame(self) -> str:
        """Render the turtle's canvas."""
        return self.canvas.frame()
