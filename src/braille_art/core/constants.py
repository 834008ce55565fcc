"""Shared constants for Braille rendering."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Unicode Braille Patterns block (U+2800-U+28FF)
BRAILLE_BASE = 0x2800

# Each terminal cell covers 2 columns by 4 rows of sub-pixels.
CELL_WIDTH = 2
CELL_HEIGHT = 4

# Sub-pixel (row, column) to Braille dot bit:
#
#   1 4      0x01 0x08
#   2 5      0x02 0x10
#   3 6      0x04 0x20
#   7 8      0x40 0x80
PIXEL_MAP: tuple[tuple[int, int], ...] = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)
