"""Color helpers for card backgrounds."""

import random
from typing import Optional, Tuple

RGB = Tuple[int, int, int]

WHITE: RGB = (255, 255, 255)
BLACK: RGB = (0, 0, 0)
GRAY: RGB = (128, 128, 128)

# Perceived brightness below this gets white text
DARK_THRESHOLD = 128


def random_color(rng: Optional[random.Random] = None) -> RGB:
    """Return a random RGB triple."""
    rng = rng or random
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


def brightness(color: RGB) -> int:
    r, g, b = color
    return int(0.299 * r + 0.587 * g + 0.114 * b)


def contrast_color(color: RGB) -> RGB:
    return WHITE if brightness(color) < DARK_THRESHOLD else BLACK


def pack_rgb(color: RGB) -> int:
    """Pack an RGB triple into a 0xRRGGBB integer for storage."""
    r, g, b = color
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"Color channel out of range: {channel}")
    return (r << 16) | (g << 8) | b


def unpack_rgb(value: int) -> RGB:
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def to_hex(color: RGB) -> str:
    """Format a color for Qt style sheets."""
    return "#{:02x}{:02x}{:02x}".format(*color)
