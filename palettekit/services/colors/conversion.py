"""
Color conversion helpers: HSV to RGB for gradient generation, plus hex codes
for palette output.
"""

import colorsys
from typing import Sequence, Tuple

RGBTuple = Tuple[int, int, int]


def _to_u8(channel: float) -> int:
    return max(0, min(255, round(channel * 255)))


def hsv_to_rgb(h: float, s: float, v: float) -> RGBTuple:
    """
    Convert an HSV color to an RGB tuple.

    Args:
        h: Hue in degrees (wraps modulo 360)
        s: Saturation in percent [0, 100]
        v: Value in percent [0, 100]

    Returns:
        (R, G, B) with integer channels clamped to [0, 255]
    """
    # colorsys works in [0, 1] for every component
    r, g, b = colorsys.hsv_to_rgb((h % 360) / 360.0, s / 100.0, v / 100.0)
    return (_to_u8(r), _to_u8(g), _to_u8(b))


def rgb_to_hex(point: Sequence[float]) -> str:
    """Convert RGB triple to hex color string."""
    r, g, b = [int(x) for x in point[:3]]
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_rgb(hex_color: str) -> RGBTuple:
    """
    Convert hex color string to RGB tuple.

    Raises:
        ValueError: If the string is not in #RRGGBB form
    """
    hex_clean = hex_color.lstrip('#')
    if len(hex_clean) != 6:
        raise ValueError(f"Invalid hex color format: {hex_color}")

    try:
        return tuple(int(hex_clean[i:i+2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Invalid hex color format: {hex_color}")
