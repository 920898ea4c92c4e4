"""
Monochromatic palette expansion.

Derives a gradient of colors sharing the hue of one input color, built in
HSV space and mapped back to RGB.
"""

from typing import Callable, List, Tuple

from loguru import logger

from palettekit.config import config
from .color_metrics import ColorPoint, hue, round_half_up, saturation, value
from .conversion import RGBTuple, hsv_to_rgb as default_hsv_to_rgb

HSVPoint = Tuple[float, float, float]  # (hue deg, saturation %, value %)


def monochromatic_hsv_points(point: ColorPoint, step: int = 3) -> List[HSVPoint]:
    """
    Build the HSV gradient for `point`: n dark-side entries, the original,
    then n light-side entries, where n = step + 1.

    Raises:
        ValueError: If step is negative
    """
    if not config.validate_step(step):
        raise ValueError(f"step must be a non-negative integer, got {step}")

    h = hue(point)
    s = saturation(point) * 100
    v = value(point)

    clip_n = step + 1
    dark_side = (round_half_up(s / clip_n), round_half_up((100 - v) / clip_n))
    light_side = (round_half_up((100 - s) / clip_n), round_half_up(v / clip_n))

    hsv_points: List[HSVPoint] = []
    for i in range(clip_n):
        hsv_points.append((h, i * dark_side[0], 100 - i * dark_side[1]))
    hsv_points.append((h, s, v))
    for i in range(clip_n - 1, -1, -1):
        hsv_points.append((h, 100 - i * light_side[0], i * light_side[1]))
    return hsv_points


def get_monochromatic_colors(
    point: ColorPoint,
    step: int = 3,
    hsv_to_rgb: Callable[[float, float, float], RGBTuple] = default_hsv_to_rgb,
) -> List[RGBTuple]:
    """
    Generate a monochromatic gradient around one color.

    Args:
        point: RGB color to expand
        step: Gradient steps on each side of the original, excluding it
        hsv_to_rgb: Converter from (hue deg, saturation %, value %) to RGB

    Returns:
        2 * (step + 1) + 1 RGB colors; the original sits at index step + 1
    """
    hsv_points = monochromatic_hsv_points(point, step)
    logger.debug(f"Expanding {tuple(point)} into {len(hsv_points)} monochromatic colors")
    return [hsv_to_rgb(*p) for p in hsv_points]
