"""
Color Metrics Module

Pure per-color measurements used to drive clustering, palette ordering and
monochromatic expansion. Every function takes an RGB triple with channels
in [0, 255] (tuple, list or numpy row) and returns a plain number.
"""

import math
from typing import Callable, Dict, Sequence, Union

import numpy as np

ColorPoint = Sequence[float]
MetricFn = Callable[[ColorPoint], float]


def round_half_up(x: float) -> int:
    """Round to nearest integer with .5 going up (-2.5 -> -2, 2.5 -> 3)."""
    return int(math.floor(x + 0.5))


def distance(a: ColorPoint, b: ColorPoint) -> float:
    """Euclidean distance between two colors over the three channels."""
    # Cast first: uint8 pixel rows wrap around on subtraction
    return math.sqrt(sum((float(a[i]) - float(b[i])) ** 2 for i in range(3)))


def pairwise_distances(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """
    Euclidean distance from every point to every center.

    Args:
        points: Array (N, 3)
        centers: Array (k, 3)

    Returns:
        Array (N, k) where [i, j] is the distance from points[i] to centers[j]
    """
    points_f = np.asarray(points, dtype=np.float64)
    centers_f = np.asarray(centers, dtype=np.float64)
    # Broadcasting: (N, 1, 3) - (1, k, 3) -> (N, k, 3) -> (N, k)
    return np.linalg.norm(points_f[:, None, :] - centers_f[None, :, :], axis=2)


def luminance(point: ColorPoint) -> float:
    """
    WCAG 2.0 relative luminance.

    See https://www.w3.org/TR/WCAG20/#relativeluminancedef

    Returns:
        Luminance in [0, 1] (0 for black, 1 for white)
    """
    linear = []
    for channel in point[:3]:
        s_val = channel / 255
        if s_val <= 0.03928:
            linear.append(s_val / 12.92)
        else:
            linear.append(((s_val + 0.055) / 1.055) ** 2.4)
    r_lin, g_lin, b_lin = linear
    return 0.2126 * r_lin + 0.7152 * g_lin + 0.0722 * b_lin


def brightness(point: ColorPoint) -> float:
    """Distance from black; a magnitude-based brightness proxy."""
    return distance(point, (0, 0, 0))


def hue(point: ColorPoint) -> int:
    """
    HSV hue of a color in whole degrees [0, 360).

    Achromatic colors (max == min) have hue 0.
    """
    r, g, b = (float(c) for c in point[:3])
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    if c_max == c_min:
        return 0

    delta = c_max - c_min
    if c_max == r:
        # math.fmod keeps the sign of the dividend, like a truncating remainder
        sector = math.fmod((g - b) / delta, 6)
    elif c_max == g:
        sector = (b - r) / delta + 2
    else:
        sector = (r - g) / delta + 4

    degrees = round_half_up(sector * 60)
    if degrees < 0:
        degrees += 360
    return degrees


def saturation(point: ColorPoint) -> float:
    """
    HSV saturation in [0, 1].

    Pure black has no defined saturation; 0.0 is returned for it.
    """
    c_max = max(point[0], point[1], point[2]) / 255
    c_min = min(point[0], point[1], point[2]) / 255
    if c_max == 0:
        return 0.0
    return (c_max - c_min) / c_max


def value(point: ColorPoint) -> float:
    """HSV value as a percentage [0, 100]."""
    return max(point[0], point[1], point[2]) / 255 * 100


METRICS: Dict[str, MetricFn] = {
    "luminance": luminance,
    "brightness": brightness,
    "hue": hue,
    "saturation": saturation,
    "value": value,
}


def get_metric(metric: Union[str, MetricFn]) -> MetricFn:
    """
    Resolve a metric given by name or as a callable.

    Raises:
        ValueError: If the name is not a registered metric
    """
    if callable(metric):
        return metric
    try:
        return METRICS[metric]
    except KeyError:
        raise ValueError(
            f"Unknown color metric: {metric!r}. "
            f"Expected one of {sorted(METRICS)}"
        )
