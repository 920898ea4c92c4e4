"""
palettekit Colors Module

Provides color metrics, k-means palette clustering, metric-based ordering
and monochromatic gradient expansion for sampled pixel collections.
"""

from .color_metrics import (
    METRICS, brightness, distance, get_metric, hue, luminance,
    pairwise_distances, round_half_up, saturation, value
)
from .conversion import hex_to_rgb, hsv_to_rgb, rgb_to_hex
from .clustering import KMeansResult, kmeans, run_kmeans
from .ordering import sort_color, sort_color_in_place
from .monochromatic import get_monochromatic_colors, monochromatic_hsv_points
from .extraction import extract_palette, prepare_points

__all__ = [
    "METRICS",
    "brightness",
    "distance",
    "get_metric",
    "hue",
    "luminance",
    "pairwise_distances",
    "round_half_up",
    "saturation",
    "value",
    "hex_to_rgb",
    "hsv_to_rgb",
    "rgb_to_hex",
    "KMeansResult",
    "kmeans",
    "run_kmeans",
    "sort_color",
    "sort_color_in_place",
    "get_monochromatic_colors",
    "monochromatic_hsv_points",
    "extract_palette",
    "prepare_points",
]
