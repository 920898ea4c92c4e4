"""
palettekit

Extracts a small palette of representative colors from pixel samples with
k-means, orders it by a color metric and expands chosen colors into
monochromatic gradients.

Quick start:
  from palettekit import kmeans, sort_color, luminance, get_monochromatic_colors
  centers = await kmeans(points, k=6)
  palette = sort_color(centers, True, luminance)
"""

__version__ = "1.0.0"

from .config import Config, config
from .schemas import ColorEntry, PaletteResult
from .services.colors import (
    METRICS, KMeansResult, brightness, distance, extract_palette,
    get_metric, get_monochromatic_colors, hex_to_rgb, hsv_to_rgb, hue,
    kmeans, luminance, rgb_to_hex, run_kmeans, saturation, sort_color,
    sort_color_in_place, value
)

__all__ = [
    "__version__",
    "Config",
    "config",
    "ColorEntry",
    "PaletteResult",
    "METRICS",
    "KMeansResult",
    "brightness",
    "distance",
    "extract_palette",
    "get_metric",
    "get_monochromatic_colors",
    "hex_to_rgb",
    "hsv_to_rgb",
    "hue",
    "kmeans",
    "luminance",
    "rgb_to_hex",
    "run_kmeans",
    "saturation",
    "sort_color",
    "sort_color_in_place",
    "value",
]
