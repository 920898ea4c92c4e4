"""
palettekit Configuration
Manages environment variables and defaults for clustering, ordering and expansion.
"""
import os
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


class Config:
    """Configuration class for palettekit services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTEKIT_LOG_LEVEL", "INFO")

    # Clustering defaults
    DEFAULT_K: int = int(os.environ.get("PALETTEKIT_DEFAULT_K", "6"))
    MAX_ITERATIONS: int = int(os.environ.get("PALETTEKIT_MAX_ITERATIONS", "100"))
    CONVERGENCE_TOLERANCE: float = float(os.environ.get("PALETTEKIT_CONVERGENCE_TOLERANCE", "1.0"))
    KMEANS_SEED: Optional[int] = _optional_int("PALETTEKIT_SEED")

    # Sampling
    MAX_SAMPLES: int = int(os.environ.get("PALETTEKIT_MAX_SAMPLES", "20000"))

    # Ordering and expansion
    DEFAULT_SORT: str = os.environ.get("PALETTEKIT_DEFAULT_SORT", "luminance")
    MONOCHROME_STEPS: int = int(os.environ.get("PALETTEKIT_MONOCHROME_STEPS", "3"))

    # Metric names accepted by the palette orderer
    SUPPORTED_SORTS = ["luminance", "brightness", "hue", "saturation", "value"]

    @classmethod
    def validate_k(cls, k: int, n_points: int) -> bool:
        """Validate cluster count against the number of input points."""
        return 1 <= k <= n_points

    @classmethod
    def validate_max_iterations(cls, max_iterations: int) -> bool:
        """Validate iteration budget."""
        return max_iterations >= 1

    @classmethod
    def validate_sort(cls, sort_by: str) -> bool:
        """Validate sort metric name."""
        return sort_by in cls.SUPPORTED_SORTS

    @classmethod
    def validate_step(cls, step: int) -> bool:
        """Validate monochromatic gradient step count."""
        return step >= 0


# Global config instance
config = Config()
