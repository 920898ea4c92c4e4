"""
Test configuration and fixtures for palettekit tests.
"""
import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so clustering runs are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def three_blobs():
    """Three tight, well-separated color groups (red, green, blue), 50 points each."""
    gen = np.random.default_rng(7)
    anchors = np.array([[220, 30, 30], [30, 200, 40], [25, 35, 210]], dtype=np.float64)
    blobs = [anchor + gen.integers(-4, 5, size=(50, 3)) for anchor in anchors]
    return np.vstack(blobs)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    from palettekit.utils.metrics import reset_metrics
    reset_metrics()
