"""
Unit tests for palette ordering.
"""

import pytest

from palettekit.services.colors.color_metrics import brightness, hue, luminance, saturation
from palettekit.services.colors.ordering import sort_color, sort_color_in_place


PALETTE = [
    (255, 255, 255),
    (0, 0, 255),
    (128, 128, 128),
    (255, 0, 0),
    (0, 0, 0),
    (0, 200, 100),
]


class TestSortColor:
    """Test pure sorting by metric"""

    @pytest.mark.parametrize("metric", [luminance, brightness, hue, saturation])
    def test_ascending_is_non_decreasing(self, metric):
        ordered = sort_color(PALETTE, True, metric)
        keys = [metric(p) for p in ordered]
        assert all(a <= b for a, b in zip(keys, keys[1:]))

    @pytest.mark.parametrize("metric", [luminance, brightness, hue, saturation])
    def test_descending_is_non_increasing(self, metric):
        ordered = sort_color(PALETTE, False, metric)
        keys = [metric(p) for p in ordered]
        assert all(a >= b for a, b in zip(keys, keys[1:]))

    def test_returns_new_list_and_leaves_input(self):
        original = list(PALETTE)
        ordered = sort_color(original, True, luminance)
        assert ordered is not original
        assert original == PALETTE
        assert sorted(ordered) == sorted(PALETTE)

    def test_luminance_endpoints(self):
        ordered = sort_color(PALETTE, True, luminance)
        assert ordered[0] == (0, 0, 0)
        assert ordered[-1] == (255, 255, 255)

    def test_stable_for_equal_keys_both_directions(self):
        """Achromatic colors all have hue 0 and keep their input order"""
        grays = [(10, 10, 10), (200, 200, 200), (90, 90, 90)]
        points = grays + [(0, 255, 0)]
        assert sort_color(points, True, hue)[:3] == grays
        assert sort_color(points, False, hue)[1:] == grays

    def test_metric_by_name(self):
        assert sort_color(PALETTE, True, "brightness") == sort_color(PALETTE, True, brightness)

    def test_unknown_metric_name(self):
        with pytest.raises(ValueError):
            sort_color(PALETTE, True, "warmth")


class TestSortColorInPlace:
    """Test explicit in-place variant"""

    def test_sorts_caller_list(self):
        points = list(PALETTE)
        result = sort_color_in_place(points, False, luminance)
        assert result is points
        assert points[0] == (255, 255, 255)
        assert points[-1] == (0, 0, 0)
