"""
Unit tests for palette extraction pipeline.

Tests the end-to-end flow:
- point preparation and subsampling
- palette ordering and dominance ratios
- optional monochromatic expansion
- parameter validation
"""

import numpy as np
import pytest

from palettekit.schemas import PaletteResult
from palettekit.services.colors.color_metrics import luminance
from palettekit.services.colors.conversion import hex_to_rgb
from palettekit.services.colors.extraction import extract_palette, prepare_points
from palettekit.utils.metrics import get_metrics


class TestPreparePoints:
    """Test point preparation"""

    def test_small_input_kept_whole(self):
        data = prepare_points([[1, 2, 3], [4, 5, 6]], max_samples=10, rng=0)
        assert data.shape == (2, 3)
        assert data.tolist() == [[1, 2, 3], [4, 5, 6]]

    def test_downsamples_without_replacement(self, three_blobs):
        data = prepare_points(three_blobs, max_samples=40, rng=0)
        assert data.shape == (40, 3)
        rows = {tuple(r) for r in three_blobs.tolist()}
        assert all(tuple(r) in rows for r in data.tolist())

    def test_invalid_max_samples(self):
        with pytest.raises(ValueError):
            prepare_points([[1, 2, 3]], max_samples=0)


class TestExtractPalette:
    """Test palette extraction orchestration"""

    @pytest.mark.asyncio
    async def test_basic_palette(self, three_blobs):
        result = await extract_palette(three_blobs, k=3, sort_by="luminance", rng=1)

        assert isinstance(result, PaletteResult)
        assert len(result.colors) == 3
        assert result.k == 3
        assert result.sampled_points == len(three_blobs)
        assert result.sort_by == "luminance"
        assert result.monochromatic is None
        assert sum(c.ratio for c in result.colors) == pytest.approx(1.0)

        lums = [luminance(c.rgb) for c in result.colors]
        assert lums == sorted(lums)
        for entry in result.colors:
            assert list(hex_to_rgb(entry.hex)) == entry.rgb

    @pytest.mark.asyncio
    async def test_descending_order(self, three_blobs):
        result = await extract_palette(three_blobs, k=3, sort_by="brightness",
                                       ascending=False, rng=1)
        mags = [float(np.linalg.norm(c.rgb)) for c in result.colors]
        assert mags == sorted(mags, reverse=True)
        assert result.ascending is False

    @pytest.mark.asyncio
    async def test_monochromatic_expansion(self, three_blobs):
        result = await extract_palette(three_blobs, k=3, expand_index=0, step=2, rng=1)
        assert result.monochromatic is not None
        assert len(result.monochromatic) == 7
        assert all(h.startswith("#") and len(h) == 7 for h in result.monochromatic)

    @pytest.mark.asyncio
    async def test_single_color_input(self):
        result = await extract_palette([[10, 10, 10]] * 3, k=1, rng=0)
        assert result.colors[0].hex == "#0A0A0A"
        assert result.colors[0].ratio == pytest.approx(1.0)
        assert result.iterations == 1
        assert result.converged is True

    @pytest.mark.asyncio
    async def test_seeded_runs_are_reproducible(self, three_blobs):
        first = await extract_palette(three_blobs, k=4, max_samples=60, rng=9)
        second = await extract_palette(three_blobs, k=4, max_samples=60, rng=9)
        assert [c.hex for c in first.colors] == [c.hex for c in second.colors]

    @pytest.mark.asyncio
    async def test_invalid_sort(self, three_blobs):
        with pytest.raises(ValueError, match="Unsupported sort"):
            await extract_palette(three_blobs, k=3, sort_by="warmth")

    @pytest.mark.asyncio
    async def test_invalid_expand_index(self, three_blobs):
        with pytest.raises(ValueError, match="expand_index"):
            await extract_palette(three_blobs, k=3, expand_index=3)

    @pytest.mark.asyncio
    async def test_k_larger_than_samples(self):
        with pytest.raises(ValueError):
            await extract_palette([[1, 1, 1], [2, 2, 2]], k=3)

    @pytest.mark.asyncio
    async def test_records_extraction_timing(self, three_blobs):
        await extract_palette(three_blobs, k=2, rng=3)
        stats = get_metrics().get_timing_stats()
        assert stats["extraction_duration_ms"]["count"] == 1
        assert stats["kmeans_duration_ms"]["count"] == 1
