"""
Palette extraction pipeline.

Runs the full flow on a collection of sampled pixels:
subsampling -> k-means clustering -> metric ordering -> optional
monochromatic expansion of one palette entry.
"""

import time
from typing import Optional

import numpy as np

from palettekit.config import config
from palettekit.schemas import ColorEntry, PaletteResult
from palettekit.utils.logging import get_logger
from palettekit.utils.metrics import get_metrics
from .clustering import RandomSource, as_point_array, make_rng, run_kmeans
from .color_metrics import get_metric
from .conversion import rgb_to_hex
from .monochromatic import get_monochromatic_colors
from .ordering import sort_color


def prepare_points(points, max_samples: Optional[int] = None,
                   rng: RandomSource = None) -> np.ndarray:
    """
    Convert input points to an (N, 3) array, downsampling if needed.

    Args:
        points: Collection of RGB triples
        max_samples: Maximum number of points kept (defaults to config.MAX_SAMPLES)
        rng: numpy Generator, integer seed or None

    Returns:
        Float array (M, 3) with M <= max_samples

    Raises:
        ValueError: If points are empty/malformed or max_samples < 1
    """
    max_samples = config.MAX_SAMPLES if max_samples is None else max_samples
    if max_samples < 1:
        raise ValueError(f"max_samples must be >= 1, got {max_samples}")

    data = as_point_array(points)
    if len(data) > max_samples:
        generator = make_rng(rng)
        indices = generator.choice(len(data), size=max_samples, replace=False)
        data = data[indices]
    return data


async def extract_palette(
    points,
    k: Optional[int] = None,
    max_iterations: Optional[int] = None,
    sort_by: Optional[str] = None,
    ascending: bool = True,
    expand_index: Optional[int] = None,
    step: Optional[int] = None,
    max_samples: Optional[int] = None,
    rng: RandomSource = None,
) -> PaletteResult:
    """
    Extract an ordered color palette from sampled pixels.

    Args:
        points: Collection of RGB triples (N, 3)
        k: Number of palette colors (defaults to config.DEFAULT_K)
        max_iterations: K-means iteration budget (defaults to config.MAX_ITERATIONS)
        sort_by: Metric name to order the palette by (defaults to config.DEFAULT_SORT)
        ascending: Order smallest metric value first
        expand_index: Index into the ordered palette to expand into a
            monochromatic gradient; no expansion when None
        step: Gradient steps per side (defaults to config.MONOCHROME_STEPS)
        max_samples: Subsampling cap (defaults to config.MAX_SAMPLES)
        rng: numpy Generator, integer seed or None

    Returns:
        PaletteResult with hex colors, dominance ratios and run statistics

    Raises:
        ValueError: For invalid inputs or parameters
    """
    log = get_logger()
    start_time = time.time()

    k = config.DEFAULT_K if k is None else k
    max_iterations = config.MAX_ITERATIONS if max_iterations is None else max_iterations
    sort_by = config.DEFAULT_SORT if sort_by is None else sort_by
    step = config.MONOCHROME_STEPS if step is None else step

    if not config.validate_sort(sort_by):
        raise ValueError(f"Unsupported sort metric: {sort_by}. Expected one of {config.SUPPORTED_SORTS}")
    if expand_index is not None and not 0 <= expand_index < k:
        raise ValueError(f"expand_index must be within [0, {k}), got {expand_index}")

    # One generator drives subsampling and clustering so a seed reproduces the run
    generator = make_rng(rng)
    data = prepare_points(points, max_samples=max_samples, rng=generator)
    log.info(f"Prepared {len(data)} points for extraction",
             extra={"k": k, "sort_by": sort_by})

    result = run_kmeans(data, k=k, max_iterations=max_iterations, rng=generator)

    metric_fn = get_metric(sort_by)
    total = len(data)
    entries = list(zip(result.centers, result.counts))
    ordered = sort_color(entries, ascending, metric=lambda entry: metric_fn(entry[0]))

    colors = [
        ColorEntry(hex=rgb_to_hex(center), rgb=list(center), ratio=count / total)
        for center, count in ordered
    ]

    monochromatic = None
    if expand_index is not None:
        base = ordered[expand_index][0]
        monochromatic = [rgb_to_hex(c) for c in get_monochromatic_colors(base, step)]
        log.debug(f"Expanded palette entry {expand_index} into {len(monochromatic)} colors")

    processing_ms = (time.time() - start_time) * 1000
    get_metrics().record_timing("extraction", processing_ms)

    ratios_str = [f"{c.ratio:.3f}" for c in colors]
    log.info(f"Palette extraction complete: {ratios_str}",
             extra={"iterations": result.iterations, "converged": result.converged,
                    "ms_total": processing_ms})

    return PaletteResult(
        colors=colors,
        k=k,
        sampled_points=total,
        iterations=result.iterations,
        converged=result.converged,
        sort_by=sort_by,
        ascending=ascending,
        monochromatic=monochromatic,
        processing_ms=processing_ms,
    )
