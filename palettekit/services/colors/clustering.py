"""
K-means clustering of RGB color points.

Partitions a point collection into k groups around representative centers,
iterating assignment and update passes until every center settles within
the convergence tolerance or the iteration budget runs out. This is a local
search: results depend on the random initialization.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
from loguru import logger

from palettekit.config import config
from palettekit.utils.metrics import get_metrics
from .color_metrics import distance, pairwise_distances, round_half_up

RGBTuple = Tuple[int, int, int]
RandomSource = Union[np.random.Generator, int, None]


@dataclass
class KMeansResult:
    """Outcome of a single k-means run."""
    centers: List[RGBTuple]
    labels: np.ndarray  # (N,) nearest returned center for each point
    iterations: int  # assignment/update passes executed
    converged: bool
    reseeds: int = 0
    clusters: List[List[int]] = field(default_factory=list)  # member indices per cluster

    @property
    def counts(self) -> List[int]:
        return [len(members) for members in self.clusters]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Build the random source used for initialization and reseeding.

    An int is taken as a seed and None falls back to the configured seed
    (fresh entropy when unset). Anything else is used as is: a numpy
    Generator, or any sampler exposing `permutation(n)`, `integers(n)` and
    `choice(n, size, replace)`.
    """
    if rng is None:
        return np.random.default_rng(config.KMEANS_SEED)
    if isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    return rng


def as_point_array(points) -> np.ndarray:
    """
    Copy a point collection into a float array of shape (N, 3).

    Raises:
        ValueError: If the collection is empty or not made of RGB triples
    """
    arr = np.array(points, dtype=np.float64)
    if arr.size == 0:
        raise ValueError("Empty point collection provided")
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected points with shape (N, 3), got {arr.shape}")
    return arr


def is_converged(old_centers: Sequence, new_centers: Sequence,
                 tolerance: float = 1.0) -> bool:
    """
    True when every center moved at most `tolerance` since the last pass.

    An empty `old_centers` (nothing to compare against yet) is never converged.
    """
    if len(old_centers) == 0:
        return False
    for old, new in zip(old_centers, new_centers):
        if distance(old, new) > tolerance:
            return False
    return True


def assign_points(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """
    Label each point with the index of its nearest center.

    Ties go to the lowest center index (argmin returns the first minimum).
    """
    return pairwise_distances(points, centers).argmin(axis=1)


def update_centers(points: np.ndarray, labels: np.ndarray, k: int,
                   rng: np.random.Generator) -> Tuple[np.ndarray, int]:
    """
    Recompute centers as the rounded mean of their members.

    Empty clusters are re-seeded with a random point from the whole collection.

    Returns:
        Tuple of (new centers array (k, 3), number of re-seeded clusters)
    """
    new_centers = np.empty((k, 3), dtype=np.float64)
    reseeds = 0
    for idx in range(k):
        members = points[labels == idx]
        if len(members) == 0:
            new_centers[idx] = points[rng.integers(len(points))]
            reseeds += 1
        else:
            # Round half up, channels are never negative
            new_centers[idx] = np.floor(members.mean(axis=0) + 0.5)
    return new_centers, reseeds


def run_kmeans(points, k: Optional[int] = None, max_iterations: Optional[int] = None,
               rng: RandomSource = None,
               tolerance: Optional[float] = None) -> KMeansResult:
    """
    Cluster color points with k-means.

    Args:
        points: Collection of RGB triples, sequence or array (N, 3)
        k: Number of clusters (defaults to config.DEFAULT_K)
        max_iterations: Iteration budget (defaults to config.MAX_ITERATIONS);
            at most max_iterations + 1 passes execute
        rng: numpy Generator, integer seed or None
        tolerance: Max center movement counted as converged
            (defaults to config.CONVERGENCE_TOLERANCE)

    Returns:
        KMeansResult with k integer centers and the final assignment

    Raises:
        ValueError: If inputs are empty, malformed, or k/max_iterations out of range
    """
    k = config.DEFAULT_K if k is None else k
    max_iterations = config.MAX_ITERATIONS if max_iterations is None else max_iterations
    tolerance = config.CONVERGENCE_TOLERANCE if tolerance is None else tolerance

    data = as_point_array(points)
    n_points = len(data)
    if not config.validate_k(k, n_points):
        raise ValueError(f"k must be between 1 and the number of points ({n_points}), got {k}")
    if not config.validate_max_iterations(max_iterations):
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")

    generator = make_rng(rng)
    start_time = time.time()
    logger.info(f"Starting k-means with k={k}, {n_points} points, max_iterations={max_iterations}")

    # Initial centers: first k of a shuffled copy (sampling without replacement)
    centers = data[generator.permutation(n_points)[:k]].copy()
    old_centers = np.empty((0, 3))
    iterations = 0
    total_reseeds = 0

    while not is_converged(old_centers, centers, tolerance):
        if iterations > max_iterations:
            break
        iterations += 1

        old_centers = centers.copy()
        labels = assign_points(data, centers)
        centers, reseeds = update_centers(data, labels, k, generator)
        total_reseeds += reseeds

        logger.debug(f"Pass {iterations}: reseeded={reseeds} "
                     f"max_shift={float(np.max(np.linalg.norm(centers - old_centers, axis=1))):.2f}")

    converged = is_converged(old_centers, centers, tolerance)
    # Labels must describe the returned centers, not the ones before the last update
    labels = assign_points(data, centers)
    duration_ms = (time.time() - start_time) * 1000

    metrics = get_metrics()
    metrics.increment("kmeans_runs_total")
    if converged:
        metrics.increment("kmeans_converged_total")
    metrics.increment("kmeans_reseeds_total", total_reseeds)
    metrics.record_iterations(iterations)
    metrics.record_timing("kmeans", duration_ms)

    if converged:
        logger.info(f"K-means converged after {iterations} passes in {duration_ms:.1f}ms")
    else:
        logger.warning(f"K-means stopped without converging after {iterations} passes")

    return KMeansResult(
        centers=[tuple(round_half_up(c) for c in center) for center in centers],
        labels=labels,
        iterations=iterations,
        converged=converged,
        reseeds=total_reseeds,
        clusters=[np.flatnonzero(labels == idx).tolist() for idx in range(k)],
    )


async def kmeans(points, k: int = 6, max_iterations: int = 100,
                 rng: RandomSource = None) -> List[RGBTuple]:
    """
    Extract k representative colors from a point collection.

    Asynchronous for callers running inside an event loop; the work itself
    is synchronous and never suspends.

    Returns:
        List of k (R, G, B) centers with integer channels
    """
    result = run_kmeans(points, k=k, max_iterations=max_iterations, rng=rng)
    return result.centers
