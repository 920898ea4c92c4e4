"""
Palette ordering by a color metric.
"""

from typing import List, Sequence, Union

from .color_metrics import ColorPoint, MetricFn, get_metric, luminance


def sort_color(points: Sequence[ColorPoint], ascending: bool = True,
               metric: Union[str, MetricFn] = luminance) -> List[ColorPoint]:
    """
    Return the colors ordered by `metric`, leaving the input untouched.

    The sort is stable in both directions: colors with equal metric values
    keep their input order.

    Args:
        points: Colors to order
        ascending: Smallest metric value first when True
        metric: Metric function or registered metric name

    Returns:
        New list of the same colors in sorted order
    """
    key = get_metric(metric)
    return sorted(points, key=key, reverse=not ascending)


def sort_color_in_place(points: List[ColorPoint], ascending: bool = True,
                        metric: Union[str, MetricFn] = luminance) -> List[ColorPoint]:
    """Sort the caller's list in place and return it."""
    points.sort(key=get_metric(metric), reverse=not ascending)
    return points
