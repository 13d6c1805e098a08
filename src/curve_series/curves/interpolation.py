"""
Piecewise-linear evaluation of drawn curves.

Outside the drawn x range a curve has no value: callers get None, which
is exported as a blank cell. There is no extrapolation and no clamping.
"""

from typing import Iterable, Optional, Sequence

from curve_series.core.models import Point

SINGLE_POINT_TOLERANCE = 0.01


def interpolate_value(
    points: Sequence[Point],
    x: float,
    single_point_tolerance: float = SINGLE_POINT_TOLERANCE,
) -> Optional[float]:
    """
    Evaluate a curve's normalized y at normalized position x.

    Args:
        points: x-monotonic point sequence.
        x: Normalized position to evaluate.
        single_point_tolerance: Reach of a lone point along x.

    Returns:
        Interpolated y, or None where the curve has no data.
    """
    if not points:
        return None

    if len(points) == 1:
        # A lone dot only covers its immediate neighbourhood
        only = points[0]
        return only.y if abs(x - only.x) < single_point_tolerance else None

    if x < points[0].x or x > points[-1].x:
        return None

    left, right = points[0], points[-1]
    for i in range(len(points) - 1):
        if points[i].x <= x <= points[i + 1].x:
            left, right = points[i], points[i + 1]
            break

    if right.x == left.x:
        return left.y

    t = (x - left.x) / (right.x - left.x)
    return left.y + t * (right.y - left.y)


def sample_curve(
    points: Sequence[Point],
    positions: Iterable[float],
    single_point_tolerance: float = SINGLE_POINT_TOLERANCE,
) -> list[Optional[float]]:
    """Evaluate a curve at each of the given normalized positions."""
    return [interpolate_value(points, x, single_point_tolerance) for x in positions]


def drawn_range(points: Sequence[Point]) -> Optional[tuple[float, float]]:
    """Return the (min_x, max_x) covered by a curve, or None if it is empty."""
    if not points:
        return None
    return points[0].x, points[-1].x
