"""
Point capture from a continuous drawing gesture.

Raw pointer positions (already in the canvas' internal pixel space) are
normalized against the inner drawing rectangle and collected into a
transient buffer. Curves are drawn left to right: a sample is kept only
when its normalized x is strictly greater than the last kept sample, so
the committed sequence is x-monotonic without sorting.
"""

from typing import Optional, Sequence
from uuid import UUID

import numpy as np

from curve_series.config import CaptureSettings, get_settings
from curve_series.core.logging import get_logger
from curve_series.core.models import CaptureRegion, Margins, Point

logger = get_logger(__name__)


def default_region(settings: Optional[CaptureSettings] = None) -> CaptureRegion:
    """Build the capture region described by the capture settings."""
    if settings is None:
        settings = get_settings().capture
    return CaptureRegion(
        width=settings.canvas_width,
        height=settings.canvas_height,
        margins=Margins(
            top=settings.margin_top,
            right=settings.margin_right,
            bottom=settings.margin_bottom,
            left=settings.margin_left,
        ),
    )


def normalize_position(region: CaptureRegion, x: float, y: float) -> Optional[Point]:
    """
    Map a canvas position to normalized coordinates.

    Args:
        region: Capture rectangle and margins.
        x: Horizontal position in canvas pixels.
        y: Vertical position in canvas pixels (top to bottom).

    Returns:
        The normalized Point, or None when the position lies outside the
        inner drawing rectangle.
    """
    m = region.margins
    if x < m.left or x > region.right_edge or y < m.top or y > region.bottom_edge:
        return None

    nx = (x - m.left) / region.inner_width
    ny = 1 - (y - m.top) / region.inner_height
    # Guard against rounding just past the unit square at the edges
    return Point(x=min(max(nx, 0.0), 1.0), y=min(max(ny, 0.0), 1.0))


class PointCapture:
    """
    Gesture state machine producing x-monotonic normalized points.

    The working buffer is private; ``end()`` hands out an immutable tuple
    and the buffer is only reset by the next ``start()``.
    """

    def __init__(self, region: Optional[CaptureRegion] = None):
        """
        Initialize the capture.

        Args:
            region: Capture region; defaults to the configured canvas.
        """
        self.region = region if region is not None else default_region()
        self._buffer: list[Point] = []
        self._active = False
        self._target: Optional[UUID] = None

    @property
    def is_active(self) -> bool:
        """Whether a gesture is in progress."""
        return self._active

    @property
    def target(self) -> Optional[UUID]:
        """Curve id the current (or last) gesture was started for."""
        return self._target

    @property
    def points(self) -> tuple[Point, ...]:
        """Snapshot of the working buffer."""
        return tuple(self._buffer)

    def start(self, x: float, y: float, target: Optional[UUID] = None) -> bool:
        """
        Begin a gesture with its first sample.

        An out-of-bounds first sample leaves the capture inactive.

        Args:
            x: Horizontal canvas position.
            y: Vertical canvas position.
            target: Optional curve id the gesture will be committed to.

        Returns:
            True if the gesture started.
        """
        point = normalize_position(self.region, x, y)
        if point is None:
            logger.debug(f"Gesture start ignored, outside drawing area: ({x}, {y})")
            return False

        self._buffer = [point]
        self._active = True
        self._target = target
        return True

    def extend(self, x: float, y: float) -> bool:
        """
        Offer another sample to the active gesture.

        Returns:
            True if the sample was appended.
        """
        if not self._active:
            return False

        point = normalize_position(self.region, x, y)
        if point is None:
            return False

        if self._buffer and point.x <= self._buffer[-1].x:
            return False

        self._buffer.append(point)
        return True

    def end(self) -> tuple[Point, ...]:
        """
        Finish the gesture.

        Returns:
            The committed point sequence.
        """
        self._active = False
        committed = tuple(self._buffer)
        logger.debug(f"Gesture ended with {len(committed)} points")
        return committed

    def cancel(self) -> None:
        """Abandon the active gesture and discard its buffer."""
        self._active = False
        self._buffer = []
        self._target = None

    def capture_stroke(self, samples: Sequence[Sequence[float]] | np.ndarray) -> tuple[Point, ...]:
        """
        Run a complete recorded drag through the capture rules.

        Equivalent to ``start`` on the first sample, ``extend`` on the rest
        and ``end``, computed over the whole array at once. A drag whose first
        sample lies outside the drawing area yields no points. Does not touch
        the gesture state.

        Args:
            samples: Array-like of shape (n, 2) with canvas (x, y) positions.

        Returns:
            Committed point sequence.
        """
        arr = np.asarray(samples, dtype=float).reshape(-1, 2)
        if arr.size == 0:
            return ()

        m = self.region.margins
        xs, ys = arr[:, 0], arr[:, 1]
        inside = (
            (xs >= m.left)
            & (xs <= self.region.right_edge)
            & (ys >= m.top)
            & (ys <= self.region.bottom_edge)
        )
        if not inside[0]:
            return ()

        nx = np.clip((xs[inside] - m.left) / self.region.inner_width, 0.0, 1.0)
        ny = np.clip(1 - (ys[inside] - m.top) / self.region.inner_height, 0.0, 1.0)

        # A sample survives when it beats every earlier in-bounds x
        running_max = np.maximum.accumulate(nx)
        keep = np.ones(nx.size, dtype=bool)
        keep[1:] = nx[1:] > running_max[:-1]

        return tuple(Point(x=float(px), y=float(py)) for px, py in zip(nx[keep], ny[keep]))
