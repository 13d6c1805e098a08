"""
Curve workspace: the collection of curves being drawn.

The workspace is the single source of truth for curves, the active
selection, the value axis, the export start date and event lines. Curves
are never edited in place; every change swaps in a validated copy, and a
drawing stroke replaces a curve's points as a whole when it ends.
"""

from datetime import date, timedelta
from typing import Any, Optional
from uuid import UUID

from curve_series.config import Settings, get_settings
from curve_series.core.exceptions import CurveLimitError, CurveNotFoundError, InvalidEventDateError
from curve_series.core.logging import LogContext, get_logger
from curve_series.core.models import AxisConfig, CaptureRegion, Curve, EventLine, Point
from curve_series.curves.capture import PointCapture, default_region
from curve_series.export.timeseries import default_start_date, window_end

logger = get_logger(__name__)


class CurveWorkspace:
    """
    Curves, axis and timeline state for one drawing session.

    Starts with a single empty curve which is active.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        region: Optional[CaptureRegion] = None,
        axis: Optional[AxisConfig] = None,
        start_date: Optional[date] = None,
    ):
        """
        Initialize the workspace.

        Args:
            settings: Application settings; defaults to the global settings.
            region: Capture region for strokes; defaults to the configured canvas.
            axis: Value axis; defaults to the configured axis.
            start_date: First day of the export window; defaults to April 1.
        """
        self.settings = settings if settings is not None else get_settings()
        self.axis = axis if axis is not None else AxisConfig(
            y_min=self.settings.axis.y_min,
            y_max=self.settings.axis.y_max,
        )
        self.start_date = start_date or default_start_date()
        if region is None:
            region = default_region(self.settings.capture)
        self.capture = PointCapture(region)

        self._curves: list[Curve] = []
        self._events: list[EventLine] = []
        self.active_curve_id: Optional[UUID] = self._append_curve().id

    # Curve collection

    @property
    def curves(self) -> tuple[Curve, ...]:
        """Curves in creation order."""
        return tuple(self._curves)

    @property
    def active_curve(self) -> Optional[Curve]:
        """The curve strokes are drawn into, if any."""
        if self.active_curve_id is None:
            return None
        return self.get_curve(self.active_curve_id)

    def get_curve(self, curve_id: UUID) -> Curve:
        """Look up a curve by id."""
        return self._curves[self._index_of(curve_id)]

    def curves_with_data(self) -> list[Curve]:
        """Curves that have at least one point, in creation order."""
        return [c for c in self._curves if c.has_data]

    def add_curve(self) -> Curve:
        """
        Add an empty curve and make it the only visible, active curve.

        Raises:
            CurveLimitError: If the workspace is full.
        """
        max_curves = self.settings.curves.max_curves
        if len(self._curves) >= max_curves:
            raise CurveLimitError(max_curves)

        self._curves = [c.updated(visible=False) for c in self._curves]
        curve = self._append_curve()
        self.active_curve_id = curve.id
        logger.debug(f"Added curve {curve.name!r}", extra={"curve_id": str(curve.id)})
        return curve

    def delete_curve(self, curve_id: UUID) -> None:
        """Remove a curve; the active selection falls back to the first remaining curve."""
        index = self._index_of(curve_id, operation="delete_curve")
        removed = self._curves.pop(index)

        if self.active_curve_id == curve_id:
            self.active_curve_id = self._curves[0].id if self._curves else None
        logger.debug(f"Deleted curve {removed.name!r}", extra={"curve_id": str(curve_id)})

    def rename_curve(self, curve_id: UUID, name: str) -> bool:
        """
        Rename a curve.

        Surrounding whitespace is stripped; blank names are ignored.

        Returns:
            True if the name changed.
        """
        index = self._index_of(curve_id, operation="rename_curve")
        name = name.strip()
        if not name:
            return False
        self._curves[index] = self._curves[index].updated(name=name)
        return True

    def clear_curve(self, curve_id: UUID) -> Curve:
        """Drop all points of a curve."""
        return self._replace(curve_id, "clear_curve", points=())

    def toggle_visibility(self, curve_id: UUID) -> Curve:
        """Flip a curve's visibility flag."""
        current = self.get_curve(curve_id)
        return self._replace(curve_id, "toggle_visibility", visible=not current.visible)

    def set_roughness(self, curve_id: UUID, roughness: int) -> Curve:
        """Set a curve's roughness (0-100)."""
        return self._replace(curve_id, "set_roughness", roughness=roughness)

    def set_color(self, curve_id: UUID, color: str) -> Curve:
        """Set a curve's display color."""
        return self._replace(curve_id, "set_color", color=color)

    def select_curve(self, curve_id: UUID) -> Curve:
        """Make a curve the target of new strokes."""
        curve = self._curves[self._index_of(curve_id, operation="select_curve")]
        self.active_curve_id = curve_id
        return curve

    def commit_points(self, curve_id: UUID, points: Any) -> Curve:
        """Replace a curve's points as a whole."""
        return self._replace(curve_id, "commit_points", points=tuple(points))

    # Drawing

    def begin_stroke(self, x: float, y: float) -> bool:
        """
        Start a stroke on the active curve.

        Returns:
            True if the stroke started (there is an active curve and the
            position is inside the drawing area).
        """
        if self.active_curve_id is None:
            return False
        return self.capture.start(x, y, target=self.active_curve_id)

    def continue_stroke(self, x: float, y: float) -> bool:
        """Feed a pointer position to the current stroke."""
        return self.capture.extend(x, y)

    def end_stroke(self) -> Optional[Curve]:
        """
        Finish the current stroke and commit it.

        The points go to the curve that was active when the stroke began,
        even if the selection changed since.

        Returns:
            The updated curve, or None if no stroke was committed.
        """
        if not self.capture.is_active:
            return None

        points: tuple[Point, ...] = self.capture.end()
        target = self.capture.target
        if target is None or not points:
            return None

        with LogContext(curve_id=str(target)):
            try:
                curve = self.commit_points(target, points)
            except CurveNotFoundError:
                logger.warning("Stroke target was deleted during the stroke; points dropped")
                return None
            logger.debug(f"Committed {len(points)} points to {curve.name!r}")
        return curve

    # Axis and timeline

    def set_axis(self, y_min: float, y_max: float) -> AxisConfig:
        """Replace the value axis."""
        self.axis = AxisConfig(y_min=y_min, y_max=y_max)
        if y_max <= y_min:
            logger.warning(f"Axis maximum {y_max} is not above minimum {y_min}; values will be inverted or constant")
        return self.axis

    def set_start_date(self, start_date: date) -> None:
        """Move the export window."""
        self.start_date = start_date

    @property
    def end_date(self) -> date:
        """Last day of the export window."""
        return window_end(self.start_date, self.settings.export.window_months)

    @property
    def events(self) -> tuple[EventLine, ...]:
        """Event lines in insertion order."""
        return tuple(self._events)

    def add_event(self, day: date, label: str = "") -> EventLine:
        """
        Add an event line.

        Args:
            day: Event date; must lie within the window (start date up to
                the same day ``window_months`` later).
            label: Display label; defaults to e.g. ``"15 May"``.

        Raises:
            InvalidEventDateError: If the date is outside the window.
        """
        months = self.settings.export.window_months
        last_selectable = window_end(self.start_date, months) + timedelta(days=1)
        if day < self.start_date or day > last_selectable:
            raise InvalidEventDateError(
                f"Event date {day.isoformat()} is outside the {months}-month window",
                operation="add_event",
                details={"start": self.start_date.isoformat(), "date": day.isoformat()},
            )

        event = EventLine(date=day, label=label.strip() or day.strftime("%d %b"))
        self._events.append(event)
        return event

    def remove_event(self, event_id: UUID) -> bool:
        """Remove an event line; returns False if it did not exist."""
        remaining = [e for e in self._events if e.id != event_id]
        removed = len(remaining) != len(self._events)
        self._events = remaining
        return removed

    # Internals

    def _append_curve(self) -> Curve:
        curve_settings = self.settings.curves
        n = len(self._curves)
        curve = Curve(
            name=curve_settings.name_template.format(n=n + 1),
            color=curve_settings.colors[n % len(curve_settings.colors)],
            roughness=curve_settings.default_roughness,
        )
        self._curves.append(curve)
        return curve

    def _index_of(self, curve_id: UUID, operation: Optional[str] = None) -> int:
        for i, curve in enumerate(self._curves):
            if curve.id == curve_id:
                return i
        raise CurveNotFoundError(curve_id, operation=operation)

    def _replace(self, curve_id: UUID, operation: str, **changes: Any) -> Curve:
        index = self._index_of(curve_id, operation=operation)
        curve = self._curves[index].updated(**changes)
        self._curves[index] = curve
        return curve
