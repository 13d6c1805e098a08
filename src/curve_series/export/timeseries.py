"""
Conversion of drawn curves into a daily time series table.

Each curve is sampled on a daily grid covering a fixed number of calendar
months, rescaled to the value axis, perturbed by its roughness and rounded.
The result is a list of row dicts: one per day, keyed by the date column
plus one key per curve name. Days a curve does not cover have no key.
"""

import math
from datetime import date
from typing import Optional, Sequence, Union

import pandas as pd

from curve_series.config import ExportSettings, get_settings
from curve_series.core.logging import get_logger
from curve_series.core.models import AxisConfig, Curve
from curve_series.curves.interpolation import interpolate_value
from curve_series.curves.roughness import apply_roughness, export_seed

logger = get_logger(__name__)

Row = dict[str, Union[str, float]]


def default_start_date(today: Optional[date] = None) -> date:
    """April 1 of the current year."""
    today = today or date.today()
    return date(today.year, 4, 1)


def window_end(start_date: date, months: int = 6) -> date:
    """Last day of the window: the day before ``start_date + months``."""
    end = pd.Timestamp(start_date) + pd.DateOffset(months=months) - pd.Timedelta(days=1)
    return end.date()


def date_grid(start_date: date, months: int = 6) -> list[date]:
    """
    Inclusive daily dates from ``start_date`` to ``window_end``.

    Month addition clamps to the end of shorter months, so the day count
    depends on the start date and leap years.
    """
    days = pd.date_range(pd.Timestamp(start_date), pd.Timestamp(window_end(start_date, months)), freq="D")
    return [ts.date() for ts in days]


def grid_positions(num_days: int) -> list[float]:
    """Normalized x position of each grid index; a one-day grid sits at 0."""
    if num_days == 1:
        return [0.0]
    return [i / (num_days - 1) for i in range(num_days)]


def round_half_up(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals with ties going toward positive infinity."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


class TimeSeriesExporter:
    """
    Build the row table for a set of curves.

    The computation is pure: identical curves, axis and start date always
    give an identical table.
    """

    def __init__(self, settings: Optional[ExportSettings] = None):
        """
        Initialize the exporter.

        Args:
            settings: Export settings; defaults to the global configuration.
        """
        self.settings = settings if settings is not None else get_settings().export

    def dates(self, start_date: date) -> list[date]:
        """Daily grid for the configured window length."""
        return date_grid(start_date, self.settings.window_months)

    def export(
        self,
        curves: Sequence[Curve],
        axis: AxisConfig,
        start_date: date,
    ) -> list[Row]:
        """
        Sample every curve onto the daily grid.

        Args:
            curves: Curves in export order; the position in this sequence
                feeds the roughness seed.
            axis: Value axis used to rescale normalized y.
            start_date: First day of the window.

        Returns:
            One row per day in ascending date order.
        """
        cfg = self.settings
        dates = self.dates(start_date)
        positions = grid_positions(len(dates))
        value_range = axis.y_max - axis.y_min

        names = [c.name for c in curves if c.has_data]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            logger.warning(f"Duplicate curve names share a column, later curves win: {duplicates}")

        rows: list[Row] = []
        for index, (day, x) in enumerate(zip(dates, positions)):
            row: Row = {cfg.date_column: day.strftime(cfg.date_format)}

            for curve_index, curve in enumerate(curves):
                if not curve.has_data:
                    continue

                normalized_y = interpolate_value(curve.points, x, cfg.single_point_tolerance)
                if normalized_y is None:
                    continue

                value = axis.scale(normalized_y)
                value = apply_roughness(
                    value,
                    curve.roughness,
                    export_seed(index, curve_index),
                    value_range,
                    cfg.max_variation_fraction,
                )
                row[curve.name] = round_half_up(value, cfg.decimal_places)

            rows.append(row)

        logger.debug(f"Built {len(rows)} rows for {len(names)} curve(s) from {start_date.isoformat()}")
        return rows


def export_rows(
    curves: Sequence[Curve],
    axis: AxisConfig,
    start_date: date,
    settings: Optional[ExportSettings] = None,
) -> list[Row]:
    """
    Convenience function for building the row table.

    Args:
        curves: Curves in export order.
        axis: Value axis.
        start_date: First day of the window.
        settings: Optional export settings.

    Returns:
        List of row dicts.
    """
    return TimeSeriesExporter(settings).export(curves, axis, start_date)


def column_names(rows: Sequence[Row]) -> list[str]:
    """Union of row keys in first-seen order."""
    columns: dict[str, None] = {}
    for row in rows:
        for key in row:
            columns.setdefault(key, None)
    return list(columns)
