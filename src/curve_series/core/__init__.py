"""
Core data models, exceptions and logging for the curve-series pipeline.
"""

from curve_series.core.exceptions import (
    CurveLimitError,
    CurveNotFoundError,
    CurveSeriesError,
    ExportError,
    InvalidEventDateError,
    NoCurveDataError,
)
from curve_series.core.models import (
    AxisConfig,
    CaptureRegion,
    Curve,
    EventLine,
    Margins,
    Point,
)

__all__ = [
    # Models
    "AxisConfig",
    "CaptureRegion",
    "Curve",
    "EventLine",
    "Margins",
    "Point",
    # Exceptions
    "CurveLimitError",
    "CurveNotFoundError",
    "CurveSeriesError",
    "ExportError",
    "InvalidEventDateError",
    "NoCurveDataError",
]
