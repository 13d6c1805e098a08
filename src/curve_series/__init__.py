"""
Curve Series - turn freehand-drawn curves into daily time series.

This package provides:

- Point capture from drawing gestures with left-to-right monotonicity
- Piecewise-linear interpolation onto a daily grid
- Deterministic per-curve roughness
- Row tables exported to Excel, CSV or JSON
- A workspace managing curves, axis range, start date and event lines
"""

__version__ = "1.0.0"

# Core models
from curve_series.core.models import (
    AxisConfig,
    CaptureRegion,
    Curve,
    EventLine,
    Margins,
    Point,
)
from curve_series.core.exceptions import (
    CurveLimitError,
    CurveNotFoundError,
    CurveSeriesError,
    ExportError,
    InvalidEventDateError,
    NoCurveDataError,
)

# Configuration
from curve_series.config import (
    ExportFormat,
    Settings,
    configure,
    get_settings,
)

# Curves
from curve_series.curves import (
    PointCapture,
    apply_roughness,
    interpolate_value,
    seeded_random,
)

# Export
from curve_series.export import (
    TimeSeriesExporter,
    date_grid,
    export_rows,
    save_table,
)

# Session
from curve_series.session import (
    CurveExportService,
    CurveWorkspace,
    ExportSummary,
)

__all__ = [
    # Version
    "__version__",
    # Core models
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
    # Config
    "ExportFormat",
    "Settings",
    "configure",
    "get_settings",
    # Curves
    "PointCapture",
    "apply_roughness",
    "interpolate_value",
    "seeded_random",
    # Export
    "TimeSeriesExporter",
    "date_grid",
    "export_rows",
    "save_table",
    # Session
    "CurveExportService",
    "CurveWorkspace",
    "ExportSummary",
]
