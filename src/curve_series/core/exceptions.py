"""
Exceptions for the curve-series pipeline.

Hierarchy:
- CurveSeriesError (base)
  - CurveNotFoundError
  - CurveLimitError
  - InvalidEventDateError
  - NoCurveDataError
  - ExportError

Dropped capture samples and blank interpolation results are normal
behaviour and never raise.
"""

from typing import Any


class CurveSeriesError(Exception):
    """Base exception for curve-series errors.

    Attributes:
        operation: Operation that failed.
        details: Additional error details.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.details = details or {}

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.operation:
            parts.append(f"Operation: {self.operation}")
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"Details: {details_str}")
        return " | ".join(parts)


class CurveNotFoundError(CurveSeriesError):
    """No curve with the given id exists in the workspace."""

    def __init__(self, curve_id: Any, operation: str | None = None):
        super().__init__(
            f"Curve not found: {curve_id}",
            operation=operation,
            details={"curve_id": str(curve_id)},
        )
        self.curve_id = curve_id


class CurveLimitError(CurveSeriesError):
    """The workspace already holds the maximum number of curves."""

    def __init__(self, max_curves: int):
        super().__init__(
            f"Cannot add more than {max_curves} curves",
            operation="add_curve",
            details={"max_curves": max_curves},
        )
        self.max_curves = max_curves


class InvalidEventDateError(CurveSeriesError):
    """An event line date falls outside the export window."""


class NoCurveDataError(CurveSeriesError):
    """Export was requested but no curve has any points.

    Raised by the export service, not by the row computation, which
    returns an all-blank table in this case.
    """

    def __init__(self, message: str = "No curves to export. Draw at least one curve before exporting."):
        super().__init__(message, operation="export")


class ExportError(CurveSeriesError):
    """Writing the row table to a file failed."""

    def __init__(
        self,
        message: str = "An error occurred while exporting the data.",
        format: str | None = None,
        path: Any = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if format:
            details["format"] = format
        if path is not None:
            details["path"] = str(path)
        super().__init__(message, operation="write_table", details=details, **kwargs)
