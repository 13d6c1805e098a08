"""
Drawing session state and workspace export.
"""

from curve_series.session.workspace import CurveWorkspace
from curve_series.session.service import CurveExportService, ExportSummary

__all__ = [
    "CurveWorkspace",
    "CurveExportService",
    "ExportSummary",
]
