"""
Export of a workspace to a spreadsheet file.

Validates that there is something to export, builds the row table and
hands it to a table writer.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from curve_series.config import ExportFormat, Settings, get_settings
from curve_series.core.exceptions import NoCurveDataError
from curve_series.core.logging import LogContext, get_logger, log_operation
from curve_series.export.timeseries import Row, TimeSeriesExporter
from curve_series.export.writers import save_table
from curve_series.session.workspace import CurveWorkspace

logger = get_logger(__name__)


@dataclass
class ExportSummary:
    """Outcome of a workspace export."""

    path: Path
    row_count: int
    curve_count: int

    @property
    def message(self) -> str:
        return f"Exported {self.curve_count} curve(s) to {self.path.name}"


class CurveExportService:
    """Export the curves of a workspace that have data."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings if settings is not None else get_settings()
        self.exporter = TimeSeriesExporter(self.settings.export)

    def build_rows(self, workspace: CurveWorkspace) -> list[Row]:
        """
        Build the row table for the workspace's curves that have points.

        Raises:
            NoCurveDataError: If no curve has been drawn.
        """
        curves = workspace.curves_with_data()
        if not curves:
            raise NoCurveDataError()
        return self.exporter.export(curves, workspace.axis, workspace.start_date)

    def export(
        self,
        workspace: CurveWorkspace,
        directory: Optional[Path] = None,
        format: ExportFormat | str | None = None,
        now: Optional[datetime] = None,
    ) -> ExportSummary:
        """
        Write the workspace's curves to a timestamped file.

        Args:
            workspace: Workspace to export.
            directory: Output directory; defaults to the configured exports dir.
            format: Export format; defaults to the configured format.
            now: Timestamp for the file name.

        Returns:
            ExportSummary describing the written file.

        Raises:
            NoCurveDataError: If no curve has been drawn.
            ExportError: If writing the file failed.
        """
        format = format or self.settings.export.default_format
        directory = directory if directory is not None else self.settings.exports_dir

        with LogContext(operation="export", start_date=workspace.start_date.isoformat()):
            with log_operation(logger, "curve export"):
                rows = self.build_rows(workspace)
                curve_count = len(workspace.curves_with_data())
                path = save_table(rows, directory, format, now, self.settings)

        summary = ExportSummary(path=path, row_count=len(rows), curve_count=curve_count)
        logger.info(summary.message, extra={"curve_count": curve_count, "rows": len(rows)})
        return summary
