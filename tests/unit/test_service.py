"""
Tests for the workspace export service.
"""

import logging
from datetime import date, datetime

import pandas as pd
import pytest

from curve_series.config import ExportSettings, Settings
from curve_series.core.exceptions import NoCurveDataError
from curve_series.export.timeseries import export_rows
from curve_series.session.service import CurveExportService, ExportSummary
from curve_series.session.workspace import CurveWorkspace


@pytest.fixture
def workspace(region, start_2024, tent_curve, partial_curve):
    ws = CurveWorkspace(region=region, start_date=start_2024)
    first = ws.curves[0]
    ws.commit_points(first.id, tent_curve.points)
    ws.rename_curve(first.id, "Tent")
    ws.add_curve()
    second = ws.add_curve()
    ws.commit_points(second.id, partial_curve.points)
    ws.rename_curve(second.id, "Partial")
    return ws


class TestCurveExportService:
    """Tests for CurveExportService."""

    def test_nothing_to_export(self, region, start_2024):
        """Test exporting an undrawn workspace raises NoCurveDataError."""
        service = CurveExportService()
        workspace = CurveWorkspace(region=region, start_date=start_2024)

        with pytest.raises(NoCurveDataError) as exc_info:
            service.export(workspace)
        assert exc_info.value.operation == "export"

    def test_build_rows_uses_curves_with_data(self, workspace):
        """Test the row table matches exporting only the drawn curves."""
        rows = CurveExportService().build_rows(workspace)
        expected = export_rows(workspace.curves_with_data(), workspace.axis, workspace.start_date)

        assert rows == expected
        assert set(rows[91]) == {"Date", "Tent", "Partial"}

    def test_export_summary(self, workspace, isolated_settings):
        """Test the summary describes the written file."""
        summary = CurveExportService().export(workspace, now=datetime(2024, 5, 2, 8, 15, 0))

        assert isinstance(summary, ExportSummary)
        assert summary.row_count == 183
        assert summary.curve_count == 2
        assert summary.path == isolated_settings.exports_dir / "curve_data_20240502_081500.xlsx"
        assert summary.message == "Exported 2 curve(s) to curve_data_20240502_081500.xlsx"

        frame = pd.read_excel(summary.path, sheet_name="Data")
        assert list(frame.columns) == ["Date", "Tent", "Partial"]

    def test_export_uses_service_settings(self, workspace, tmp_path):
        """Test file name, sheet name and directory come from the service's settings."""
        settings = Settings(
            exports_dir=tmp_path / "series_out",
            export=ExportSettings(
                filename_prefix="series",
                timestamp_format="%Y-%m-%d",
                sheet_name="Curves",
            ),
        )

        summary = CurveExportService(settings).export(workspace, now=datetime(2024, 1, 1))

        assert summary.path == tmp_path / "series_out" / "series_2024-01-01.xlsx"
        assert pd.ExcelFile(summary.path).sheet_names == ["Curves"]

        csv_summary = CurveExportService(settings).export(workspace, tmp_path, "csv", datetime(2024, 1, 1))
        assert csv_summary.path.name == "series_2024-01-01.csv"

    def test_export_csv(self, workspace, tmp_path):
        """Test an explicit directory and format."""
        summary = CurveExportService().export(workspace, tmp_path, "csv")

        assert summary.path.parent == tmp_path
        assert summary.path.suffix == ".csv"

    def test_export_follows_start_date(self, workspace):
        """Test the window moves with the workspace start date."""
        workspace.set_start_date(date(2023, 1, 1))
        rows = CurveExportService().build_rows(workspace)

        assert len(rows) == 181
        assert rows[0]["Date"] == "2023-01-01"

    def test_export_logs(self, workspace, tmp_path, caplog):
        """Test the export is logged from start to finish."""
        with caplog.at_level(logging.INFO, logger="curve_series"):
            CurveExportService().export(workspace, tmp_path, "json")

        assert "Starting: curve export" in caplog.text
        assert "Completed: curve export" in caplog.text
        assert "Exported 2 curve(s)" in caplog.text
