"""
Writers for the exported row table.

Supports Excel workbooks, CSV and JSON. Column headers are the union of
row keys in first-seen order; cells a row does not carry stay blank.
"""

import csv
import json
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from curve_series.config import ExportFormat, ExportSettings, Settings, get_settings
from curve_series.core.exceptions import ExportError
from curve_series.core.logging import get_logger
from curve_series.export.timeseries import Row, column_names

logger = get_logger(__name__)


class TableWriter(ABC):
    """Abstract base class for row table writers."""

    extension: str = ""

    @abstractmethod
    def write(self, rows: Sequence[Row], path: Path) -> None:
        """Write rows to file."""
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Get format name."""
        pass


class ExcelWriter(TableWriter):
    """Write rows to a single-sheet Excel workbook."""

    extension = ".xlsx"

    def __init__(
        self,
        sheet_name: Optional[str] = None,
        settings: Optional[ExportSettings] = None,
    ):
        """
        Initialize the Excel writer.

        Args:
            sheet_name: Worksheet name; defaults to the export settings.
            settings: Export settings; defaults to the global configuration.
        """
        if settings is None:
            settings = get_settings().export
        self.sheet_name = sheet_name or settings.sheet_name

    def write(self, rows: Sequence[Row], path: Path) -> None:
        """Write rows as one worksheet; absent values become empty cells."""
        path.parent.mkdir(parents=True, exist_ok=True)

        frame = pd.DataFrame(list(rows), columns=column_names(rows))
        frame.to_excel(path, sheet_name=self.sheet_name, index=False, engine="openpyxl")

    def get_format_name(self) -> str:
        return "Excel"


class CSVWriter(TableWriter):
    """Write rows to CSV format."""

    extension = ".csv"

    def write(self, rows: Sequence[Row], path: Path) -> None:
        """Write rows to a CSV file with a header line."""
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=column_names(rows), restval="")
            writer.writeheader()
            writer.writerows(rows)

    def get_format_name(self) -> str:
        return "CSV"


class JSONWriter(TableWriter):
    """Write rows to JSON format, keeping absent cells absent."""

    extension = ".json"

    def write(self, rows: Sequence[Row], path: Path) -> None:
        """Write rows as a JSON array of objects."""
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(list(rows), f, indent=2)

    def get_format_name(self) -> str:
        return "JSON"


_WRITERS: dict[ExportFormat, type[TableWriter]] = {
    ExportFormat.XLSX: ExcelWriter,
    ExportFormat.CSV: CSVWriter,
    ExportFormat.JSON: JSONWriter,
}


def get_writer(
    format: ExportFormat | str,
    settings: Optional[ExportSettings] = None,
) -> TableWriter:
    """
    Get the writer for an export format.

    Args:
        format: ExportFormat or its string value.
        settings: Export settings passed to writers that need them.

    Returns:
        A TableWriter instance.
    """
    try:
        fmt = ExportFormat(format.lower() if isinstance(format, str) else format)
    except ValueError as e:
        raise ExportError(f"Unsupported export format: {format}", format=str(format)) from e

    if fmt is ExportFormat.XLSX:
        return ExcelWriter(settings=settings)
    return _WRITERS[fmt]()


def export_filename(
    format: ExportFormat | str = ExportFormat.XLSX,
    now: Optional[datetime] = None,
    settings: Optional[ExportSettings] = None,
) -> str:
    """
    Timestamped file name, e.g. ``curve_data_20240401_153000.xlsx``.

    Args:
        format: Export format, which decides the extension.
        now: Export time; defaults to the current time.
        settings: Export settings; defaults to the global configuration.
    """
    if settings is None:
        settings = get_settings().export
    now = now or datetime.now()
    writer = get_writer(format, settings)
    return f"{settings.filename_prefix}_{now.strftime(settings.timestamp_format)}{writer.extension}"


def save_table(
    rows: Sequence[Row],
    directory: Optional[Path] = None,
    format: ExportFormat | str | None = None,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> Path:
    """
    Write the row table to a timestamped file.

    Args:
        rows: Row table from the time series exporter.
        directory: Output directory; defaults to the configured exports dir.
        format: Export format; defaults to the configured format.
        now: Timestamp used in the file name.
        settings: Application settings; defaults to the global configuration.

    Returns:
        Path of the written file.

    Raises:
        ExportError: If the file could not be written.
    """
    if settings is None:
        settings = get_settings()
    directory = Path(directory) if directory is not None else settings.exports_dir
    format = format or settings.export.default_format

    writer = get_writer(format, settings.export)
    path = directory / export_filename(format, now, settings.export)

    try:
        writer.write(rows, path)
    except Exception as e:
        logger.error(
            f"Failed to write {writer.get_format_name()} table to {path}",
            extra={"format": writer.get_format_name(), "path": str(path)},
            exc_info=True,
        )
        raise ExportError(format=writer.get_format_name(), path=path) from e

    logger.info(
        f"Wrote {len(rows)} rows to {path}",
        extra={"rows": len(rows), "format": writer.get_format_name(), "path": str(path)},
    )
    return path
