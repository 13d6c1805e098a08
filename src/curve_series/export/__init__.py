"""
Daily time series generation and tabular file writers.
"""

from curve_series.export.timeseries import (
    TimeSeriesExporter,
    column_names,
    date_grid,
    default_start_date,
    export_rows,
    grid_positions,
    round_half_up,
    window_end,
)
from curve_series.export.writers import (
    CSVWriter,
    ExcelWriter,
    JSONWriter,
    TableWriter,
    export_filename,
    get_writer,
    save_table,
)

__all__ = [
    # Time series
    "TimeSeriesExporter",
    "column_names",
    "date_grid",
    "default_start_date",
    "export_rows",
    "grid_positions",
    "round_half_up",
    "window_end",
    # Writers
    "CSVWriter",
    "ExcelWriter",
    "JSONWriter",
    "TableWriter",
    "export_filename",
    "get_writer",
    "save_table",
]
