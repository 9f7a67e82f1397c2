"""Adapters implementing the export port and its read-back companions."""

from __future__ import annotations

from .console.rich_table import RichTableAdapter
from .csv_exporter import CsvWidgetExporter
from .csv_reader import find_row_for, read_rows, row_mismatches

__all__ = [
    "CsvWidgetExporter",
    "RichTableAdapter",
    "find_row_for",
    "read_rows",
    "row_mismatches",
]
