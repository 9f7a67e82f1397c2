"""Assertion helpers comparing exported CSV rows with widgets.

Each helper checks one concern and reports every differing field in its own
line, so a failing test says exactly which column is wrong.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from lib_widget_export.adapters.csv_reader import find_row_for, row_mismatches
from lib_widget_export.domain import Widget


def assert_has_row_for(rows: Sequence[Mapping[str, str]], widget: Widget) -> None:
    """Fail unless ``rows`` holds a row matching ``widget`` in every column."""

    row = find_row_for(rows, widget)
    if row is None:
        raise AssertionError(f"Expected CSV to have a row for the widget with code {widget.code!r}")
    problems = row_mismatches(row, widget)
    if problems:
        raise AssertionError(f"Row for widget {widget.code!r} differs:\n  " + "\n  ".join(problems))


def assert_rows_match(rows: Sequence[Mapping[str, str]], widgets: Sequence[Widget]) -> None:
    """Fail unless ``rows`` describe ``widgets`` one-to-one and in order."""

    if len(rows) != len(widgets):
        raise AssertionError(f"Expected {len(widgets)} data row(s), got {len(rows)}")
    problems: list[str] = []
    for index, (row, widget) in enumerate(zip(rows, widgets)):
        problems.extend(f"row {index + 1}: {message}" for message in row_mismatches(row, widget))
    if problems:
        raise AssertionError("CSV rows differ from widgets:\n  " + "\n  ".join(problems))


__all__ = ["assert_has_row_for", "assert_rows_match"]
