"""Read exported widget files back for verification.

Purpose
-------
Give tests and the ``show`` command a consumer that parses exports with the
standard :mod:`csv` reader and compares rows against widgets field by field.

Contents
--------
* :func:`read_rows` - parse a file into header-keyed dictionaries.
* :func:`find_row_for` - locate the row describing a widget by its code.
* :func:`row_mismatches` - describe every field that differs from a widget.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable, Mapping
from pathlib import Path

from lib_widget_export.domain.columns import HEADER, ExportColumn
from lib_widget_export.domain.errors import ExportIOError
from lib_widget_export.domain.widget import Widget

from .csv_exporter import ENCODING


def read_rows(path: Path | str, *, encoding: str = ENCODING) -> list[dict[str, str]]:
    """Return the data rows of the export at ``path``.

    Raises
    ------
    ExportIOError
        If the file cannot be opened.
    ValueError
        If the header row is not exactly ``Code,Name,Price``.
    """

    source = Path(path)
    try:
        with source.open("r", encoding=encoding, newline="") as handle:
            reader = csv.DictReader(handle)
            header = tuple(reader.fieldnames or ())
            if header != HEADER:
                raise ValueError(f"Unexpected header in {source}: {','.join(header)!r} (expected {','.join(HEADER)!r})")
            return [dict(row) for row in reader]
    except OSError as exc:
        raise ExportIOError(source, exc.strerror or str(exc), reading=True, errno=exc.errno) from exc


def find_row_for(rows: Iterable[Mapping[str, str]], widget: Widget) -> Mapping[str, str] | None:
    """Return the first row whose ``Code`` equals ``widget.code``.

    Examples
    --------
    >>> rows = [{'Code': 'ABC123', 'Name': 'Screwdriver', 'Price': '499'}]
    >>> find_row_for(rows, Widget('ABC123', 'Screwdriver', 499))['Name']
    'Screwdriver'
    >>> find_row_for(rows, Widget('ZZZ', 'x', 1)) is None
    True
    """

    for row in rows:
        if row.get(ExportColumn.CODE.value) == widget.code:
            return row
    return None


def row_mismatches(row: Mapping[str, str], widget: Widget) -> list[str]:
    """Return one message per column where ``row`` disagrees with ``widget``.

    Values are compared as the text the exporter writes, so a price of
    ``499`` matches the cell ``"499"``.

    Examples
    --------
    >>> row_mismatches({'Code': 'DEF456', 'Name': 'Tartan', 'Price': '1249'}, Widget('DEF456', 'Tartan paint', 1249))
    ["Name: expected 'Tartan paint', got 'Tartan'"]
    """

    messages: list[str] = []
    for column in ExportColumn:
        expected = str(getattr(widget, column.attribute))
        actual = row.get(column.value)
        if actual != expected:
            messages.append(f"{column.value}: expected {expected!r}, got {actual!r}")
    return messages


__all__ = ["find_row_for", "read_rows", "row_mismatches"]
