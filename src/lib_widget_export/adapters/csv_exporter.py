"""CSV adapter writing widgets with a fixed ``Code,Name,Price`` header.

Purpose
-------
Turn a widget sequence into a comma-separated file that any standard CSV
reader parses back to the original field values.

Contents
--------
* :class:`CsvWidgetExporter` - implementation of :class:`WidgetExportPort`.

System Role
-----------
Default adapter wired by :func:`lib_widget_export.export_widgets` and the CLI.

Alignment Notes
---------------
Quoting follows :data:`csv.QUOTE_MINIMAL`: a field is quoted only when it holds
a comma, a quote, or a line break, and embedded quotes are doubled. Lines end
with ``\\n`` on every platform.
"""

from __future__ import annotations

import csv
from collections.abc import Sequence
from io import StringIO
from pathlib import Path
from typing import TextIO

from lib_widget_export.application.ports.export import WidgetExportPort
from lib_widget_export.domain.columns import HEADER
from lib_widget_export.domain.errors import ExportIOError
from lib_widget_export.domain.widget import Widget

LINE_TERMINATOR = "\n"
ENCODING = "utf-8"


class CsvWidgetExporter(WidgetExportPort):
    """Write widgets as CSV, one header line plus one line per widget."""

    def __init__(self, *, encoding: str = ENCODING) -> None:
        self._encoding = encoding

    def export(self, widgets: Sequence[Widget], path: Path) -> None:
        """Write ``widgets`` to ``path``, truncating any existing file.

        Raises
        ------
        ExportIOError
            If ``path`` cannot be opened or a write fails. A partially written
            file may remain.

        Examples
        --------
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     target = Path(tmp) / 'widgets.csv'
        ...     CsvWidgetExporter().export([Widget('ABC123', 'Screwdriver', 499)], target)
        ...     target.read_text(encoding='utf-8')
        'Code,Name,Price\\nABC123,Screwdriver,499\\n'
        """
        destination = Path(path)
        try:
            with destination.open("w", encoding=self._encoding, newline="") as handle:
                self._write(handle, widgets)
        except OSError as exc:
            raise ExportIOError(destination, exc.strerror or str(exc), errno=exc.errno) from exc

    def render(self, widgets: Sequence[Widget]) -> str:
        """Return the exact text :meth:`export` would write.

        Examples
        --------
        >>> CsvWidgetExporter().render([])
        'Code,Name,Price\\n'
        >>> CsvWidgetExporter().render([Widget('A1', 'Paint, tartan', 5)])
        'Code,Name,Price\\nA1,"Paint, tartan",5\\n'
        """
        buffer = StringIO(newline="")
        self._write(buffer, widgets)
        return buffer.getvalue()

    @staticmethod
    def _write(handle: TextIO, widgets: Sequence[Widget]) -> None:
        writer = csv.writer(handle, lineterminator=LINE_TERMINATOR, quoting=csv.QUOTE_MINIMAL)
        writer.writerow(HEADER)
        for widget in widgets:
            writer.writerow(widget.to_row())


__all__ = ["CsvWidgetExporter", "ENCODING", "LINE_TERMINATOR"]
