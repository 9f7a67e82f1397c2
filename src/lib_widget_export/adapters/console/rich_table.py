"""Rich table rendering for exported widget rows.

Purpose
-------
Show the contents of an export in the terminal so operators can eyeball a file
without opening a spreadsheet.

Contents
--------
* :func:`build_table` - create a :class:`rich.table.Table` from rows.
* :class:`RichTableAdapter` - print rows to a Rich console.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from rich.console import Console
from rich.table import Table

from lib_widget_export.domain.columns import ExportColumn


def build_table(rows: Iterable[Mapping[str, str]], *, title: str | None = None) -> Table:
    """Return a table with one column per header and one row per record.

    Examples
    --------
    >>> table = build_table([{'Code': 'A', 'Name': 'a', 'Price': '1'}])
    >>> table.row_count
    1
    >>> [column.header for column in table.columns]
    ['Code', 'Name', 'Price']
    """

    table = Table(title=title)
    for column in ExportColumn:
        table.add_column(column.value, justify="right" if column is ExportColumn.PRICE else "left")
    for row in rows:
        table.add_row(*(row.get(column.value, "") for column in ExportColumn))
    return table


class RichTableAdapter:
    """Print widget rows as a Rich table."""

    def __init__(self, *, console: Console | None = None, no_color: bool = False) -> None:
        self._console = console if console is not None else Console(no_color=no_color)

    def show(self, rows: Iterable[Mapping[str, str]], *, title: str | None = None) -> None:
        """Render ``rows`` to the configured console.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=60)
        >>> RichTableAdapter(console=console).show([{'Code': 'ABC123', 'Name': 'Screwdriver', 'Price': '499'}])
        >>> 'ABC123' in console.export_text()
        True
        """
        self._console.print(build_table(rows, title=title))


__all__ = ["RichTableAdapter", "build_table"]
