"""Public façade wiring the widget domain to the CSV adapter.

Purpose
-------
Expose a small, ergonomic API so host code can export widgets without touching
the inner layers.

Contents
--------
* :func:`export_widgets` - write widgets to a CSV file.
* :func:`render_widgets` - return the CSV text without writing.
* :func:`sample_widgets` - the two demonstration widgets.
* :func:`load_widgets_json` - parse widgets from a JSON array.
* :func:`summary_info` - metadata banner used by the CLI.

System Role
-----------
Composition point: picks :class:`CsvWidgetExporter` as the export port and
hands it to :func:`create_export_widgets`.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from .adapters import CsvWidgetExporter
from .application.use_cases.export import ExportSummary, create_export_widgets
from .domain import Widget


def export_widgets(widgets: Iterable[Widget], path: Path | str) -> ExportSummary:
    """Write ``widgets`` to ``path`` as ``Code,Name,Price`` CSV.

    Any existing file at ``path`` is replaced. The widgets are written in the
    order given; nothing is sorted or deduplicated.

    Raises
    ------
    lib_widget_export.domain.errors.ExportIOError
        When the file cannot be opened or written.

    Examples
    --------
    >>> import tempfile
    >>> with tempfile.TemporaryDirectory() as tmp:
    ...     summary = export_widgets(sample_widgets(), Path(tmp) / 'widgets.csv')
    ...     summary.line_count
    3
    """

    export = create_export_widgets(export_port=CsvWidgetExporter())
    return export(widgets, path)


def render_widgets(widgets: Iterable[Widget]) -> str:
    """Return the CSV text :func:`export_widgets` would write.

    Examples
    --------
    >>> print(render_widgets(sample_widgets()), end="")
    Code,Name,Price
    ABC123,Left-handed screwdriver,499
    DEF456,Tartan paint,1249
    """

    return CsvWidgetExporter().render(list(widgets))


def sample_widgets() -> list[Widget]:
    """Return the demonstration widgets used by docs and the ``sample`` command."""

    return [
        Widget("ABC123", "Left-handed screwdriver", 499),
        Widget("DEF456", "Tartan paint", 1249),
    ]


def load_widgets_json(text: str) -> list[Widget]:
    """Parse a JSON array of widget objects.

    Raises
    ------
    ValueError
        If the text is not valid JSON, not an array, or an entry is not a
        valid widget. The message names the failing entry index.

    Examples
    --------
    >>> load_widgets_json('[{"code": "A1", "name": "Hammer", "price": 900}]')
    [Widget(code='A1', name='Hammer', price=900)]
    >>> load_widgets_json('{}')
    Traceback (most recent call last):
    ...
    ValueError: expected a JSON array of widgets, got object
    """

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if not isinstance(payload, list):
        kind = "object" if isinstance(payload, dict) else type(payload).__name__
        raise ValueError(f"expected a JSON array of widgets, got {kind}")

    widgets: list[Widget] = []
    for index, entry in enumerate(payload):
        try:
            widgets.append(Widget.from_mapping(entry))
        except ValueError as exc:
            raise ValueError(f"entry {index}: {exc}") from exc
    return widgets


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "export_widgets",
    "load_widgets_json",
    "render_widgets",
    "sample_widgets",
    "summary_info",
]
