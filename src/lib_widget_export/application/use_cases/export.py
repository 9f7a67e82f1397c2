"""Use case exporting widgets through an export port.

Purpose
-------
Provide the application-layer glue between callers holding widgets and the
adapter that writes them.

System Role
-----------
Invoked by :func:`lib_widget_export.export_widgets` and the ``export`` /
``sample`` CLI commands.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from lib_widget_export.application.ports.export import WidgetExportPort
from lib_widget_export.domain.widget import Widget

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ExportSummary:
    """Outcome of a successful export."""

    path: Path
    record_count: int

    @property
    def line_count(self) -> int:
        """Lines in the written file: the header plus one per record."""
        return self.record_count + 1


def create_export_widgets(
    *,
    export_port: WidgetExportPort,
) -> Callable[[Iterable[Widget], Path | str], ExportSummary]:
    """Return a callable capturing ``export_port``.

    Why
    ---
    The composition root picks the adapter once; callers then only deal with
    widgets and a destination.

    Examples
    --------
    >>> class DummyExport:
    ...     def __init__(self):
    ...         self.calls = []
    ...     def export(self, widgets, path):
    ...         self.calls.append((list(widgets), path))
    >>> port = DummyExport()
    >>> export = create_export_widgets(export_port=port)
    >>> export([Widget('A', 'a', 1)], 'out.csv').record_count
    1
    >>> port.calls[0][1].name
    'out.csv'
    """

    def export(widgets: Iterable[Widget], path: Path | str) -> ExportSummary:
        """Export ``widgets`` to ``path`` and report what was written.

        The input is copied into a list first so generators are consumed once
        and the adapter sees a stable sequence.
        """

        destination = Path(path)
        snapshot = list(widgets)
        logger.debug("exporting %d widget(s) to %s", len(snapshot), destination)
        try:
            export_port.export(snapshot, destination)
        except OSError:
            logger.error("widget export to %s failed", destination)
            raise
        logger.info("exported %d widget(s) to %s", len(snapshot), destination)
        return ExportSummary(path=destination, record_count=len(snapshot))

    return export


__all__ = ["ExportSummary", "create_export_widgets"]
