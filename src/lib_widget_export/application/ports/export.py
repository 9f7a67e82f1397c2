"""Export port defining how widget sequences become files.

Purpose
-------
Let the export use case trigger a write without knowing which adapter renders
the file.

Contents
--------
* :class:`WidgetExportPort` - protocol implemented by export adapters.

System Role
-----------
Boundary between the application layer and
:class:`lib_widget_export.adapters.csv_exporter.CsvWidgetExporter`. Tests
supply simple fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from lib_widget_export.domain.widget import Widget


@runtime_checkable
class WidgetExportPort(Protocol):
    """Write ``widgets`` to ``path``, replacing any existing file.

    Parameters
    ----------
    widgets:
        Ordered records to export. Adapters must not mutate or retain them.
    path:
        Destination file. The parent directory is expected to exist.

    Raises
    ------
    lib_widget_export.domain.errors.ExportIOError
        When the destination cannot be opened or written.

    Examples
    --------
    >>> class Recorder:
    ...     def export(self, widgets, path):
    ...         self.seen = (len(widgets), str(path))
    >>> recorder = Recorder()
    >>> isinstance(recorder, WidgetExportPort)
    True
    >>> recorder.export([], Path('out.csv'))
    >>> recorder.seen
    (0, 'out.csv')
    """

    def export(self, widgets: Sequence[Widget], path: Path) -> None:
        """Persist ``widgets`` at ``path``."""


__all__ = ["WidgetExportPort"]
