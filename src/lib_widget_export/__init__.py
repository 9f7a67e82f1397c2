"""Public package surface for exporting widgets to CSV.

``import lib_widget_export`` gives access to the widget value object, the
export helpers, and the single error type raised for file I/O failures.
"""

from __future__ import annotations

from .application.use_cases.export import ExportSummary
from .domain import HEADER, ExportColumn, ExportIOError, Widget
from .lib_widget_export import (
    export_widgets,
    load_widgets_json,
    render_widgets,
    sample_widgets,
    summary_info,
)

__all__ = [
    "ExportColumn",
    "ExportIOError",
    "ExportSummary",
    "HEADER",
    "Widget",
    "export_widgets",
    "load_widgets_json",
    "render_widgets",
    "sample_widgets",
    "summary_info",
]
