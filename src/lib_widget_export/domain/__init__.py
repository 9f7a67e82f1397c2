"""Domain entities and value objects for widget exports."""

from __future__ import annotations

from .columns import HEADER, ExportColumn
from .errors import ExportIOError
from .widget import Widget

__all__ = [
    "ExportColumn",
    "ExportIOError",
    "HEADER",
    "Widget",
]
