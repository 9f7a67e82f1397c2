"""Protocols separating export use cases from adapters."""

from __future__ import annotations

from .export import WidgetExportPort

__all__ = ["WidgetExportPort"]
