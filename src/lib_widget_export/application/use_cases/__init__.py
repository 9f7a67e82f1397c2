"""Use cases composed from domain objects and ports."""

from __future__ import annotations

from .export import ExportSummary, create_export_widgets

__all__ = ["ExportSummary", "create_export_widgets"]
