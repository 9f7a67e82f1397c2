"""Console adapters built on Rich."""

from __future__ import annotations

from .rich_table import RichTableAdapter, build_table

__all__ = ["RichTableAdapter", "build_table"]
