from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lib_widget_export import Widget, sample_widgets


@pytest.fixture(autouse=True)
def _restore_package_logger() -> None:
    """Undo handler, level, and propagation changes made by CLI invocations."""

    package_logger = logging.getLogger("lib_widget_export")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def widgets() -> list[Widget]:
    return sample_widgets()


@pytest.fixture
def csv_path(tmp_path: Path) -> Path:
    return tmp_path / "widgets.csv"
