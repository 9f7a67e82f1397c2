from __future__ import annotations

import pickle
from pathlib import Path

from lib_widget_export.domain.errors import ExportIOError


def test_export_io_error_is_an_os_error_with_path() -> None:
    error = ExportIOError(Path("out") / "widgets.csv", "Permission denied")

    assert isinstance(error, OSError)
    assert error.path == Path("out") / "widgets.csv"
    assert error.reason == "Permission denied"
    assert str(error).startswith("Cannot write widget export to ")
    assert str(error).endswith(": Permission denied")


def test_export_io_error_reading_message() -> None:
    error = ExportIOError(Path("widgets.csv"), "No such file or directory", reading=True)

    assert str(error) == "Cannot read widget export from 'widgets.csv': No such file or directory"


def test_export_io_error_carries_errno_and_strerror() -> None:
    error = ExportIOError(Path("widgets.csv"), "No space left on device", errno=28)

    assert error.errno == 28
    assert error.strerror == "No space left on device"
    assert str(error) == "Cannot write widget export to 'widgets.csv': No space left on device"


def test_export_io_error_survives_pickling() -> None:
    original = ExportIOError(Path("out.csv"), "disk full", reading=True, errno=28)

    restored = pickle.loads(pickle.dumps(original))

    assert type(restored) is ExportIOError
    assert restored.path == original.path
    assert restored.reason == "disk full"
    assert restored.reading is True
    assert restored.errno == 28
    assert str(restored) == str(original)
