"""Error raised when a widget export cannot touch the filesystem."""

from __future__ import annotations

from pathlib import Path


class ExportIOError(OSError):
    """Opening, writing, or reading an export file failed.

    Subclasses :class:`OSError` so callers that already guard file I/O keep
    working. ``errno`` and ``strerror`` mirror the underlying failure; the
    original error is available as ``__cause__``.

    Examples
    --------
    >>> err = ExportIOError(Path('out.csv'), 'disk full', errno=28)
    >>> str(err)
    "Cannot write widget export to 'out.csv': disk full"
    >>> isinstance(err, OSError), err.errno, err.strerror
    (True, 28, 'disk full')
    """

    def __init__(self, path: Path, reason: str, reading: bool = False, errno: int | None = None) -> None:
        self.path = Path(path)
        self.reason = reason
        self.reading = reading
        if reading:
            message = f"Cannot read widget export from '{self.path}': {reason}"
        else:
            message = f"Cannot write widget export to '{self.path}': {reason}"
        super().__init__(message)
        self.errno = errno
        self.strerror = reason

    def __str__(self) -> str:
        return str(self.args[0])

    def __reduce__(self):
        return (type(self), (self.path, self.reason, self.reading, self.errno))


__all__ = ["ExportIOError"]
