"""Static package metadata surfaced by the CLI banner.

Purpose
-------
Keep the distribution name, version, and shell command in one place so the
``info`` command, ``--version`` flag, and tests agree on the same values.
"""

from __future__ import annotations

from typing import Callable

name = "lib_widget_export"
title = "Export widget records to CSV files"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_widget_export"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_widget_export"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Print the metadata banner or hand it to ``writer``.

    Examples
    --------
    >>> chunks = []
    >>> print_info(writer=chunks.append)
    >>> chunks[0].startswith("Info for lib_widget_export:")
    True
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is not None:
        writer(text)
    else:
        print(text, end="")


__all__ = [
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
