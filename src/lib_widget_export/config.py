"""Environment configuration and optional ``.env`` loading.

Purpose
-------
Collect the few knobs the CLI reads from the environment and offer an opt-in
``.env`` loader so local setups do not have to export variables by hand.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle enabling ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - dotenv helpers.
* :class:`ExportSettings` / :func:`load_settings` - resolved configuration.

System Role
-----------
Consumed by :mod:`lib_widget_export.cli`; library code never reads the
environment directly.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "LIB_WIDGET_EXPORT_"
DOTENV_ENV_VAR = f"{ENV_PREFIX}USE_DOTENV"
PATH_ENV_VAR = f"{ENV_PREFIX}PATH"
LOG_LEVEL_ENV_VAR = f"{ENV_PREFIX}LOG_LEVEL"

DEFAULT_PATH = Path("widgets.csv")
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DOTENV_LOCK = Lock()
_DOTENV_ATTEMPTED = False
_DOTENV_PATH: Path | None = None


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag always wins; otherwise the environment toggle decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` above the working directory once per process.

    Existing environment variables keep precedence over values from the file.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_ATTEMPTED, _DOTENV_PATH
    with _DOTENV_LOCK:
        if _DOTENV_ATTEMPTED:
            return _DOTENV_PATH
        _DOTENV_ATTEMPTED = True
        located = find_dotenv(usecwd=True)
        if not located:
            return None
        _DOTENV_PATH = Path(located).resolve()
        load_dotenv(_DOTENV_PATH, override=False)
        return _DOTENV_PATH


def _reset_dotenv_state_for_testing() -> None:
    """Forget that :func:`enable_dotenv` already ran."""

    global _DOTENV_ATTEMPTED, _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_ATTEMPTED = False
        _DOTENV_PATH = None


@dataclass(slots=True, frozen=True)
class ExportSettings:
    """Settings resolved from the environment.

    Attributes
    ----------
    default_path:
        Destination used when the CLI receives no ``--output``.
    log_level:
        Upper-case :mod:`logging` level name for the CLI handler.
    """

    default_path: Path = DEFAULT_PATH
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_number(self) -> int:
        """Return the numeric :mod:`logging` level.

        Examples
        --------
        >>> ExportSettings(log_level="INFO").log_level_number
        20
        """
        return logging.getLevelName(self.log_level)


def coerce_log_level(value: str) -> str:
    """Normalise a log level name.

    Raises
    ------
    ValueError
        If ``value`` is not a standard :mod:`logging` level name.

    Examples
    --------
    >>> coerce_log_level(" info ")
    'INFO'
    >>> coerce_log_level("loud")
    Traceback (most recent call last):
    ...
    ValueError: Invalid log level 'loud'; expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL
    """

    normalized = value.strip().upper()
    if normalized not in _LOG_LEVELS:
        raise ValueError(f"Invalid log level {value!r}; expected one of {', '.join(_LOG_LEVELS)}")
    return normalized


def load_settings(env: Mapping[str, str] | None = None, *, log_level: str | None = None) -> ExportSettings:
    """Build :class:`ExportSettings` from ``env`` (defaults to ``os.environ``).

    An explicit ``log_level`` wins over the environment, which is then not
    consulted for the level at all.

    Examples
    --------
    >>> load_settings({}).log_level
    'WARNING'
    >>> load_settings({"LIB_WIDGET_EXPORT_PATH": "out/w.csv"}).default_path.name
    'w.csv'
    >>> load_settings({"LIB_WIDGET_EXPORT_LOG_LEVEL": "loud"}, log_level="info").log_level
    'INFO'
    """

    source = os.environ if env is None else env
    raw_path = (source.get(PATH_ENV_VAR) or "").strip()
    raw_level = (log_level if log_level is not None else source.get(LOG_LEVEL_ENV_VAR) or "").strip()
    return ExportSettings(
        default_path=Path(raw_path) if raw_path else DEFAULT_PATH,
        log_level=coerce_log_level(raw_level) if raw_level else DEFAULT_LOG_LEVEL,
    )


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PATH",
    "DOTENV_ENV_VAR",
    "ExportSettings",
    "LOG_LEVEL_ENV_VAR",
    "PATH_ENV_VAR",
    "coerce_log_level",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
]
