"""Level-filtered terminal logging for a filepr run.

Progress lines (``copying ... to ...``, ``performing git operations...``) are
INFO, the command echo for each git/gh step is DEBUG, and selector internals
are TRACE. The threshold comes from ``--log-level`` or ``FILEPR_LOG_LEVEL``.
Warnings and errors go to stderr so they never mix with fzf's selection on
stdout.
"""

from __future__ import annotations

import os
import sys
from enum import IntEnum

from rich.console import Console
from rich.text import Text


class LogLevel(IntEnum):
    """Severity ordering; SUCCESS sits between INFO and WARNING."""

    TRACE = 10
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50


LEVEL_NAMES = ("trace", "debug", "info", "success", "warning", "error")

_LEVEL_BY_NAME = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "success": LogLevel.SUCCESS,
    "warning": LogLevel.WARNING,
    "warn": LogLevel.WARNING,
    "error": LogLevel.ERROR,
}
_DEFAULT_LEVEL = LogLevel.INFO
_configured_level = None
_no_color_override: bool | None = None


def _normalize_level(value: str | None) -> LogLevel:
    if value is None:
        return _DEFAULT_LEVEL
    normalized = value.strip().lower()
    if not normalized:
        return _DEFAULT_LEVEL
    return _LEVEL_BY_NAME.get(normalized, _DEFAULT_LEVEL)


def is_known_level(value: str) -> bool:
    """Return True when ``value`` names a level accepted by ``--log-level``."""
    return value.strip().lower() in _LEVEL_BY_NAME


def configured_level() -> LogLevel:
    """Return the active threshold, reading ``FILEPR_LOG_LEVEL`` on first use."""
    global _configured_level
    if _configured_level is None:
        _configured_level = _normalize_level(os.environ.get("FILEPR_LOG_LEVEL"))
    return _configured_level


def set_level(value: str | None) -> None:
    """Apply ``--log-level``; unknown names fall back to INFO."""
    global _configured_level
    _configured_level = _normalize_level(value)


def set_no_color(value: bool) -> None:
    """Apply ``--no-color``; ``False`` defers to ``NO_COLOR``/``FILEPR_NO_COLOR``."""
    global _no_color_override
    _no_color_override = True if value else None


def is_enabled(level: LogLevel) -> bool:
    return level >= configured_level()


def _no_color() -> bool:
    if _no_color_override is not None:
        return _no_color_override
    return bool(os.environ.get("NO_COLOR") or os.environ.get("FILEPR_NO_COLOR"))


def _console(*, stderr: bool) -> Console:
    return Console(
        file=sys.stderr if stderr else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=_no_color(),
    )


_STYLES = {
    LogLevel.TRACE: "dim",
    LogLevel.DEBUG: "cyan",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}


def emit(
    level: LogLevel,
    message: str,
    *,
    style: str | None = None,
    stderr: bool | None = None,
) -> None:
    """Print ``message`` when ``level`` passes the threshold.

    WARNING and above go to stderr unless ``stderr`` says otherwise; stdout
    stays free for the progress lines of the copy and the git/gh steps.
    """
    if not is_enabled(level):
        return
    to_stderr = level >= LogLevel.WARNING if stderr is None else stderr
    text = Text(message, style=style or _STYLES.get(level, ""))
    _console(stderr=to_stderr).print(text)


def trace(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.TRACE, message, style=style)


def debug(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.DEBUG, message, style=style)


def info(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.INFO, message, style=style)


def success(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.SUCCESS, message, style=style)


def warning(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.WARNING, message, style=style)


def error(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.ERROR, message, style=style)
