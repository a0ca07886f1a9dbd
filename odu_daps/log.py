"""Minimal levelled logging to standard error."""

from __future__ import annotations

import sys
import threading
from enum import IntEnum

__all__ = ["LogLevel", "set_level", "info", "warn", "error", "debug"]


class LogLevel(IntEnum):
    """Severity of a log line; lower values are more verbose."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


_lock = threading.Lock()
_level = LogLevel.INFO


def set_level(level: LogLevel | int) -> None:
    """Set the minimum level that is written."""
    global _level
    _level = LogLevel(level)


def _log(level: LogLevel, fmt: str, args: tuple) -> None:
    if level < _level:
        return
    message = fmt % args if args else fmt
    with _lock:
        stream = sys.stderr
        stream.write(f"[{level.name}] {message}\n")
        stream.flush()


def info(fmt: str, *args) -> None:
    """Write an INFO line."""
    _log(LogLevel.INFO, fmt, args)


def warn(fmt: str, *args) -> None:
    """Write a WARN line."""
    _log(LogLevel.WARN, fmt, args)


def error(fmt: str, *args) -> None:
    """Write an ERROR line."""
    _log(LogLevel.ERROR, fmt, args)


def debug(fmt: str, *args) -> None:
    """Write a DEBUG line."""
    _log(LogLevel.DEBUG, fmt, args)