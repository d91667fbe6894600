"""Levelled console logging with source-location prefixes."""

from __future__ import annotations

import os
import sys
from enum import IntEnum


class Level(IntEnum):
    """Log severity, ordered from most to least verbose."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5


DEFAULT_LEVEL = Level.INFO

_current_level = DEFAULT_LEVEL


def get_current_level() -> Level:
    """Return the level below which messages are suppressed."""
    return _current_level


def set_current_level(level: Level) -> None:
    """Set the level below which messages are suppressed."""
    global _current_level
    _current_level = Level(level)


def level_string(level: Level) -> str:
    """Return the display name of a level."""
    return Level(level).name


def level_from_string(name: str) -> Level:
    """Return the level with the given exact name, or raise ValueError."""
    try:
        return Level[name]
    except KeyError:
        raise ValueError(f"Invalid log level: {name!r}") from None


def _emit(level: Level, args: tuple, depth: int) -> None:
    if level < _current_level:
        return
    frame = sys._getframe(depth)
    location = (
        f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"
        f" ( {frame.f_code.co_name} ) "
    )
    message = "".join(str(arg) for arg in args)
    sys.stdout.write(f"[ {level.name} ] {location}{message}\n")


def log(level: Level, *args) -> None:
    """Write the arguments, concatenated, if ``level`` is enabled."""
    _emit(Level(level), args, 2)


def trace(*args) -> None:
    """Log at TRACE level."""
    _emit(Level.TRACE, args, 2)


def debug(*args) -> None:
    """Log at DEBUG level."""
    _emit(Level.DEBUG, args, 2)


def info(*args) -> None:
    """Log at INFO level."""
    _emit(Level.INFO, args, 2)


def warn(*args) -> None:
    """Log at WARN level."""
    _emit(Level.WARN, args, 2)


def error(*args) -> None:
    """Log at ERROR level."""
    _emit(Level.ERROR, args, 2)


def critical(*args) -> None:
    """Log at CRITICAL level."""
    _emit(Level.CRITICAL, args, 2)