"""Console and file logging for the mountain package.

Library modules only create ``logging.getLogger(__name__)`` loggers; nothing
is configured on import. Scripts such as the demo call :func:`setup_logging`
once to see pipeline progress.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "mountain"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Set on handlers installed here so repeat calls replace only those
_OWNED = "_mountain_handler"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level!r}")
        return resolved
    return level


def setup_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
) -> logging.Logger:
    """Send mountain log records to stdout and optionally to a file.

    Calling this again replaces the handlers it added before; handlers
    attached by the application are left alone.

    Args:
        level: Level as a number or a name such as ``"debug"``.
        log_file: Optional path; the file is overwritten.

    Returns:
        The ``mountain`` package logger.

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """
    level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)

    return logger
