"""Logger of the fnkit package.

All modules log through the ``fnkit`` logger. Its level comes from
``LOG_LEVEL`` when the logger is first set up, and is then aligned with
:attr:`fnkit.core.config.Settings.log_level` when the package is imported.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger", "set_level"]

PACKAGE_LOGGER = "fnkit"


def _level_number(level: str | int) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return number


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | int | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (``fnkit`` or one of its children)
        level: Log level name or number; defaults to ``LOG_LEVEL`` or INFO
        format_string: Custom format string

    Returns:
        Configured logger instance. A logger that already has handlers is
        returned unchanged.
    """
    level = level or os.getenv("LOG_LEVEL") or "INFO"
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_level_number(level))
        logger.propagate = False

    return logger


def set_level(level: str | int, name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Set the level of a configured logger, typically from ``settings.log_level``.

    Raises:
        ValueError: If ``level`` is not a level name known to :mod:`logging`.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_level_number(level))
    return logger


logger = setup_logger()
