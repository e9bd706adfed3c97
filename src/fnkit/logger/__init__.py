"""Logging utilities."""

from fnkit.logger.logger import logger, setup_logger, set_level

__all__ = ["logger", "setup_logger", "set_level"]
