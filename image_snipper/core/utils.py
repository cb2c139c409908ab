"""Core utilities."""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from image_snipper.core.exceptions import DimensionOverflowError
from image_snipper.core.settings.app_settings import LoggingSettings

logger = logging.getLogger(__name__)

# Handler names used to identify handlers and avoid duplicates
APP_STREAM_HANDLER_NAME = "snipper_app_stream_handler"
APP_FILE_HANDLER_NAME = "snipper_app_file_handler"

# Largest coordinate or dimension accepted (OpenCV sizes are signed 32-bit)
MAX_DIMENSION = 2**31 - 1


def checked_add(*values: int) -> int:
    """
    Add non-negative integers, refusing results outside the dimension range.

    Args:
        *values (int): Values to add.

    Returns:
        int: The sum.

    Raises:
        DimensionOverflowError: If the sum exceeds MAX_DIMENSION.
    """
    total = sum(values)
    if total > MAX_DIMENSION:
        raise DimensionOverflowError(
            f"Arithmetic overflow: {' + '.join(str(v) for v in values)} exceeds {MAX_DIMENSION}"
        )
    return total


def checked_mul(left: int, right: int) -> int:
    """
    Multiply two non-negative integers, refusing results outside the dimension range.

    Args:
        left (int): First factor.
        right (int): Second factor.

    Returns:
        int: The product.

    Raises:
        DimensionOverflowError: If the product exceeds MAX_DIMENSION.
    """
    product = left * right
    if product > MAX_DIMENSION:
        raise DimensionOverflowError(
            f"Arithmetic overflow: {left} * {right} exceeds {MAX_DIMENSION}"
        )
    return product


def _get_handler_by_name(root_logger: logging.Logger, name: str) -> logging.Handler | None:
    """
    Get a handler by name from a logger.

    Args:
        root_logger (logging.Logger): Logger to search.
        name (str): Handler name to find.

        logging.Handler | None: Handler if found, None otherwise.
    """
    for handler in root_logger.handlers:
        if getattr(handler, "name", None) == name:
            return handler
    return None


def _remove_handler_by_name(root_logger: logging.Logger, name: str) -> None:
    """
    Remove a handler by name from a logger.

    Args:
        root_logger (logging.Logger): Logger to remove from.
        name (str): Handler name to remove.

    """
    handler = _get_handler_by_name(root_logger=root_logger, name=name)
    if handler:
        root_logger.removeHandler(handler)
        handler.close()


def _get_min_level(root_level: str, loggers: dict[str, str]) -> int:
    """
    Get the minimum log level from root and all custom loggers.

    Args:
        root_level (str): The root logger level string.
        loggers (dict[str, str]): Dict of logger name to level string.

        int: The minimum numeric log level.
    """
    levels: list[int] = [logging.getLevelName(root_level.upper())]
    for level in loggers.values():
        levels.append(logging.getLevelName(level.upper()))
    return min(levels)


def setup_logging(settings: LoggingSettings) -> None:
    """
    Setup logging configuration for the application.

    Args:
        settings (LoggingSettings): Logging settings to configure logging.

    """
    root_logger = logging.getLogger()

    min_level = _get_min_level(
        root_level=settings.log_level,
        loggers=settings.loggers,
    )

    root_logger.setLevel(settings.log_level)

    # Remove any existing app handlers
    _remove_handler_by_name(root_logger=root_logger, name=APP_STREAM_HANDLER_NAME)
    _remove_handler_by_name(root_logger=root_logger, name=APP_FILE_HANDLER_NAME)

    formatter = logging.Formatter(
        fmt=settings.log_format,
        datefmt=settings.date_format,
    )

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        if settings.rotate_logs:
            handler: logging.Handler = TimedRotatingFileHandler(
                filename=log_path,
                when="midnight",
                encoding="utf-8",
            )
        else:
            handler = logging.FileHandler(log_path, encoding="utf-8")

        handler.set_name(APP_FILE_HANDLER_NAME)
    else:
        # stdout is reserved for command output
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(APP_STREAM_HANDLER_NAME)

    handler.setFormatter(formatter)
    handler.setLevel(min_level)
    root_logger.addHandler(handler)

    for logger_name, level in settings.loggers.items():
        logging.getLogger(logger_name).setLevel(level)
