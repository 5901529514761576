"""Logging system with console and optional file output.

Console output goes through the Rich library; a rotating log file can be
enabled through configuration. The calculator core logs classification and
resolution details at DEBUG and unexpected failures at ERROR, so with the
default WARNING level an interactive session stays quiet.

Example:
    >>> from encode_calc.core.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Classified %d tokens", 2)

    >>> # Configure log level globally
    >>> from encode_calc.core.logger import configure_logging
    >>> configure_logging(level="DEBUG", file_output=True, log_dir=Path("/tmp/logs"))
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

if TYPE_CHECKING:
    from encode_calc.core.config import LoggingConfig

ROOT_LOGGER_NAME = "encode_calc"

# Default configuration
DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "encode_calc" / "logs"
DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOG_FORMAT = "[%(asctime)s] %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_SIZE = 1024 * 1024  # 1 MB
BACKUP_COUNT = 3

CUSTOM_THEME = Theme(
    {
        "logging.level.debug": "dim cyan",
        "logging.level.info": "green",
        "logging.level.warning": "yellow",
        "logging.level.error": "bold red",
        "logging.level.critical": "bold white on red",
    }
)

# Global state
_log_dir: Path = DEFAULT_LOG_DIR
_log_level: int = DEFAULT_LOG_LEVEL
_initialized: bool = False
_console: Console | None = None


def _get_console() -> Console:
    """Get or create the Rich console instance used for log output."""
    global _console
    if _console is None:
        _console = Console(theme=CUSTOM_THEME, stderr=True)
    return _console


def _to_level(level: int | str) -> int:
    """Convert a level name or number to a logging level number."""
    if isinstance(level, str):
        return getattr(logging, level.upper(), DEFAULT_LOG_LEVEL)
    return level


def _create_file_handler() -> RotatingFileHandler:
    """Create a rotating file handler for the logger.

    Returns:
        RotatingFileHandler: Configured file handler with rotation.
    """
    _log_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(get_log_file_path()),
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    handler.setLevel(_log_level)

    return handler


def _create_console_handler() -> RichHandler:
    """Create a Rich console handler with colored output."""
    handler = RichHandler(
        console=_get_console(),
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(_log_level)

    return handler


def configure_logging(
    level: int | str = DEFAULT_LOG_LEVEL,
    log_dir: Path | None = None,
    console_output: bool = True,
    file_output: bool = False,
) -> None:
    """Configure the global logging settings.

    Subsequent calls replace the handlers installed by earlier ones.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Can be either an integer or string.
        log_dir: Directory for log files. Default: ~/.local/share/encode_calc/logs
        console_output: Whether to output logs to the console. Default: True.
        file_output: Whether to output logs to a file. Default: False.
    """
    global _log_dir, _log_level, _initialized

    _log_level = _to_level(level)

    if log_dir is not None:
        _log_dir = log_dir

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    if console_output:
        root_logger.addHandler(_create_console_handler())

    if file_output:
        root_logger.addHandler(_create_file_handler())

    _initialized = True


def configure_from_config(config: LoggingConfig, level: int | str | None = None) -> None:
    """Configure logging from the ``logging`` configuration section.

    Args:
        config: Logging configuration section.
        level: Optional level overriding ``config.level`` (e.g. from --verbose).
    """
    configure_logging(
        level=level if level is not None else config.level,
        file_output=config.file_output,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the "encode_calc" root logger.

    Args:
        name: The name of the logger, typically __name__.

    Returns:
        Logger: Configured logger instance.
    """
    if not _initialized:
        configure_logging()

    logger_name = name if name.startswith(ROOT_LOGGER_NAME) else f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(logger_name)


def set_log_level(level: int | str) -> None:
    """Set the log level for all encode_calc loggers and handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Can be either an integer or string.
    """
    global _log_level

    _log_level = _to_level(level)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_log_level)

    for handler in root_logger.handlers:
        handler.setLevel(_log_level)


def get_log_file_path() -> Path:
    """Get the path to the current log file."""
    return _log_dir / "encode_calc.log"


def get_log_dir() -> Path:
    """Get the log directory path."""
    return _log_dir


class LogLevel:
    """Log level constants for convenient access."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


__all__ = [
    "configure_from_config",
    "configure_logging",
    "get_logger",
    "get_log_dir",
    "get_log_file_path",
    "set_log_level",
    "LogLevel",
    "DEFAULT_LOG_DIR",
    "DEFAULT_LOG_LEVEL",
]
