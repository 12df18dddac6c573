"""
Logging setup for applications using sashite_cell.

The library itself only creates module loggers; call setup_logging() from an
application or test session to get rich console output and an optional log
file.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from rich.logging import RichHandler

LOG_LEVEL_ENV = "SASHITE_CELL_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handlers installed by the last setup_logging() call
_installed_handlers: List[logging.Handler] = []


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """
    Resolve a log level from an argument, the environment, or the default.

    Args:
        level: Level name ("DEBUG", "info", ...) or number. If None, the
               SASHITE_CELL_LOG_LEVEL environment variable is used, then INFO.

    Returns:
        Numeric logging level

    Raises:
        ValueError: If the level is not a known name, a number, or a digit string
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL)

    if isinstance(level, bool) or not isinstance(level, (int, str)):
        raise ValueError(f"Log level must be a name or an integer, got: {level!r}")

    if isinstance(level, int):
        return level

    level = level.strip()
    if level.isascii() and level.isdigit():
        return int(level)

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: '{level}'")
    return numeric


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the root logger with a rich console handler and optional file.

    Calling it again replaces the handlers added by the previous call.

    Args:
        level: Console log level; see resolve_level()
        log_file: If given, also write DEBUG and above to this file

    Returns:
        The configured root logger
    """
    console_level = resolve_level(level)
    root_logger = logging.getLogger()

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    # Rich console handler - shows the requested level and above
    rich_handler = RichHandler(
        level=console_level,
        show_time=True,
        rich_tracebacks=True,
    )
    _installed_handlers.append(rich_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # File handler - DEBUG and above for all modules
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    root_logger.setLevel(min(h.level for h in _installed_handlers))
    return root_logger
