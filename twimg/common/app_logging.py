"""
Logging setup driven by the `logging` section of twimg.yml.

Render code only logs through module loggers; handlers are installed once,
by the command-line front end, from the loaded LoggingConfig.
"""

from __future__ import annotations

import logging

from twimg import __version__
from twimg.common.config import LoggingConfig

__all__ = [
    "logLevel_resolve",
    "logging_setup",
    "loggingHandlers_build",
]

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def logLevel_resolve(level: str) -> int:
    """
    Map a configured level name to its numeric value.

    Args:
        level: Level name, case-insensitive (for example `info`).

    Returns:
        Numeric logging level.

    Raises:
        ValueError: If the name is not a standard level.
    """
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(
            f"Invalid logging.level '{level}'. Expected one of: {', '.join(LOG_LEVELS)}"
        )
    return logging.getLevelName(name)


def loggingHandlers_build(config: LoggingConfig) -> list[logging.Handler]:
    """
    Build stderr and optional file handlers sharing one versioned formatter.

    Args:
        config: Loaded logging settings.

    Returns:
        Handlers ready to attach to the root logger.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        handlers.append(logging.FileHandler(config.file))

    # Version tag follows the timestamp so mixed-version log files stay readable
    formatter = logging.Formatter(
        config.format.replace("%(asctime)s", f"%(asctime)s [v{__version__}]")
    )
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def logging_setup(config: LoggingConfig) -> None:
    """
    Configure the root logger from the loaded logging settings.

    The level is validated before any handler is created, so a bad
    `logging.level` leaves existing logging untouched.

    Args:
        config: Loaded logging settings.

    Raises:
        ValueError: If `config.level` is not a standard level name.
    """
    level = logLevel_resolve(config.level)
    logging.basicConfig(level=level, handlers=loggingHandlers_build(config))
