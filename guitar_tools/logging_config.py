"""Centralized logging configuration for Guitar Tools.

Every module gets its logger through ``guitar_tools.logger.get_logger``;
this module decides where those records go and at which level.
"""

import logging
import sys
from typing import Optional

# Log levels for different modules
MODULE_LOG_LEVELS = {
    # Core modules
    "guitar_tools": logging.INFO,
    "guitar_tools.audio": logging.INFO,
    "guitar_tools.analysis": logging.INFO,  # Set to DEBUG to see every estimate
    "guitar_tools.services": logging.INFO,
    "guitar_tools.core": logging.INFO,
    "guitar_tools.cli": logging.WARNING,
    # Libraries/third-party
    "sounddevice": logging.ERROR,
    # Root logger
    "": logging.ERROR,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Shared console handler
_console_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Set up logging configuration for the application.

    Args:
        level: If provided, override all 'guitar_tools' log levels with this level (e.g., "DEBUG").

    Raises:
        ValueError: If ``level`` is not a known logging level name
    """
    global _console_handler

    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    log_levels = MODULE_LOG_LEVELS.copy()
    if level:
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"Invalid log level: {level}")
        for module_name in log_levels:
            if module_name.startswith("guitar_tools"):
                log_levels[module_name] = numeric_level

    # Package loggers propagate up to "guitar_tools", so only the top-level
    # names get the handler. The root logger keeps whatever handlers it has.
    for module_name, module_level in log_levels.items():
        logger = logging.getLogger(module_name)
        logger.setLevel(module_level)
        if module_name in ("guitar_tools", "sounddevice"):
            for handler in logger.handlers[:]:
                logger.removeHandler(handler)
            logger.addHandler(_console_handler)
            logger.propagate = False

    logging.getLogger("guitar_tools").debug("Logging configuration complete")
