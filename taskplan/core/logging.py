"""
Logging setup and it configures:
- Log format
- Log level (LOG_LEVEL setting, applied at startup)
- One stream handler per named logger

The main purpose:
Standardized server-side logging (generation failures never reach the client).
"""


import logging
from typing import Dict, Union

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_level = logging.INFO
_loggers: Dict[str, logging.Logger] = {}


def configure_logging(level: Union[str, int]) -> None:
    """Set the level for every logger handed out so far and for later ones."""
    global _level
    resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    _level = resolved
    for logger in _loggers.values():
        logger.setLevel(_level)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(_level)
    _loggers[name] = logger
    return logger
