"""
logging_utils.py
================

Logger setup for the "tokeq" hierarchy.

Library modules log through logging.getLogger(__name__) and never add
handlers. Scripts call setup_logger() once; the loader config's
`logging.level` is checked with parse_level() when the config is read, so a
misspelt level fails before any file is opened.

Output format:

    2024-05-01 12:00:00 | INFO     | tokeq.equilibrium.aggregate | Loaded equilibrium: eq.nc
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "tokeq"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: Union[str, int]) -> int:
    """
    Numeric logging level from a name ("debug", "INFO", ...) or an int.

    Raises
    ------
    ValueError
        If the name is not one of LEVELS.
    """
    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    if name not in LEVELS:
        raise ValueError(f"Unknown logging level {level!r}; expected one of {', '.join(LEVELS)}.")
    return getattr(logging, name)


def setup_logger(log_path: Optional[Path] = None, level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Attach console (stderr) and optional file handlers to the package logger.

    Calling it again while handlers are attached returns the logger unchanged;
    call reset_logger() first to reconfigure.

    Parameters
    ----------
    log_path : Path or None
        Log file, overwritten per run. Parent directories are created.
    level : str or int
        See parse_level().
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(parse_level(level))
    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    _attach(logger, logging.StreamHandler(sys.stderr), formatter)

    if log_path is not None:
        log_path = Path(log_path).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_path, mode="w"), formatter)
        logger.info(f"Logging to file: {log_path}")

    logger.debug("Logger initialized")
    return logger


def reset_logger() -> None:
    """Remove and close all handlers on the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def _attach(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setLevel(logger.level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
