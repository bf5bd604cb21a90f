"""
Centralized logging configuration for the ``ledger`` package.

Entrypoints (the CLI, the HTTP app) call ``configure_logging`` once at
startup. Library modules only call ``get_logger(__name__)`` and never
attach handlers of their own.
"""

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "ledger"
_ENV_LEVEL = "LEDGER_LOG_LEVEL"
_CONFIGURED = False


def parse_level(level: Union[int, str, None], default: int = logging.WARNING) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str) and level.strip():
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Unknown log level: {level}")
    env_val = os.getenv(_ENV_LEVEL)
    if env_val:
        return parse_level(env_val, default)
    return default


def configure_logging(
    level: Union[int, str, None] = None,
    *,
    fmt: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Attach a single StreamHandler to the package logger, exactly once.

    ``level`` falls back to the LEDGER_LOG_LEVEL environment variable and
    then to WARNING, so stdout stays reserved for balance-sheet output.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    numeric = parse_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))

    logger.setLevel(numeric)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
