"""Stdlib logging setup for Scaffold.

Library modules only create loggers (``logging.getLogger(__name__)``); the
CLI decides where records go by calling :func:`configure_logging`.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "scaffold"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_SCAFFOLD_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None


def _level_from_name(name: str) -> int:
    try:
        return int(getattr(logging, str(name).upper()))
    except (AttributeError, TypeError, ValueError):
        return logging.WARNING


def configure_logging(level: str = "WARNING", log_path: Optional[Path] = None) -> logging.Logger:
    """Install a single handler on the ``scaffold`` logger.

    Idempotent per-process: calling again with the same target only updates
    the level. Switching target replaces the previously installed handler.

    Args:
        level: Level name (``DEBUG``, ``INFO``, ...)
        log_path: Write to this file instead of stderr

    Returns:
        The configured ``scaffold`` logger
    """
    global _SCAFFOLD_HANDLER, _CONFIGURED_TARGET

    logger = logging.getLogger(LOGGER_NAME)
    numeric = _level_from_name(level)
    logger.setLevel(numeric)

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    if _SCAFFOLD_HANDLER is not None and _CONFIGURED_TARGET == target:
        _SCAFFOLD_HANDLER.setLevel(numeric)
        return logger

    if _SCAFFOLD_HANDLER is not None:
        logger.removeHandler(_SCAFFOLD_HANDLER)
        _SCAFFOLD_HANDLER.close()
        _SCAFFOLD_HANDLER = None

    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _SCAFFOLD_HANDLER = handler
    _CONFIGURED_TARGET = target
    return logger


def reset_logging_for_tests() -> None:
    """Test-only: remove the installed handler."""
    global _SCAFFOLD_HANDLER, _CONFIGURED_TARGET
    logger = logging.getLogger(LOGGER_NAME)
    if _SCAFFOLD_HANDLER is not None:
        logger.removeHandler(_SCAFFOLD_HANDLER)
        _SCAFFOLD_HANDLER.close()
    _SCAFFOLD_HANDLER = None
    _CONFIGURED_TARGET = None
    logger.setLevel(logging.NOTSET)


__all__ = ["configure_logging", "reset_logging_for_tests", "LOGGER_NAME"]
