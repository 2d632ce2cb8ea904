"""Central logging utilities for the ThreadPilot services.

This module enforces a consistent logging configuration across the
code-base and provides a convenience helper for retrieving module-scoped
loggers.

Key Features
------------
1. configure_logging(): idempotent initialization of the root logger.
2. get_logger(name): typed helper that always returns a configured logger.
3. mask_identifier(value): hides the personal part of an identification
   number before it is written to a log record.
"""

from __future__ import annotations

import logging
from typing import Final

from beartype import beartype

__all__: Final = [
    "configure_logging",
    "get_logger",
    "mask_identifier",
]

_DEFAULT_LOG_FORMAT: Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_is_configured: bool = False


@beartype
def configure_logging(
    *, level: int | str = logging.INFO, fmt: str = _DEFAULT_LOG_FORMAT
) -> None:
    """Configure the root logger exactly once.

    Calling this function multiple times is safe – configuration will only
    be applied on the first invocation.
    """
    global _is_configured
    if _is_configured:
        return

    logging.basicConfig(level=level, format=fmt)
    _is_configured = True


@beartype
def get_logger(name: str | None = None, *, level: int | None = None) -> logging.Logger:
    """Return a module-scoped logger that is guaranteed to be configured."""
    configure_logging()
    logger = logging.getLogger(name or "threadpilot")
    if level is not None:
        logger.setLevel(level)
    return logger


@beartype
def mask_identifier(value: str, *, visible: int = 4) -> str:
    """Mask the trailing ``visible`` characters of an identifier."""
    if len(value) <= visible:
        return "*" * len(value)
    return value[:-visible] + "*" * visible
