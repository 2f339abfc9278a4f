"""
Logging helpers.

``setup_logger()`` is called once by entry points (the CLI); library modules
only ever call ``get_logger(__name__)`` and never configure handlers
themselves, so importing the engine stays silent.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

# Marks handlers installed by setup_logger so repeated calls replace them
_HANDLER_TAG = "_utmconv_handler"


def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(level=None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger from settings (or the explicit arguments).

    Args:
        level: Level name or number. Defaults to ``Settings.log_level``.
        log_file: Optional file to also write logs to. Defaults to
            ``Settings.log_file``; an empty value disables the file handler.

    Returns:
        logging.Logger: The configured root logger.
    """
    from config import get_settings

    settings = get_settings()
    level = _resolve_level(level if level is not None else settings.log_level)
    log_file = settings.log_file if log_file is None else log_file

    root = logging.getLogger()
    for handler in [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]:
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    setattr(console, _HANDLER_TAG, True)
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(file_handler, _HANDLER_TAG, True)
        root.addHandler(file_handler)

    root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    """Module-level logger; handlers come from ``setup_logger``."""
    return logging.getLogger(name)


__all__ = ["setup_logger", "get_logger"]
