"""
Logging setup for the back-office list UI.

All module loggers hang off a single "backoffice_ui" parent logger that
owns the stream handler, so the whole package shares one format and one
level (LOG_LEVEL, default INFO).
"""

import logging
import os
from pathlib import Path

_ROOT_NAME = "backoffice_ui"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _root() -> logging.Logger:
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        root.setLevel(getattr(logging, level, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the package logger for a module.

    Args:
        name: Module name or __file__ path; paths are reduced to their stem.

    Returns:
        Logger named "backoffice_ui.<stem>".
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem
    _root()
    return logging.getLogger(f"{_ROOT_NAME}.{name}")
