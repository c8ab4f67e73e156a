"""
Path utilities for the back-office list UI.

Resolves the directories used for on-disk preferences.
"""

import os
import tempfile
from pathlib import Path

_CACHE_DIR_KEY = "BACKOFFICE_UI_CACHE_DIR"


def temp_dir() -> Path:
    """
    Return the system temporary directory as a Path.

    Returns:
        Path object pointing to the system temp directory.
    """
    return Path(tempfile.gettempdir())


def cache_dir(name: str) -> Path:
    """
    Return the directory for a named disk cache.

    Uses BACKOFFICE_UI_CACHE_DIR as the parent when set, otherwise the
    system temp directory.

    Args:
        name: Sub-directory name for the cache.
    """
    root = os.getenv(_CACHE_DIR_KEY)
    return (Path(root) if root else temp_dir()) / name
