"""
File service for writing load plan artifacts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


def save_load_plan(filepath: Path, lines: Iterable[str]) -> bool:
    """
    Write the rendered load plan, one line per entry.

    Returns False (and logs a warning) when the file cannot be written; the
    computed plan stays valid either way.
    """
    try:
        with open(filepath, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as exc:
        logger.warning("Failed to save load plan to %s: %s", filepath, exc)
        return False
    logger.info("Load plan saved to %s", filepath)
    return True
