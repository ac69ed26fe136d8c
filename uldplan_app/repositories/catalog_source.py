"""
Read-only JSON catalog files for the ULD load planner.

Catalog files are JSON arrays of records. Any failure to read them (missing
file, invalid JSON, top-level value that is not an array) degrades to an empty
list plus a warning message; callers decide how to surface the warning.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CatalogRecords:
    """Records read from one catalog file, plus any load warnings."""

    path: Path
    records: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def read_catalog(path: Path) -> CatalogRecords:
    """Read a JSON array of objects; non-object entries are skipped with a warning."""
    result = CatalogRecords(path=Path(path))
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        result.warnings.append(f"Catalog file {path} not found; using an empty catalog.")
    except (OSError, UnicodeDecodeError) as exc:
        result.warnings.append(f"Catalog file {path} could not be read ({exc}); using an empty catalog.")
    except json.JSONDecodeError as exc:
        result.warnings.append(f"Catalog file {path} is not valid JSON ({exc.msg}); using an empty catalog.")
    else:
        if not isinstance(data, list):
            result.warnings.append(f"Catalog file {path} does not contain a JSON array; using an empty catalog.")
        else:
            for pos, entry in enumerate(data):
                if isinstance(entry, dict):
                    result.records.append(entry)
                else:
                    result.warnings.append(f"Catalog file {path}: entry {pos} is not an object; skipped.")

    for msg in result.warnings:
        logger.warning(msg)
    return result


def as_int(value: Any, default: int = 0) -> int:
    """Coerce a JSON value to int, falling back to default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def as_float(value: Any, default: float = 0.0) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def as_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)
