"""
Import a ULD manifest (batch container input) from Excel or CSV.

Expected columns: ULD ID and Weight; optional Deck (MAIN / LOWER / ANY) and
Nose/Tail permission (y / yes). Header names are flexible (e.g. "ULD", "Weight (kg)",
"Deck restriction", "Allow nose/tail"). Row order is kept: it is the placement order.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import pandas as pd

from uldplan_app.models import ULD
from uldplan_app.services.input_validation import (
    parse_deck_restriction,
    parse_special_permission,
    parse_uld_id,
    parse_weight,
)

logger = logging.getLogger(__name__)

_ID_ALIASES = ("id", "uld", "uld id", "uld_id", "uldid", "uld no", "uld number", "container", "container id")
_WEIGHT_ALIASES = ("weight", "weight (kg)", "weight(kg)", "weight kg", "gross weight", "gross weight (kg)", "kg")
_DECK_ALIASES = ("deck", "type", "uld type", "deck restriction", "deck (main/lower/any)")
_SPECIAL_ALIASES = (
    "special",
    "allow special",
    "allow special slots",
    "nose/tail",
    "nose tail",
    "allow nose/tail",
    "allow nose tail",
    "special slots",
)


@dataclass(slots=True)
class ManifestImportError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(slots=True)
class ManifestRowIssue:
    row: int  # 1-based data row number, header excluded
    message: str


@dataclass(slots=True)
class ManifestImport:
    ulds: List[ULD] = field(default_factory=list)
    issues: List[ManifestRowIssue] = field(default_factory=list)


def _normalize_key(column: object) -> str:
    key = str(column).lower().replace("\n", " ").replace("\r", " ").replace("\t", " ")
    key = re.sub(r"[^\w\s.()/-]", "", key)
    return re.sub(r"\s+", " ", key).strip()


def _exact_target(key: str) -> str | None:
    if key in _ID_ALIASES:
        return "uld_id"
    if key in _WEIGHT_ALIASES:
        return "weight_kg"
    if key in _DECK_ALIASES:
        return "deck"
    if key in _SPECIAL_ALIASES:
        return "special"
    return None


def _loose_target(key: str) -> str | None:
    if "nose" in key or "tail" in key:
        return "special"
    if "weight" in key:
        return "weight_kg"
    return None


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename columns to canonical names (uld_id, weight_kg, deck, special).

    Each canonical name is given to one source column only: exact alias
    matches first, then the first header containing "weight" / "nose" / "tail".
    Other candidates keep their original header and are ignored.
    """
    keys = {c: _normalize_key(c) for c in df.columns}
    rename: dict = {}
    for match in (_exact_target, _loose_target):
        for c, key in keys.items():
            if c in rename:
                continue
            target = match(key)
            if target is not None and target not in rename.values():
                rename[c] = target
    return df.rename(columns=rename)


def parse_manifest_dataframe(df: pd.DataFrame) -> ManifestImport:
    """Turn a manifest table into ULDs; invalid rows are skipped and reported."""
    df = _normalize_columns(df)
    missing = [c for c in ("uld_id", "weight_kg") if c not in df.columns]
    if missing:
        raise ManifestImportError(
            "Manifest is missing required column(s): " + ", ".join(missing)
        )

    result = ManifestImport()
    for row_no, (_, r) in enumerate(df.iterrows(), start=1):
        uld_id = parse_uld_id(r["uld_id"])
        if not uld_id.ok:
            result.issues.append(ManifestRowIssue(row_no, uld_id.error))
            continue
        weight = parse_weight(r["weight_kg"])
        if not weight.ok:
            result.issues.append(ManifestRowIssue(row_no, f"{uld_id.value}: {weight.error}"))
            continue
        deck = parse_deck_restriction(r["deck"]) if "deck" in df.columns else parse_deck_restriction("")
        # Without a permission column, nose/tail slots are allowed (same as the ULD default).
        special = parse_special_permission(r["special"]) if "special" in df.columns else True
        result.ulds.append(
            ULD(id=uld_id.value, weight=weight.value, deck=deck, allow_special_slots=special)
        )

    for issue in result.issues:
        logger.warning("Manifest row %d skipped: %s", issue.row, issue.message)
    return result


def import_manifest(filepath: Path) -> ManifestImport:
    """Read a manifest from .csv, .xlsx or .xls."""
    path = Path(filepath)
    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        elif suffix in (".xlsx", ".xls"):
            df = pd.read_excel(path, dtype=str, keep_default_na=False)
        else:
            raise ManifestImportError(f"Unsupported manifest format: {path.suffix or path.name}")
    except (OSError, ValueError) as exc:
        raise ManifestImportError(f"Could not read manifest {path}: {exc}") from exc

    result = parse_manifest_dataframe(df)
    logger.info("Imported %d ULD(s) from %s (%d row(s) skipped)", len(result.ulds), path, len(result.issues))
    return result
