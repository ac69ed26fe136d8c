"""
ULD width lookup by catalog prefix.
"""

from __future__ import annotations

from typing import Iterable, Optional

from uldplan_app.config.defaults import DEFAULT_ULD_WIDTH
from uldplan_app.models import ULDTypeEntry


def find_type_entry(uld_id: str, catalog: Iterable[ULDTypeEntry]) -> Optional[ULDTypeEntry]:
    """First catalog entry (in stored order) whose prefix starts uld_id."""
    for entry in catalog:
        if uld_id.startswith(entry.prefix):
            return entry
    return None


def resolve_width(uld_id: str, catalog: Iterable[ULDTypeEntry]) -> int:
    """Number of consecutive slots the ULD needs; always >= 1."""
    entry = find_type_entry(uld_id, catalog)
    if entry is None:
        return DEFAULT_ULD_WIDTH
    if entry.width_slots < 1:
        return DEFAULT_ULD_WIDTH
    return entry.width_slots


def resolve_type_code(uld_id: str, catalog: Iterable[ULDTypeEntry]) -> str:
    entry = find_type_entry(uld_id, catalog)
    return entry.uld_type if entry else ""
