"""
ULD (unit load device) models: the units to place and the container-type catalog entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DeckRestriction(Enum):
    MAIN = "MAIN"
    LOWER = "LOWER"
    ANY = "ANY"


@dataclass(frozen=True, slots=True)
class ULD:
    """A container to place. Its slot width is resolved from the catalog at placement time."""

    id: str
    weight: float = 0.0
    deck: DeckRestriction = DeckRestriction.ANY
    allow_special_slots: bool = True


@dataclass(slots=True)
class ULDTypeEntry:
    """A container-type catalog row, matched by literal ID prefix."""

    prefix: str = ""
    uld_type: str = ""
    width_slots: int = 1
    deck: str = "Any"
    notes: str = ""
