"""
Domain models for the ULD load planner.

These are pure Python/domain classes, separate from catalog file formats.
"""

from uldplan_app.models.aircraft import Aircraft, DeckGeometry
from uldplan_app.models.slot import Slot, SlotZone
from uldplan_app.models.uld import ULD, DeckRestriction, ULDTypeEntry
from uldplan_app.models.placement import PlacementOutcome, PlacementResult, UNASSIGNED_LABEL

__all__ = [
    "Aircraft",
    "DeckGeometry",
    "Slot",
    "SlotZone",
    "ULD",
    "DeckRestriction",
    "ULDTypeEntry",
    "PlacementOutcome",
    "PlacementResult",
    "UNASSIGNED_LABEL",
]
