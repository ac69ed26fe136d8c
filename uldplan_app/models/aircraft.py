from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from uldplan_app.config.defaults import DEFAULT_ROW_LENGTH


@dataclass(slots=True)
class DeckGeometry:
    """Static deck template: slot count, row width, nose/tail counts and arms (front to back)."""

    slots: int = 0
    row_length: int = DEFAULT_ROW_LENGTH
    nose_slots: int = 0
    tail_slots: int = 0
    slot_arms: List[float] = field(default_factory=list)

    @property
    def has_explicit_arms(self) -> bool:
        return len(self.slot_arms) == self.slots


@dataclass(slots=True)
class Aircraft:
    model: str = ""
    main_deck: DeckGeometry = field(default_factory=DeckGeometry)
    lower_deck: DeckGeometry = field(default_factory=DeckGeometry)

    # Maximum takeoff weight (kg); displayed only, never enforced
    mtw: int = 0

    @property
    def total_slots(self) -> int:
        return self.main_deck.slots + self.lower_deck.slots
