from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class SlotZone(Enum):
    NORMAL = auto()
    NOSE = auto()
    TAIL = auto()


@dataclass(slots=True)
class Slot:
    """One physical cargo position. Occupancy is set once by the placement engine."""

    deck_name: str = ""
    index: int = 0
    arm: float = 0.0
    zone: SlotZone = SlotZone.NORMAL
    occupant_id: str = ""
    allocated_weight: float = 0.0
    # 1-based order of the placement that filled the slot; 0 when set outside the engine
    placement_no: int = 0

    @property
    def occupied(self) -> bool:
        return bool(self.occupant_id)

    @property
    def is_special(self) -> bool:
        return self.zone in (SlotZone.NOSE, SlotZone.TAIL)

    @property
    def label(self) -> str:
        """Deck plus 1-based position, e.g. main[3]."""
        return f"{self.deck_name}[{self.index + 1}]"

    def occupy(self, uld_id: str, weight: float, placement_no: int = 0) -> None:
        if self.occupied:
            raise ValueError(f"Slot {self.label} is already occupied by {self.occupant_id}")
        self.occupant_id = uld_id
        self.allocated_weight = weight
        self.placement_no = placement_no
