from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from uldplan_app.config.settings import MomentScheme, PlacementStrategy
from uldplan_app.models.slot import Slot
from uldplan_app.models.uld import ULD

UNASSIGNED_LABEL = "UNASSIGNED"


@dataclass(slots=True)
class PlacementOutcome:
    """Decision for one ULD. deck is None when the ULD is unassigned."""

    uld: ULD
    deck: str | None = None
    start_index: int | None = None
    width: int = 1
    slot_indices: Tuple[int, ...] = ()

    @property
    def placed(self) -> bool:
        return self.deck is not None

    @property
    def slot_label(self) -> str:
        if not self.placed:
            return UNASSIGNED_LABEL
        return f"{self.deck}[{self.start_index + 1}]"


@dataclass(slots=True)
class PlacementResult:
    outcomes: List[PlacementOutcome] = field(default_factory=list)
    slots: List[Slot] = field(default_factory=list)
    total_weight: float = 0.0
    total_moment: float = 0.0
    deck_weights: Dict[str, float] = field(default_factory=dict)
    strategy: PlacementStrategy = PlacementStrategy.FIRST_FIT
    moment_scheme: MomentScheme = MomentScheme.DISTRIBUTED

    @property
    def cg_arm(self) -> float:
        if self.total_weight <= 0.0:
            return 0.0
        return self.total_moment / self.total_weight

    @property
    def placed(self) -> List[PlacementOutcome]:
        return [o for o in self.outcomes if o.placed]

    @property
    def unassigned(self) -> List[PlacementOutcome]:
        return [o for o in self.outcomes if not o.placed]

    def slots_for_deck(self, deck_name: str) -> List[Slot]:
        return [s for s in self.slots if s.deck_name == deck_name]
