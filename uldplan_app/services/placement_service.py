"""
Greedy ULD placement onto the pooled main/lower deck slots.

ULDs are processed strictly in input order. For each one the engine filters the
free slots it may use (deck restriction, nose/tail permission), looks for runs
of consecutive slots as wide as the ULD's catalog width, and commits one run.
Committed slots are never released or revisited during the run. A ULD with no
valid run is recorded as unassigned; this is a normal outcome, not an error.

Runs never cross decks: each deck keeps its own index space and a run must sit
on one deck with strictly consecutive indices. Candidates are ordered by pool
position (main deck first, then lower deck, each front to back).

The run is chosen by one strategy fixed for the whole run:

- FIRST_FIT: the earliest valid run in pool order.
- CG_BALANCE: the valid run whose resulting CG arm is closest to the simple
  mean arm of all pool slots; ties go to the earliest run.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from uldplan_app.config.defaults import DECK_LOWER, DECK_MAIN
from uldplan_app.config.settings import MomentScheme, PlacementStrategy, PlannerSettings
from uldplan_app.models import (
    Aircraft,
    DeckRestriction,
    PlacementOutcome,
    PlacementResult,
    Slot,
    ULD,
    ULDTypeEntry,
)
from uldplan_app.services.slot_builder import build_slot_pool
from uldplan_app.services.width_resolver import resolve_width

logger = logging.getLogger(__name__)

Run = Tuple[Slot, ...]


def deck_allows(uld: ULD, slot: Slot) -> bool:
    if uld.deck == DeckRestriction.MAIN:
        return slot.deck_name == DECK_MAIN
    if uld.deck == DeckRestriction.LOWER:
        return slot.deck_name == DECK_LOWER
    return True


def zone_allows(uld: ULD, slot: Slot) -> bool:
    return uld.allow_special_slots or not slot.is_special


def is_contiguous(run: Sequence[Slot]) -> bool:
    """True when all slots share one deck and their indices step by exactly one."""
    for prev, nxt in zip(run, run[1:]):
        if nxt.deck_name != prev.deck_name or nxt.index != prev.index + 1:
            return False
    return True


def run_moment(run: Sequence[Slot], weight: float, scheme: MomentScheme) -> float:
    """Moment contributed by a ULD of the given weight occupying run."""
    if not run:
        return 0.0
    if scheme == MomentScheme.START_SLOT:
        return weight * run[0].arm
    share = weight / len(run)
    return sum(share * s.arm for s in run)


class PlacementEngine:
    """
    Sole owner of slot occupancy for one planning run.

    Candidate sets are computed as filtered views over the pool, so occupancy
    is only ever read from and written to the pool's own Slot objects.
    """

    def __init__(
        self,
        slots: Iterable[Slot],
        catalog: Iterable[ULDTypeEntry] = (),
        strategy: PlacementStrategy = PlacementStrategy.FIRST_FIT,
        moment_scheme: MomentScheme = MomentScheme.DISTRIBUTED,
    ) -> None:
        self._slots: List[Slot] = list(slots)
        self._catalog: tuple[ULDTypeEntry, ...] = tuple(catalog)
        self._strategy = strategy
        self._moment_scheme = moment_scheme
        self._mean_arm = (
            sum(s.arm for s in self._slots) / len(self._slots) if self._slots else 0.0
        )
        self._total_weight = 0.0
        self._total_moment = 0.0
        self._deck_weights: dict[str, float] = {}
        self._outcomes: List[PlacementOutcome] = []

    @property
    def slots(self) -> Tuple[Slot, ...]:
        return tuple(self._slots)

    @property
    def mean_arm(self) -> float:
        return self._mean_arm

    @property
    def strategy(self) -> PlacementStrategy:
        return self._strategy

    def candidates(self, uld: ULD) -> List[Slot]:
        """Free slots this ULD may occupy, in pool order."""
        return [
            s for s in self._slots
            if not s.occupied and deck_allows(uld, s) and zone_allows(uld, s)
        ]

    def find_runs(self, uld: ULD, width: int) -> List[Run]:
        """All runs of `width` consecutive candidate slots, earliest first."""
        cands = self.candidates(uld)
        runs: List[Run] = []
        for start in range(len(cands) - width + 1):
            run = tuple(cands[start:start + width])
            if is_contiguous(run):
                runs.append(run)
        return runs

    def projected_cg(self, uld: ULD, run: Sequence[Slot]) -> float:
        """CG arm of the load if uld were placed on run."""
        weight = self._total_weight + uld.weight
        if weight <= 0.0:
            return self._mean_arm
        moment = self._total_moment + run_moment(run, uld.weight, self._moment_scheme)
        return moment / weight

    def _select_run(self, uld: ULD, runs: List[Run]) -> Run | None:
        if not runs:
            return None
        if self._strategy == PlacementStrategy.FIRST_FIT:
            return runs[0]

        best: Run | None = None
        best_score = float("inf")
        for run in runs:
            score = abs(self.projected_cg(uld, run) - self._mean_arm)
            if score < best_score:
                best_score = score
                best = run
        return best

    def place(self, uld: ULD) -> PlacementOutcome:
        """Decide and commit the placement of one ULD."""
        width = resolve_width(uld.id, self._catalog)
        run = self._select_run(uld, self.find_runs(uld, width))

        if run is None:
            outcome = PlacementOutcome(uld=uld, width=width)
            logger.info("ULD %s (width %d) could not be placed", uld.id, width)
        else:
            share = uld.weight / width
            placement_no = len(self._outcomes) + 1
            for slot in run:
                slot.occupy(uld.id, share, placement_no)
            self._total_weight += uld.weight
            self._total_moment += run_moment(run, uld.weight, self._moment_scheme)
            deck = run[0].deck_name
            self._deck_weights[deck] = self._deck_weights.get(deck, 0.0) + uld.weight
            outcome = PlacementOutcome(
                uld=uld,
                deck=deck,
                start_index=run[0].index,
                width=width,
                slot_indices=tuple(s.index for s in run),
            )
            logger.debug("ULD %s placed at %s (width %d)", uld.id, outcome.slot_label, width)

        self._outcomes.append(outcome)
        return outcome

    def run(self, ulds: Iterable[ULD]) -> PlacementResult:
        for uld in ulds:
            self.place(uld)
        result = self.result()
        logger.info(
            "Placement finished (%s): %d placed, %d unassigned, weight %.1f, CG arm %.3f",
            self._strategy.value,
            len(result.placed),
            len(result.unassigned),
            result.total_weight,
            result.cg_arm,
        )
        return result

    def result(self) -> PlacementResult:
        return PlacementResult(
            outcomes=list(self._outcomes),
            slots=list(self._slots),
            total_weight=self._total_weight,
            total_moment=self._total_moment,
            deck_weights=dict(self._deck_weights),
            strategy=self._strategy,
            moment_scheme=self._moment_scheme,
        )


def plan_load(
    aircraft: Aircraft,
    ulds: Sequence[ULD],
    catalog: Iterable[ULDTypeEntry],
    settings: PlannerSettings | None = None,
) -> PlacementResult:
    """Build the slot pool for the aircraft and place all ULDs in order."""
    settings = settings or PlannerSettings()
    engine = PlacementEngine(
        build_slot_pool(aircraft, settings),
        catalog,
        strategy=settings.strategy,
        moment_scheme=settings.moment_scheme,
    )
    return engine.run(ulds)
