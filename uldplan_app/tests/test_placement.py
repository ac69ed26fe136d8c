"""Tests for the greedy placement engine."""

from __future__ import annotations

import pytest

from uldplan_app.config.settings import MomentScheme, PlacementStrategy, PlannerSettings
from uldplan_app.models import DeckRestriction, Slot, SlotZone, ULD
from uldplan_app.services.placement_service import (
    PlacementEngine,
    deck_allows,
    is_contiguous,
    plan_load,
    run_moment,
    zone_allows,
)
from uldplan_app.services.slot_builder import build_slot_pool


def _engine(aircraft, catalog=(), **kwargs) -> PlacementEngine:
    return PlacementEngine(build_slot_pool(aircraft, PlannerSettings()), catalog, **kwargs)


class TestPredicates:
    def test_deck_allows(self):
        main = Slot(deck_name="main")
        lower = Slot(deck_name="lower")
        assert deck_allows(ULD("A", deck=DeckRestriction.MAIN), main)
        assert not deck_allows(ULD("A", deck=DeckRestriction.MAIN), lower)
        assert deck_allows(ULD("A", deck=DeckRestriction.LOWER), lower)
        assert not deck_allows(ULD("A", deck=DeckRestriction.LOWER), main)
        assert deck_allows(ULD("A"), main) and deck_allows(ULD("A"), lower)

    def test_zone_allows(self):
        nose = Slot(zone=SlotZone.NOSE)
        assert zone_allows(ULD("A", allow_special_slots=True), nose)
        assert not zone_allows(ULD("A", allow_special_slots=False), nose)
        assert zone_allows(ULD("A", allow_special_slots=False), Slot())

    def test_is_contiguous(self):
        assert is_contiguous([Slot("main", 2), Slot("main", 3)])
        assert not is_contiguous([Slot("main", 2), Slot("main", 4)])
        assert not is_contiguous([Slot("main", 5), Slot("lower", 6)])
        assert is_contiguous([Slot("main", 0)])

    def test_run_moment(self):
        run = [Slot("main", 0, arm=10.0), Slot("main", 1, arm=14.0)]
        assert run_moment(run, 100.0, MomentScheme.DISTRIBUTED) == pytest.approx(1200.0)
        assert run_moment(run, 100.0, MomentScheme.START_SLOT) == pytest.approx(1000.0)
        assert run_moment([], 100.0, MomentScheme.DISTRIBUTED) == 0.0


class TestFirstFit:
    def test_nose_permitted_then_first_normal_slot(self, four_slot_aircraft):
        result = plan_load(
            four_slot_aircraft,
            [
                ULD("A", 100.0, DeckRestriction.ANY, True),
                ULD("B", 50.0, DeckRestriction.MAIN, False),
            ],
            [],
        )
        a, b = result.outcomes
        assert a.placed and a.deck == "main" and a.start_index == 0
        assert b.placed and b.deck == "main" and b.start_index == 1

    def test_wide_unit_blocked_by_occupied_slot(self, four_slot_aircraft, sample_catalog):
        engine = _engine(four_slot_aircraft, sample_catalog)
        engine.place(ULD("A", 100.0))
        engine.place(ULD("B", 50.0, allow_special_slots=False))
        engine.slots[3].occupy("PRELOAD", 10.0)

        outcome = engine.place(ULD("ALF1", 300.0))
        assert outcome.width == 2
        assert not outcome.placed
        assert outcome.slot_label == "UNASSIGNED"
        assert not engine.slots[2].occupied

    def test_special_slots_excluded(self, four_slot_aircraft):
        ulds = [ULD(f"U{i}", 10.0, allow_special_slots=False) for i in range(3)]
        result = plan_load(four_slot_aircraft, ulds, [])
        assert [o.start_index for o in result.outcomes] == [1, 2, None]
        assert not result.slots[0].occupied
        assert not result.slots[3].occupied

    def test_deck_restriction(self, two_deck_aircraft):
        result = plan_load(
            two_deck_aircraft,
            [ULD("L1", 100.0, DeckRestriction.LOWER), ULD("M1", 100.0, DeckRestriction.MAIN)],
            [],
        )
        assert result.outcomes[0].deck == "lower" and result.outcomes[0].start_index == 0
        assert result.outcomes[1].deck == "main" and result.outcomes[1].start_index == 0

    def test_restricted_deck_full_means_unassigned(self, four_slot_aircraft):
        result = plan_load(four_slot_aircraft, [ULD("L1", 100.0, DeckRestriction.LOWER)], [])
        assert result.unassigned[0].uld.id == "L1"
        assert result.total_weight == 0.0

    def test_contiguity_skips_gaps(self, two_deck_aircraft, sample_catalog):
        engine = _engine(two_deck_aircraft, sample_catalog)
        engine.slots[1].occupy("X", 1.0)
        engine.slots[3].occupy("Y", 1.0)
        outcome = engine.place(ULD("PGA1", 400.0, DeckRestriction.MAIN))
        assert outcome.slot_indices == (4, 5)

    def test_runs_never_cross_decks(self, two_deck_aircraft, sample_catalog):
        engine = _engine(two_deck_aircraft, sample_catalog)
        for i in range(5):
            engine.slots[i].occupy(f"X{i}", 1.0)
        outcome = engine.place(ULD("ALF1", 400.0))
        assert outcome.deck == "lower"
        assert outcome.slot_indices == (0, 1)
        assert not engine.slots[5].occupied

    def test_monotone_fill(self, two_deck_aircraft):
        ulds = [ULD(f"U{i}", 10.0) for i in range(12)]
        result = plan_load(two_deck_aircraft, ulds, [])
        labels = [o.slot_label for o in result.outcomes]
        assert labels[:6] == [f"main[{i}]" for i in range(1, 7)]
        assert labels[6:10] == [f"lower[{i}]" for i in range(1, 5)]
        assert labels[10:] == ["UNASSIGNED", "UNASSIGNED"]

    def test_weight_split_over_run(self, two_deck_aircraft, sample_catalog):
        result = plan_load(two_deck_aircraft, [ULD("PGA1", 500.0)], sample_catalog)
        first, second = result.slots[0], result.slots[1]
        assert first.occupant_id == second.occupant_id == "PGA1"
        assert first.allocated_weight == pytest.approx(250.0)
        assert second.allocated_weight == pytest.approx(250.0)
        assert first.placement_no == second.placement_no == 1

    def test_weight_conservation(self, two_deck_aircraft, sample_catalog):
        ulds = [
            ULD("PGA1", 500.0),
            ULD("AKE1", 120.5, DeckRestriction.LOWER),
            ULD("ALF1", 800.0, DeckRestriction.LOWER),
            ULD("PMC1", 90.0),
            ULD("ALF2", 700.0, DeckRestriction.LOWER),
        ]
        result = plan_load(two_deck_aircraft, ulds, sample_catalog)
        placed_weight = sum(o.uld.weight for o in result.placed)
        assert result.total_weight == pytest.approx(placed_weight)
        assert sum(s.allocated_weight for s in result.slots) == pytest.approx(placed_weight)
        assert sum(result.deck_weights.values()) == pytest.approx(placed_weight)
        assert [o.uld.id for o in result.unassigned] == ["ALF2"]

    def test_distributed_moment(self, two_deck_aircraft, sample_catalog):
        result = plan_load(two_deck_aircraft, [ULD("PGA1", 100.0)], sample_catalog)
        assert result.total_moment == pytest.approx(50.0 * 10.0 + 50.0 * 14.0)
        assert result.cg_arm == pytest.approx(12.0)

    def test_start_slot_moment(self, two_deck_aircraft, sample_catalog):
        settings = PlannerSettings(moment_scheme=MomentScheme.START_SLOT)
        result = plan_load(two_deck_aircraft, [ULD("PGA1", 100.0)], sample_catalog, settings)
        assert result.total_moment == pytest.approx(1000.0)
        assert result.moment_scheme == MomentScheme.START_SLOT

    def test_empty_aircraft(self):
        from uldplan_app.models import Aircraft

        result = plan_load(Aircraft(model="EMPTY"), [ULD("A", 1.0)], [])
        assert result.unassigned and not result.placed
        assert result.cg_arm == 0.0


class TestCGBalance:
    def test_first_unit_goes_nearest_mean_arm(self, two_deck_aircraft):
        engine = _engine(two_deck_aircraft, strategy=PlacementStrategy.CG_BALANCE)
        assert engine.mean_arm == pytest.approx(19.2)
        outcome = engine.place(ULD("A", 100.0))
        assert outcome.deck == "lower" and outcome.start_index == 2

    def test_second_unit_balances_running_cg(self, two_deck_aircraft):
        engine = _engine(two_deck_aircraft, strategy=PlacementStrategy.CG_BALANCE)
        engine.place(ULD("A", 100.0))
        outcome = engine.place(ULD("B", 100.0))
        assert outcome.deck == "main" and outcome.start_index == 2

    def test_wide_unit_takes_contiguous_run_nearest_mean_arm(self, two_deck_aircraft, sample_catalog):
        engine = _engine(two_deck_aircraft, sample_catalog, strategy=PlacementStrategy.CG_BALANCE)
        outcome = engine.place(ULD("ALF1", 100.0))
        # pair arms 18/22 average 20.0, closest to the 19.2 mean
        assert outcome.width == 2
        assert outcome.deck == "main"
        assert outcome.slot_indices == (2, 3)
        run = [s for s in engine.slots if s.occupied]
        assert [s.label for s in run] == ["main[3]", "main[4]"]
        assert [s.allocated_weight for s in run] == pytest.approx([50.0, 50.0])
        result = engine.result()
        assert result.total_moment == pytest.approx(50.0 * 18.0 + 50.0 * 22.0)
        assert result.cg_arm == pytest.approx(20.0)

    def test_wide_unit_never_spans_decks(self, two_deck_aircraft, sample_catalog):
        engine = _engine(two_deck_aircraft, sample_catalog, strategy=PlacementStrategy.CG_BALANCE)
        # free: main[6], lower[1], lower[4]; only main[6] and lower[1] sit next to each other in the pool
        for i in (0, 1, 2, 3, 4, 7, 8):
            engine.slots[i].occupy(f"X{i}", 1.0)
        outcome = engine.place(ULD("ALF1", 100.0))
        assert not outcome.placed
        assert not engine.slots[5].occupied
        assert not engine.slots[6].occupied
        assert engine.result().total_weight == 0.0

    def test_zero_weight_takes_earliest_run(self, two_deck_aircraft):
        engine = _engine(two_deck_aircraft, strategy=PlacementStrategy.CG_BALANCE)
        outcome = engine.place(ULD("EMPTY", 0.0))
        assert outcome.deck == "main" and outcome.start_index == 0

    def test_respects_constraints(self, four_slot_aircraft):
        engine = _engine(four_slot_aircraft, strategy=PlacementStrategy.CG_BALANCE)
        outcome = engine.place(ULD("A", 100.0, allow_special_slots=False))
        assert outcome.start_index in (1, 2)

    def test_strategy_recorded(self, two_deck_aircraft):
        settings = PlannerSettings(strategy=PlacementStrategy.CG_BALANCE)
        result = plan_load(two_deck_aircraft, [ULD("A", 10.0)], [], settings)
        assert result.strategy == PlacementStrategy.CG_BALANCE
