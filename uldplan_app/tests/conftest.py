"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from uldplan_app.config.settings import PlannerSettings
from uldplan_app.models import Aircraft, DeckGeometry, ULDTypeEntry


@pytest.fixture
def four_slot_aircraft():
    """Main deck of 4 slots with one nose and one tail slot; no lower deck."""
    return Aircraft(
        model="TEST4",
        main_deck=DeckGeometry(slots=4, nose_slots=1, tail_slots=1, slot_arms=[10.0, 20.0, 30.0, 40.0]),
        lower_deck=DeckGeometry(slots=0),
    )


@pytest.fixture
def two_deck_aircraft():
    """Main deck of 6 slots and lower deck of 4 slots, explicit arms, no special zones."""
    return Aircraft(
        model="TWODECK",
        mtw=100000,
        main_deck=DeckGeometry(slots=6, slot_arms=[10.0, 14.0, 18.0, 22.0, 26.0, 30.0]),
        lower_deck=DeckGeometry(slots=4, slot_arms=[12.0, 16.0, 20.0, 24.0]),
    )


@pytest.fixture
def sample_catalog():
    """Ordered ULD type catalog; AKH is listed before the broader LD3 entries."""
    return [
        ULDTypeEntry(prefix="AKH", uld_type="LD3-45", width_slots=1, deck="Lower"),
        ULDTypeEntry(prefix="AKE", uld_type="LD3", width_slots=1, deck="Lower"),
        ULDTypeEntry(prefix="ALF", uld_type="LD6", width_slots=2, deck="Lower"),
        ULDTypeEntry(prefix="PGA", uld_type="M6", width_slots=2, deck="Main"),
        ULDTypeEntry(prefix="PMC", uld_type="M1", width_slots=1, deck="Any"),
    ]


@pytest.fixture
def planner_settings():
    return PlannerSettings(use_colour=False)


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON payload into tmp_path and return the file path."""

    def _write(name: str, payload) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
