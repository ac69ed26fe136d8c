"""
Slot model construction: expands deck geometries into ordered slots with arms and zones.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List

from uldplan_app.config.defaults import DECK_LOWER, DECK_MAIN, DEFAULT_AFT_ARM, DEFAULT_FORE_ARM
from uldplan_app.config.settings import ArmRange, PlannerSettings
from uldplan_app.models import Aircraft, DeckGeometry, Slot, SlotZone


def generate_default_arms(n: int, fore_arm: float = DEFAULT_FORE_ARM, aft_arm: float = DEFAULT_AFT_ARM) -> List[float]:
    """
    Linearly interpolate n arms from fore_arm to aft_arm.

    n <= 0 gives an empty list and n == 1 gives the midpoint.
    """
    if n <= 0:
        return []
    if n == 1:
        return [(fore_arm + aft_arm) / 2.0]
    arms: List[float] = []
    for i in range(n):
        t = i / (n - 1)
        arms.append(fore_arm * (1 - t) + aft_arm * t)
    return arms


def classify_zone(index: int, slots: int, nose_slots: int, tail_slots: int) -> SlotZone:
    """Nose takes precedence when the nose and tail ranges overlap on a short deck."""
    if index < nose_slots:
        return SlotZone.NOSE
    if index >= slots - tail_slots:
        return SlotZone.TAIL
    return SlotZone.NORMAL


def finalize_geometry(geometry: DeckGeometry, arm_range: ArmRange) -> DeckGeometry:
    """Return the geometry with one arm per slot, synthesizing arms when the count does not match."""
    if geometry.has_explicit_arms:
        return geometry
    return replace(geometry, slot_arms=generate_default_arms(geometry.slots, arm_range.fore, arm_range.aft))


def build_slots(deck_name: str, geometry: DeckGeometry, arm_range: ArmRange) -> List[Slot]:
    deck = finalize_geometry(geometry, arm_range)
    return [
        Slot(
            deck_name=deck_name,
            index=i,
            arm=deck.slot_arms[i],
            zone=classify_zone(i, deck.slots, deck.nose_slots, deck.tail_slots),
        )
        for i in range(deck.slots)
    ]


def finalize_aircraft(aircraft: Aircraft, settings: PlannerSettings) -> Aircraft:
    """Copy of the aircraft with both decks finalized (arms sized to slot counts)."""
    return replace(
        aircraft,
        main_deck=finalize_geometry(aircraft.main_deck, settings.main_arms),
        lower_deck=finalize_geometry(aircraft.lower_deck, settings.lower_arms),
    )


def build_slot_pool(aircraft: Aircraft, settings: PlannerSettings) -> List[Slot]:
    """Main deck slots followed by lower deck slots, each front to back."""
    return build_slots(DECK_MAIN, aircraft.main_deck, settings.main_arms) + build_slots(
        DECK_LOWER, aircraft.lower_deck, settings.lower_arms
    )
