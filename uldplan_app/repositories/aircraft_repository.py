from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from uldplan_app.config.defaults import DEFAULT_ROW_LENGTH
from uldplan_app.models import Aircraft, DeckGeometry
from uldplan_app.repositories.catalog_source import as_float, as_int, as_str, read_catalog


def _deck_from_record(raw: Any) -> DeckGeometry:
    if not isinstance(raw, dict):
        return DeckGeometry()
    arms: List[float] = []
    raw_arms = raw.get("slotArms")
    if isinstance(raw_arms, list):
        arms = [as_float(v) for v in raw_arms]
    return DeckGeometry(
        slots=max(0, as_int(raw.get("slots"), 0)),
        row_length=as_int(raw.get("rowLength"), DEFAULT_ROW_LENGTH),
        nose_slots=max(0, as_int(raw.get("noseSlots"), 0)),
        tail_slots=max(0, as_int(raw.get("tailSlots"), 0)),
        slot_arms=arms,
    )


class AircraftRepository:
    """Read-only aircraft catalog keyed by model name."""

    def __init__(self, aircraft: Dict[str, Aircraft] | None = None, warnings: List[str] | None = None) -> None:
        self._aircraft: Dict[str, Aircraft] = dict(aircraft or {})
        self.warnings: List[str] = list(warnings or [])

    @classmethod
    def from_file(cls, path: Path) -> "AircraftRepository":
        """Load aircraft_db.json. Records without a model name are ignored; later duplicates win."""
        catalog = read_catalog(path)
        aircraft: Dict[str, Aircraft] = {}
        for entry in catalog.records:
            ac = Aircraft(
                model=as_str(entry.get("model")).strip(),
                mtw=as_int(entry.get("mtw"), 0),
                main_deck=_deck_from_record(entry.get("mainDeck")),
                lower_deck=_deck_from_record(entry.get("lowerDeck")),
            )
            if ac.model:
                aircraft[ac.model] = ac
        return cls(aircraft, catalog.warnings)

    def list_models(self) -> List[str]:
        return sorted(self._aircraft)

    def get(self, model: str) -> Optional[Aircraft]:
        return self._aircraft.get(model)

    def __len__(self) -> int:
        return len(self._aircraft)
