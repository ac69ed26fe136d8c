"""
Repository for the container-type (ULD prefix) catalog.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Sequence

from uldplan_app.models import ULDTypeEntry
from uldplan_app.repositories.catalog_source import as_int, as_str, read_catalog


class ULDTypeRepository:
    """Ordered, read-only ULD type catalog. Order decides prefix-match precedence."""

    def __init__(self, entries: Sequence[ULDTypeEntry] | None = None, warnings: List[str] | None = None) -> None:
        self._entries: tuple[ULDTypeEntry, ...] = tuple(entries or ())
        self.warnings: List[str] = list(warnings or [])

    @classmethod
    def from_file(cls, path: Path) -> "ULDTypeRepository":
        catalog = read_catalog(path)
        entries = [cls._to_model(entry) for entry in catalog.records]
        return cls(entries, catalog.warnings)

    def list_all(self) -> List[ULDTypeEntry]:
        return list(self._entries)

    def __iter__(self) -> Iterator[ULDTypeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def _to_model(entry: dict) -> ULDTypeEntry:
        return ULDTypeEntry(
            prefix=as_str(entry.get("Prefix")),
            uld_type=as_str(entry.get("ULD Type")),
            width_slots=as_int(entry.get("Width (slots)"), 1),
            deck=as_str(entry.get("Deck"), "Any"),
            notes=as_str(entry.get("Notes")),
        )
