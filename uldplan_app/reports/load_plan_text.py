"""
Text reports for a load plan: assignment table, load summary and ASCII bay diagrams.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence

from uldplan_app.config.defaults import ANSI_RESET, CELL_WIDTH, DECK_LOWER, DECK_MAIN, MAX_SLOTS_PER_ROW
from uldplan_app.models import Aircraft, DeckGeometry, PlacementResult, Slot, SlotZone, ULDTypeEntry
from uldplan_app.services.width_resolver import resolve_type_code

NOSE_MARKER = "  N  "
TAIL_MARKER = "  T  "


def _fmt_weight(value: float) -> str:
    return format(value, ".10g")


def build_assignment_lines(result: PlacementResult) -> List[str]:
    lines: List[str] = []
    lines.append("")
    lines.append("=== Assignment Results ===")
    lines.append(f"{'ULD ID':<12}{'Assigned Slot':<22}{'Weight(kg)':<10}")
    lines.append("-" * 46)
    for outcome in result.outcomes:
        lines.append(f"{outcome.uld.id:<12}{outcome.slot_label:<22}{_fmt_weight(outcome.uld.weight):<10}")
    return lines


def build_summary_lines(aircraft: Aircraft, result: PlacementResult) -> List[str]:
    lines: List[str] = []
    lines.append(f"Aircraft: {aircraft.model}")
    lines.append(f"Strategy: {result.strategy.value} (moment: {result.moment_scheme.value})")
    lines.append(f"ULDs placed: {len(result.placed)} / {len(result.outcomes)}")
    lines.append(f"Total weight: {result.total_weight:.1f} kg (MTW {aircraft.mtw} kg)")
    for deck in (DECK_MAIN, DECK_LOWER):
        if deck in result.deck_weights:
            lines.append(f"  {deck} deck: {result.deck_weights[deck]:.1f} kg")
    lines.append(f"Total moment: {result.total_moment:.1f}")
    lines.append(f"CG arm: {result.cg_arm:.3f}")
    if result.unassigned:
        lines.append("Unassigned: " + ", ".join(o.uld.id for o in result.unassigned))
    return lines


def group_rows(slots: Sequence[Slot], max_per_row: int = MAX_SLOTS_PER_ROW) -> List[List[Slot]]:
    """First and last slot alone; interior slots grouped by up to max_per_row."""
    n = len(slots)
    if n == 0:
        return []
    rows: List[List[Slot]] = [[slots[0]]]
    idx = 1
    while idx < n - 1:
        size = min(max_per_row, n - 1 - idx)
        rows.append(list(slots[idx:idx + size]))
        idx += size
    if idx < n:
        rows.append([slots[-1]])
    return rows


def merge_cells(row: Sequence[Slot]) -> List[List[Slot]]:
    """Adjacent slots filled by the same placement form one cell; repeated IDs stay separate."""
    cells: List[List[Slot]] = []
    for slot in row:
        prev = cells[-1][-1] if cells else None
        if (
            prev is not None
            and slot.occupied
            and prev.occupant_id == slot.occupant_id
            and prev.placement_no == slot.placement_no
        ):
            cells[-1].append(slot)
        else:
            cells.append([slot])
    return cells


def _id_text(cell: List[Slot], catalog: Sequence[ULDTypeEntry]) -> tuple[str, str]:
    """Return (text, type code) for the ID line of a cell."""
    first = cell[0]
    if first.occupied:
        code = resolve_type_code(first.occupant_id, catalog)
        text = first.occupant_id + (f"[{code}]" if code else "")
        return text, code
    if first.zone == SlotZone.NOSE:
        return NOSE_MARKER, ""
    if first.zone == SlotZone.TAIL:
        return TAIL_MARKER, ""
    return "", ""


def _slot_number_text(cell: List[Slot]) -> str:
    if len(cell) == 1:
        return f"#{cell[0].index + 1}"
    return f"#{cell[0].index + 1}-{cell[-1].index + 1}"


def _weight_text(cell: List[Slot]) -> str:
    if not cell[0].occupied:
        return ""
    if len(cell) == 1:
        return str(int(cell[0].allocated_weight))
    return str(int(round(sum(s.allocated_weight for s in cell), 6)))


def render_deck(
    label: str,
    geometry: DeckGeometry,
    slots: Sequence[Slot],
    catalog: Iterable[ULDTypeEntry] = (),
    cell_width: int = CELL_WIDTH,
    palette: Mapping[str, str] | None = None,
) -> List[str]:
    """
    Render one deck as rows of boxed cells, centered in row_length cells.

    Each cell shows the occupant ID with its catalog type (or the nose/tail
    marker when empty), the 1-based slot number and the integer allocated weight.
    """
    catalog = list(catalog)
    lines: List[str] = ["", f"=== {label} Deck Load Plan (slots={len(slots)}) ==="]
    if not slots:
        return lines

    inner = cell_width - 2
    for row in group_rows(slots):
        total_width = cell_width * len(row)
        pad = " " * max(0, (geometry.row_length * cell_width - total_width) // 2)
        cells = merge_cells(row)
        widths = [len(c) * inner + (len(c) - 1) for c in cells]

        border = pad + "".join("+" + "-" * w for w in widths) + "+"

        id_parts: List[str] = []
        for cell, w in zip(cells, widths):
            text, code = _id_text(cell, catalog)
            text = text[:w].ljust(w)
            if palette and code in palette:
                text = palette[code] + text + ANSI_RESET
            id_parts.append("|" + text)

        num_parts = ["|" + _slot_number_text(c)[:w].ljust(w) for c, w in zip(cells, widths)]
        weight_parts = ["|" + _weight_text(c)[:w].ljust(w) for c, w in zip(cells, widths)]

        lines.append(border)
        lines.append(pad + "".join(id_parts) + "|")
        lines.append(pad + "".join(num_parts) + "|")
        lines.append(pad + "".join(weight_parts) + "|")
        lines.append(border)
    return lines


def build_load_plan_lines(
    aircraft: Aircraft,
    result: PlacementResult,
    catalog: Iterable[ULDTypeEntry] = (),
    cell_width: int = CELL_WIDTH,
    palette: Mapping[str, str] | None = None,
) -> List[str]:
    """Diagrams for the main deck then the lower deck."""
    catalog = list(catalog)
    lines = render_deck(
        "Main", aircraft.main_deck, result.slots_for_deck(DECK_MAIN), catalog, cell_width, palette
    )
    lines += render_deck(
        "Lower", aircraft.lower_deck, result.slots_for_deck(DECK_LOWER), catalog, cell_width, palette
    )
    return lines
