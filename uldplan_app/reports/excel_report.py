"""
Excel report generation for a load plan.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill

from uldplan_app.config.defaults import DECK_LOWER, DECK_MAIN
from uldplan_app.models import Aircraft, PlacementResult, ULDTypeEntry, UNASSIGNED_LABEL
from uldplan_app.services.width_resolver import resolve_type_code


def _fmt(value: object, fmt: str) -> str:
    """Safely format numeric values, falling back to string/blank."""
    if value is None:
        return ""
    try:
        return format(float(value), fmt)
    except (TypeError, ValueError):
        return str(value)


def _style_header(ws) -> None:
    header_fill = PatternFill(fill_type="solid", fgColor="4472C4")
    header_font = Font(bold=True, color="FFFFFF")
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment


def _style_body_table(ws, *, start_row: int = 2, first_col_bold: bool = True, stripe: bool = True) -> None:
    """Zebra striping, optional bold first column, first column left-aligned and the rest right-aligned."""
    stripe_fill = PatternFill(fill_type="solid", fgColor="F5F5F5")
    for row in ws.iter_rows(min_row=start_row, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
        if first_col_bold and row and row[0].value not in (None, ""):
            row[0].font = Font(bold=True)
        for cell in row:
            if stripe and cell.row % 2 == 0:
                if cell.fill is None or cell.fill.fill_type is None:
                    cell.fill = stripe_fill
            if cell.column == 1:
                cell.alignment = Alignment(horizontal="left", vertical="center", wrap_text=True)
            else:
                cell.alignment = Alignment(horizontal="right", vertical="center", wrap_text=True)


def _summary_frame(aircraft: Aircraft, result: PlacementResult) -> pd.DataFrame:
    data = {
        "Parameter": [
            "Aircraft",
            "MTW (kg)",
            "Strategy",
            "Moment scheme",
            "ULDs placed",
            "ULDs unassigned",
            "Total weight (kg)",
            "Main deck weight (kg)",
            "Lower deck weight (kg)",
            "Total moment",
            "CG arm",
        ],
        "Value": [
            aircraft.model,
            str(aircraft.mtw),
            result.strategy.value,
            result.moment_scheme.value,
            str(len(result.placed)),
            str(len(result.unassigned)),
            _fmt(result.total_weight, ".1f"),
            _fmt(result.deck_weights.get(DECK_MAIN, 0.0), ".1f"),
            _fmt(result.deck_weights.get(DECK_LOWER, 0.0), ".1f"),
            _fmt(result.total_moment, ".1f"),
            _fmt(result.cg_arm, ".3f"),
        ],
    }
    return pd.DataFrame(data)


def _assignments_frame(result: PlacementResult, catalog: list[ULDTypeEntry]) -> pd.DataFrame:
    rows = []
    for order, outcome in enumerate(result.outcomes, start=1):
        rows.append(
            {
                "Order": order,
                "ULD ID": outcome.uld.id,
                "ULD Type": resolve_type_code(outcome.uld.id, catalog),
                "Width (slots)": outcome.width,
                "Deck restriction": outcome.uld.deck.value,
                "Nose/Tail allowed": "YES" if outcome.uld.allow_special_slots else "NO",
                "Assigned Slot": outcome.slot_label,
                "Weight (kg)": float(f"{outcome.uld.weight:.4f}"),
            }
        )
    return pd.DataFrame(
        rows,
        columns=[
            "Order",
            "ULD ID",
            "ULD Type",
            "Width (slots)",
            "Deck restriction",
            "Nose/Tail allowed",
            "Assigned Slot",
            "Weight (kg)",
        ],
    )


def _slots_frame(result: PlacementResult) -> pd.DataFrame:
    rows = []
    for slot in result.slots:
        rows.append(
            {
                "Slot": slot.label,
                "Zone": slot.zone.name,
                "Arm": float(f"{slot.arm:.4f}"),
                "Occupant": slot.occupant_id,
                "Allocated weight (kg)": float(f"{slot.allocated_weight:.4f}") if slot.occupied else "",
                "Moment": float(f"{slot.allocated_weight * slot.arm:.4f}") if slot.occupied else "",
            }
        )
    return pd.DataFrame(rows, columns=["Slot", "Zone", "Arm", "Occupant", "Allocated weight (kg)", "Moment"])


def export_load_plan_to_excel(
    filepath: Path,
    aircraft: Aircraft,
    result: PlacementResult,
    catalog: Iterable[ULDTypeEntry] = (),
) -> None:
    """
    Write a three-sheet workbook:
    - Load Summary (aircraft, totals, CG arm)
    - Assignments (one row per ULD in input order, unassigned rows highlighted)
    - Slots (one row per slot with arm, occupant and moment)
    """
    catalog = list(catalog)
    df_summary = _summary_frame(aircraft, result)
    df_assign = _assignments_frame(result, catalog)
    df_slots = _slots_frame(result)

    with pd.ExcelWriter(str(filepath), engine="openpyxl") as writer:
        df_summary.to_excel(writer, sheet_name="Load Summary", index=False)
        ws_summary = writer.sheets["Load Summary"]
        ws_summary.column_dimensions["A"].width = 28
        ws_summary.column_dimensions["B"].width = 30
        _style_header(ws_summary)
        _style_body_table(ws_summary, start_row=2, first_col_bold=True, stripe=True)
        ws_summary.freeze_panes = "A2"

        df_assign.to_excel(writer, sheet_name="Assignments", index=False)
        ws_assign = writer.sheets["Assignments"]
        for col, width in zip("ABCDEFGH", (8, 16, 10, 14, 16, 18, 16, 14)):
            ws_assign.column_dimensions[col].width = width
        _style_header(ws_assign)
        _style_body_table(ws_assign, start_row=2, first_col_bold=False, stripe=True)
        ws_assign.freeze_panes = "A2"

        slot_col_idx = list(df_assign.columns).index("Assigned Slot") + 1
        for row_idx in range(2, ws_assign.max_row + 1):
            cell = ws_assign.cell(row=row_idx, column=slot_col_idx)
            if str(cell.value or "").upper() == UNASSIGNED_LABEL:
                cell.fill = PatternFill(fill_type="solid", fgColor="FFC7CE")
            else:
                cell.fill = PatternFill(fill_type="solid", fgColor="C6EFCE")
            cell.alignment = Alignment(horizontal="center", vertical="center")

        df_slots.to_excel(writer, sheet_name="Slots", index=False)
        ws_slots = writer.sheets["Slots"]
        for col, width in zip("ABCDEF", (12, 10, 10, 16, 20, 14)):
            ws_slots.column_dimensions[col].width = width
        _style_header(ws_slots)
        _style_body_table(ws_slots, start_row=2, first_col_bold=True, stripe=True)
        ws_slots.freeze_panes = "A2"
