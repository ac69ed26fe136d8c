"""
PDF report generation for a load plan.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import (
    Paragraph,
    Preformatted,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from uldplan_app.models import Aircraft, PlacementResult, UNASSIGNED_LABEL


def _fmt(value: object, fmt: str) -> str:
    """Safely format numeric values for PDF tables."""
    if value is None:
        return ""
    try:
        return format(float(value), fmt)
    except (TypeError, ValueError):
        return str(value)


def _section_title(text: str, styles) -> Paragraph:
    return Paragraph(f"<b>{text}</b>", styles["Heading3"])


_TABLE_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), "#4472C4"),
    ("TEXTCOLOR", (0, 0), (-1, 0), "white"),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 10),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
    ("BACKGROUND", (0, 1), (-1, -1), "#F5F5F5"),
    ("GRID", (0, 0), (-1, -1), 0.4, "#BBBBBB"),
    ("FONTSIZE", (0, 0), (-1, -1), 9),
    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ("LEFTPADDING", (0, 0), (-1, -1), 6),
    ("RIGHTPADDING", (0, 0), (-1, -1), 6),
    ("TOPPADDING", (0, 0), (-1, -1), 3),
    ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
]


def export_load_plan_to_pdf(
    filepath: Path,
    aircraft: Aircraft,
    result: PlacementResult,
    diagram_lines: Sequence[str],
) -> None:
    """
    Generate a PDF load plan: summary, assignment table and the bay diagrams.

    diagram_lines must be plain text (no ANSI colour codes).
    """
    doc = SimpleDocTemplate(
        str(filepath),
        pagesize=A4,
        leftMargin=1.5 * cm,
        rightMargin=1.5 * cm,
        topMargin=1.5 * cm,
        bottomMargin=1.5 * cm,
        title=f"Load Plan - {aircraft.model}",
    )
    styles = getSampleStyleSheet()
    story: list = []

    story.append(Paragraph(f"ULD Load Plan - {aircraft.model}", styles["Title"]))
    story.append(
        Paragraph(
            f"Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}",
            styles["Normal"],
        )
    )
    story.append(Spacer(1, 0.5 * cm))

    # --- Section 1: summary ---
    story.append(_section_title("Load Summary", styles))
    summary_rows = [
        ["Parameter", "Value"],
        ["MTW (kg)", str(aircraft.mtw)],
        ["Strategy", result.strategy.value],
        ["Moment scheme", result.moment_scheme.value],
        ["ULDs placed", f"{len(result.placed)} / {len(result.outcomes)}"],
        ["Total weight (kg)", _fmt(result.total_weight, ".1f")],
        ["Total moment", _fmt(result.total_moment, ".1f")],
        ["CG arm", _fmt(result.cg_arm, ".3f")],
    ]
    summary_table = Table(summary_rows, colWidths=[8 * cm, 6 * cm])
    summary_table.setStyle(TableStyle(_TABLE_STYLE + [("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold")]))
    story.append(summary_table)
    story.append(Spacer(1, 0.5 * cm))

    # --- Section 2: assignments ---
    story.append(_section_title("Assignment Results", styles))
    assign_rows = [["ULD ID", "Assigned Slot", "Weight (kg)"]]
    for outcome in result.outcomes:
        assign_rows.append([outcome.uld.id, outcome.slot_label, _fmt(outcome.uld.weight, ".1f")])
    assign_style = list(_TABLE_STYLE)
    for i in range(1, len(assign_rows)):
        colour = "#FFC7CE" if assign_rows[i][1] == UNASSIGNED_LABEL else "#C6EFCE"
        assign_style.append(("BACKGROUND", (1, i), (1, i), colour))
    assign_table = Table(assign_rows, colWidths=[5 * cm, 5 * cm, 4 * cm], repeatRows=1)
    assign_table.setStyle(TableStyle(assign_style))
    story.append(assign_table)
    story.append(Spacer(1, 0.5 * cm))

    # --- Section 3: bay diagrams ---
    story.append(_section_title("Bay Diagram", styles))
    mono = ParagraphStyle("Diagram", parent=styles["Code"], fontName="Courier", fontSize=6, leading=7)
    story.append(Preformatted("\n".join(diagram_lines), mono))

    doc.build(story)
