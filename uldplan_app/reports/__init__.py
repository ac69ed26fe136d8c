"""
Reporting utilities (text/Excel/PDF) for the ULD load planner.
"""

from uldplan_app.reports.load_plan_text import (
    build_assignment_lines,
    build_load_plan_lines,
    build_summary_lines,
    render_deck,
)
from uldplan_app.reports.excel_report import export_load_plan_to_excel
from uldplan_app.reports.pdf_report import export_load_plan_to_pdf

__all__ = [
    "build_assignment_lines",
    "build_load_plan_lines",
    "build_summary_lines",
    "render_deck",
    "export_load_plan_to_excel",
    "export_load_plan_to_pdf",
]
