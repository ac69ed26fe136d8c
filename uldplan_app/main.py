"""
Application entry point for the ULD load planner.

Run from the project root with:

    python -m uldplan_app.main                       # interactive
    python -m uldplan_app.main --model B767-300F --manifest ulds.csv --xlsx plan.xlsx
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from uldplan_app.config.settings import ArmRange, MomentScheme, PlacementStrategy, Settings, init_logging
from uldplan_app.models import ULD
from uldplan_app.reports import (
    build_assignment_lines,
    build_load_plan_lines,
    build_summary_lines,
    export_load_plan_to_excel,
    export_load_plan_to_pdf,
)
from uldplan_app.repositories import AircraftRepository, ULDTypeRepository
from uldplan_app.services.file_service import save_load_plan
from uldplan_app.services.input_validation import PlannerInputError
from uldplan_app.services.manifest_import import ManifestImportError, import_manifest
from uldplan_app.services.placement_service import plan_load
from uldplan_app.services.slot_builder import finalize_aircraft
from uldplan_app.views.console_prompts import ConsolePrompter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uldplan",
        description="Greedy ULD load planner: assigns ULDs to aircraft deck slots and prints a bay diagram.",
    )
    parser.add_argument("--aircraft-db", type=Path, help="Aircraft catalog JSON (default: bundled aircraft_db.json)")
    parser.add_argument("--uld-db", type=Path, help="ULD type catalog JSON (default: bundled ulddb.json)")
    parser.add_argument("--model", help="Aircraft model from the catalog (prompted when omitted)")
    parser.add_argument("--manifest", type=Path, help="CSV/XLSX ULD manifest (prompted when omitted)")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in PlacementStrategy],
        default=PlacementStrategy.FIRST_FIT.value,
        help="Run selection policy (default: first-fit)",
    )
    parser.add_argument(
        "--moment",
        choices=[m.value for m in MomentScheme],
        default=MomentScheme.DISTRIBUTED.value,
        help="Moment accumulation scheme (default: distributed)",
    )
    parser.add_argument("--main-arms", nargs=2, type=float, metavar=("FORE", "AFT"),
                        help="Main deck fore/aft arms for slots without catalog arms")
    parser.add_argument("--lower-arms", nargs=2, type=float, metavar=("FORE", "AFT"),
                        help="Lower deck fore/aft arms for slots without catalog arms")
    parser.add_argument("--output", type=Path, help="Text load plan file (default: ./loadplan.txt)")
    parser.add_argument("--xlsx", type=Path, help="Also export the load plan to this Excel file")
    parser.add_argument("--pdf", type=Path, help="Also export the load plan to this PDF file")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours in the console diagram")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _apply_args(settings: Settings, args: argparse.Namespace) -> None:
    if args.aircraft_db:
        settings.aircraft_db_path = args.aircraft_db
    if args.uld_db:
        settings.uld_db_path = args.uld_db
    if args.output:
        settings.load_plan_path = args.output
    planner = settings.planner
    planner.strategy = PlacementStrategy(args.strategy)
    planner.moment_scheme = MomentScheme(args.moment)
    if args.main_arms:
        planner.main_arms = ArmRange(*args.main_arms)
    if args.lower_arms:
        planner.lower_arms = ArmRange(*args.lower_arms)
    planner.use_colour = not args.no_color and sys.stdout.isatty()


def _load_ulds(args: argparse.Namespace, prompter: ConsolePrompter) -> List[ULD]:
    if args.manifest is None:
        return prompter.ask_ulds()
    manifest = import_manifest(args.manifest)
    for issue in manifest.issues:
        print(f"Warning: manifest row {issue.row} skipped: {issue.message}")
    return manifest.ulds


def main(argv: Sequence[str] | None = None) -> int:
    """Run one planning session; returns the process exit status."""
    args = build_parser().parse_args(argv)

    settings = Settings.default()
    _apply_args(settings, args)
    init_logging(settings, logging.DEBUG if args.verbose else logging.INFO)

    print("=== Manual ULD Load Planner ===")
    uld_types = ULDTypeRepository.from_file(settings.uld_db_path)
    aircraft_repo = AircraftRepository.from_file(settings.aircraft_db_path)
    for msg in uld_types.warnings + aircraft_repo.warnings:
        print(f"Warning: {msg}")

    prompter = ConsolePrompter()
    try:
        if args.model:
            aircraft = aircraft_repo.get(args.model)
            if aircraft is None:
                raise PlannerInputError(f"Aircraft model {args.model!r} is not in the catalog.")
        else:
            aircraft = prompter.ask_aircraft(aircraft_repo)
        ulds = _load_ulds(args, prompter)
    except (PlannerInputError, ManifestImportError) as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}")
        return 2
    except (EOFError, KeyboardInterrupt):
        print("\nInput aborted.")
        return 1

    planner = settings.planner
    aircraft = finalize_aircraft(aircraft, planner)
    result = plan_load(aircraft, ulds, uld_types, planner)

    for line in build_assignment_lines(result):
        print(line)
    print()
    for line in build_summary_lines(aircraft, result):
        print(line)

    palette = planner.palette if planner.use_colour else None
    for line in build_load_plan_lines(aircraft, result, uld_types, planner.cell_width, palette):
        print(line)

    plain_lines = build_load_plan_lines(aircraft, result, uld_types, planner.cell_width)
    if save_load_plan(settings.load_plan_path, plain_lines):
        print(f"Load plan saved to {settings.load_plan_path}")
    else:
        print("Failed to save load plan.")

    if args.xlsx:
        try:
            export_load_plan_to_excel(args.xlsx, aircraft, result, uld_types)
            print(f"Excel report saved to {args.xlsx}")
        except OSError as exc:
            logger.warning("Excel export to %s failed: %s", args.xlsx, exc)
            print(f"Failed to save Excel report: {exc}")
    if args.pdf:
        try:
            export_load_plan_to_pdf(args.pdf, aircraft, result, plain_lines)
            print(f"PDF report saved to {args.pdf}")
        except OSError as exc:
            logger.warning("PDF export to %s failed: %s", args.pdf, exc)
            print(f"Failed to save PDF report: {exc}")

    print("\nDone.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
