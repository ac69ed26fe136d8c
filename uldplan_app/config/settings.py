"""
Basic settings and logging configuration for the ULD load planner.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping

from uldplan_app.config.defaults import (
    CELL_WIDTH,
    DATA_DIR_NAME,
    DEFAULT_AIRCRAFT_DB,
    DEFAULT_LOAD_PLAN_FILE,
    DEFAULT_ULD_DB,
    LOWER_DECK_AFT_ARM,
    LOWER_DECK_FORE_ARM,
    MAIN_DECK_AFT_ARM,
    MAIN_DECK_FORE_ARM,
    ULD_TYPE_COLOURS,
)


class PlacementStrategy(Enum):
    """How a run is chosen among the valid contiguous runs for a ULD."""

    FIRST_FIT = "first-fit"
    CG_BALANCE = "cg-balance"


class MomentScheme(Enum):
    """How a placed ULD contributes to the cumulative moment."""

    DISTRIBUTED = "distributed"  # weight/w on each occupied slot's own arm
    START_SLOT = "start-slot"  # full weight on the start slot's arm


@dataclass(frozen=True, slots=True)
class ArmRange:
    """Fore and aft arms used to synthesize per-slot arms for a deck."""

    fore: float
    aft: float


@dataclass(slots=True)
class PlannerSettings:
    """Planning options injected into the slot builder, engine and renderer."""

    main_arms: ArmRange = field(default_factory=lambda: ArmRange(MAIN_DECK_FORE_ARM, MAIN_DECK_AFT_ARM))
    lower_arms: ArmRange = field(default_factory=lambda: ArmRange(LOWER_DECK_FORE_ARM, LOWER_DECK_AFT_ARM))
    strategy: PlacementStrategy = PlacementStrategy.FIRST_FIT
    moment_scheme: MomentScheme = MomentScheme.DISTRIBUTED
    cell_width: int = CELL_WIDTH
    use_colour: bool = True
    palette: Mapping[str, str] = field(default_factory=lambda: ULD_TYPE_COLOURS)


def _get_resource_root() -> Path:

    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parents[2]


def _ensure_data_dir(resource_root: Path) -> Path:
    """Data dir beside the resources, or under the working directory when that location is not writable."""
    preferred = resource_root / DATA_DIR_NAME
    try:
        preferred.mkdir(exist_ok=True)
    except OSError:
        writable = False
    else:
        writable = os.access(preferred, os.W_OK)
    if writable:
        return preferred

    fallback = Path.cwd() / DATA_DIR_NAME
    fallback.mkdir(exist_ok=True)
    return fallback


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    aircraft_db_path: Path
    uld_db_path: Path
    load_plan_path: Path
    planner: PlannerSettings = field(default_factory=PlannerSettings)

    @classmethod
    def default(cls) -> "Settings":
        """Create default settings; catalogs come bundled with the package."""
        resource_root = _get_resource_root()
        bundled = Path(__file__).resolve().parents[1] / "data"
        data_dir = _ensure_data_dir(resource_root)

        return cls(
            project_root=resource_root,
            data_dir=data_dir,
            aircraft_db_path=bundled / DEFAULT_AIRCRAFT_DB,
            uld_db_path=bundled / DEFAULT_ULD_DB,
            load_plan_path=Path.cwd() / DEFAULT_LOAD_PLAN_FILE,
        )


def init_logging(settings: Settings, level: int = logging.INFO) -> None:
    """Configure basic logging to the planner log file."""
    log_file = settings.data_dir / "uldplan.log"

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info(
        "Logging initialized. Aircraft DB at %s, ULD DB at %s",
        settings.aircraft_db_path,
        settings.uld_db_path,
    )
