"""
Default planning constants.

Arm pairs are the fore/aft moment arms used when an aircraft catalog entry does
not provide one arm per slot. They are defaults only; Settings carries the
values actually used for a run.
"""

from __future__ import annotations

from types import MappingProxyType

# Generic fore/aft arms for arm synthesis without a deck-specific pair
DEFAULT_FORE_ARM = 10.0
DEFAULT_AFT_ARM = 40.0

# Main deck arm range (fore, aft)
MAIN_DECK_FORE_ARM = 18.0
MAIN_DECK_AFT_ARM = 36.0

# Lower deck arm range (fore, aft)
LOWER_DECK_FORE_ARM = 12.0
LOWER_DECK_AFT_ARM = 28.0

# Deck row layout width (in cells) when the catalog omits rowLength
DEFAULT_ROW_LENGTH = 8

# Slot width when no catalog prefix matches
DEFAULT_ULD_WIDTH = 1

# Bay diagram cell width, borders included
CELL_WIDTH = 11

# Interior diagram rows hold at most this many slots
MAX_SLOTS_PER_ROW = 3

DECK_MAIN = "main"
DECK_LOWER = "lower"

DEFAULT_AIRCRAFT_DB = "aircraft_db.json"
DEFAULT_ULD_DB = "ulddb.json"
DEFAULT_LOAD_PLAN_FILE = "loadplan.txt"

# Log and scratch directory, beside the resources or in the working directory
DATA_DIR_NAME = "uldplan_app_data"

ANSI_RESET = "\033[0m"
_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_BLUE = "\033[34m"
_MAGENTA = "\033[35m"
_CYAN = "\033[36m"
_BOLD = "\033[1m"

# ULD type code -> ANSI style for console diagrams
ULD_TYPE_COLOURS = MappingProxyType(
    {
        "LD1": _BLUE,
        "LD2": _CYAN,
        "LD3": _GREEN,
        "LD3-45": _GREEN,
        "LD4": _MAGENTA,
        "LD6": _YELLOW,
        "LD7": _RED,
        "LD8": _BOLD + _CYAN,
        "LD9": _BOLD + _GREEN,
        "LD11": _BOLD + _RED,
        "LD26": _BOLD + _MAGENTA,
        "LD39": _BOLD + _YELLOW,
        "M1": _CYAN,
        "M1H": _BLUE,
        "M6": _MAGENTA,
    }
)
