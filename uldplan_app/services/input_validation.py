"""
Validation of planner input tokens (ULD id, weight, deck, nose/tail permission).

Parsers return a ParseResult instead of raising so that interactive prompts can
re-ask and batch import can report the offending row.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from uldplan_app.models import DeckRestriction

T = TypeVar("T")

_YES_TOKENS = frozenset({"y", "yes"})


@dataclass(slots=True)
class PlannerInputError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(slots=True)
class ParseResult(Generic[T]):
    ok: bool
    value: T | None = None
    error: str = ""

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult[T]":
        return cls(ok=False, error=error)


def parse_uld_id(text: Any) -> ParseResult[str]:
    uld_id = "" if text is None else str(text).strip()
    if not uld_id:
        return ParseResult.failure("ULD ID must not be empty.")
    return ParseResult.success(uld_id)


def parse_number(text: Any) -> ParseResult[float]:
    try:
        value = float(str(text).strip())
    except (TypeError, ValueError):
        return ParseResult.failure("Enter a number.")
    if not math.isfinite(value):
        return ParseResult.failure("Enter a finite number.")
    return ParseResult.success(value)


def parse_weight(text: Any) -> ParseResult[float]:
    """Non-negative weight in kg."""
    res = parse_number(text)
    if not res.ok:
        return res
    if res.value < 0:
        return ParseResult.failure("Weight must not be negative.")
    return res


def parse_count(text: Any) -> ParseResult[int]:
    """Non-negative whole number (slot counts, number of ULDs)."""
    raw = "" if text is None else str(text).strip()
    try:
        value = int(raw)
    except ValueError:
        return ParseResult.failure("Enter a whole number.")
    if value < 0:
        return ParseResult.failure("Value must not be negative.")
    return ParseResult.success(value)


def parse_deck_restriction(text: Any) -> DeckRestriction:
    """MAIN / LOWER (any case); anything else means ANY."""
    token = "" if text is None else str(text).strip().upper()
    if token == DeckRestriction.MAIN.value:
        return DeckRestriction.MAIN
    if token == DeckRestriction.LOWER.value:
        return DeckRestriction.LOWER
    return DeckRestriction.ANY


def parse_special_permission(text: Any) -> bool:
    """y / yes (any case) allow nose/tail slots; anything else denies."""
    if isinstance(text, bool):
        return text
    token = "" if text is None else str(text).strip().lower()
    return token in _YES_TOKENS
