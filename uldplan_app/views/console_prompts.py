"""
Interactive console input for the load planner.

Every prompt loops until the validation function accepts the answer. Input and
output callables are injectable so the prompts can be driven from tests.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from uldplan_app.models import Aircraft, DeckGeometry, ULD
from uldplan_app.repositories import AircraftRepository
from uldplan_app.services.input_validation import (
    ParseResult,
    parse_deck_restriction,
    parse_count,
    parse_special_permission,
    parse_uld_id,
    parse_weight,
)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class ConsolePrompter:
    """Prompt/re-prompt loops over an input function (input() by default)."""

    def __init__(self, input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
        self._input = input_fn
        self._output = output_fn

    def ask(self, message: str) -> str:
        return self._input(message)

    def ask_until_valid(self, message: str, parse: Callable[[str], ParseResult]) -> object:
        while True:
            res = parse(self._input(message))
            if res.ok:
                return res.value
            self._output(res.error)

    def ask_aircraft(self, repo: AircraftRepository) -> Aircraft:
        """Pick a catalog aircraft by model name, or describe a custom one."""
        models = repo.list_models()
        if models:
            self._output("Aircraft in DB:")
            for model in models:
                self._output(f" - {model}")

        model = self.ask("Enter aircraft model: ").strip()
        aircraft: Optional[Aircraft] = repo.get(model) if model else None
        if aircraft is not None:
            self._output(f"Using DB entry for {model}")
            return aircraft

        self._output("Custom aircraft")
        main_slots = self.ask_until_valid("Main deck slots: ", parse_count)
        lower_slots = self.ask_until_valid("Lower deck slots: ", parse_count)
        return Aircraft(
            model=model or "CUSTOM",
            main_deck=DeckGeometry(slots=main_slots),
            lower_deck=DeckGeometry(slots=lower_slots),
        )

    def ask_uld(self, number: int) -> ULD:
        uld_id = self.ask_until_valid(f"ULD #{number} ID: ", parse_uld_id)
        weight = self.ask_until_valid(f"ULD {uld_id} weight (kg): ", parse_weight)
        deck = parse_deck_restriction(self.ask("ULD type (MAIN / LOWER / ANY): "))
        special = parse_special_permission(self.ask("Allow nose/tail? (y/n): "))
        return ULD(id=uld_id, weight=weight, deck=deck, allow_special_slots=special)

    def ask_ulds(self) -> List[ULD]:
        count = self.ask_until_valid("Number of ULDs: ", parse_count)
        return [self.ask_uld(i + 1) for i in range(count)]
