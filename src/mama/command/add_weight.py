# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Self

from mama.command.command import Command, CommandError, CommandResult, persist
from mama.model.entry_list import EntryList
from mama.model.error import EntryValidationError
from mama.model.weight import WEIGHT_UNIT, WeightEntry, round_weight_kg
from mama.repository.storage import Storage

logger = logging.getLogger(__name__)

WEIGHT_NUMBER_MESSAGE = (
    "Weight must be a number. Try 'weight' + value of weight, e.g. 'weight 65.5'"
)


def round_to_two_decimal_places(value: float) -> float:
    return float(round_weight_kg(value))


class AddWeightCommand(Command):
    """Records a body weight reading in kg."""

    def __init__(self, weight_kg: float) -> None:
        try:
            weight_kg = round_to_two_decimal_places(weight_kg)
        except EntryValidationError as e:
            raise CommandError(WEIGHT_NUMBER_MESSAGE) from e
        if weight_kg <= 0:
            raise CommandError("Weight must be greater than 0!")
        self.weight_kg = weight_kg

    @classmethod
    def from_input(cls, arguments: str) -> Self:
        """Build the command from the text after 'weight', e.g. '65.5' or '65.5kg'."""
        text = arguments.strip().lower().removesuffix(WEIGHT_UNIT).strip()
        try:
            weight_kg = float(text)
        except ValueError as e:
            raise CommandError(WEIGHT_NUMBER_MESSAGE) from e
        return cls(weight_kg)

    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        logger.info("Executing AddWeightCommand.")

        new_weight = WeightEntry(self.weight_kg)
        entry_list.add(new_weight)
        persist(entry_list, storage)

        return CommandResult(f"Added new weight entry: {new_weight.to_list_line()}")
