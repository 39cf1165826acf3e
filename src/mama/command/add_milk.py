# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Self

from mama.command.command import (
    Command,
    CommandError,
    CommandResult,
    parse_whole_number,
    persist,
)
from mama.model.entry_list import EntryList
from mama.model.error import EntryValidationError
from mama.model.milk import MILK_UNIT, MilkEntry, format_total_milk, validate_volume_ml
from mama.repository.storage import Storage

logger = logging.getLogger(__name__)


class AddMilkCommand(Command):
    """Records a pumping session and reports the running milk total."""

    MESSAGE_USAGE = "Usage: milk VOLUME\nRecords pumped breast milk in ml, e.g. 'milk 150'."

    def __init__(self, milk_volume: int) -> None:
        try:
            self.milk_volume = validate_volume_ml(milk_volume)
        except EntryValidationError as e:
            raise CommandError(str(e)) from e

    @classmethod
    def from_input(cls, arguments: str) -> Self:
        """Build the command from the text after 'milk', e.g. '150' or '150ml'."""
        text = arguments.strip().lower()
        if not text:
            raise CommandError(
                "Please specify the milk volume in ml. Example: 'milk 120'"
            )
        milk_volume = parse_whole_number(
            text.removesuffix(MILK_UNIT),
            "Volume must be an actual number! Example: 'milk 150'",
        )
        return cls(milk_volume)

    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        logger.info("Executing AddMilkCommand.")

        new_milk = MilkEntry(self.milk_volume)
        entry_list.add(new_milk)
        persist(entry_list, storage)

        logger.info("AddMilkCommand added %d%s", self.milk_volume, MILK_UNIT)
        return CommandResult(
            f"Breast Milk Pumped: {new_milk.to_list_line()}\n"
            f"{format_total_milk(entry_list.total_milk_ml)}"
        )
