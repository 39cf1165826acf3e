# SPDX-License-Identifier: MIT

import logging
import re
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
from mama.model.meal import MealEntry, validate_meal
from mama.repository.storage import Storage

logger = logging.getLogger(__name__)

_ARGUMENTS_RE = re.compile(r"^(?P<meal>.+?)\s+/cal\s+(?P<calories>\S+)$")


class AddMealCommand(Command):
    MESSAGE_USAGE = (
        "Usage: meal NAME /cal CALORIES\n"
        "Records a meal, e.g. 'meal chicken rice /cal 550'."
    )

    def __init__(self, meal: str, calories: int) -> None:
        try:
            self.meal = validate_meal(meal, calories)
        except EntryValidationError as e:
            raise CommandError(str(e)) from e
        self.calories = calories

    @classmethod
    def from_input(cls, arguments: str) -> Self:
        match = _ARGUMENTS_RE.match(arguments.strip())
        if match is None:
            raise CommandError(f"Invalid meal format.\n{cls.MESSAGE_USAGE}")
        calories = parse_whole_number(
            match.group("calories"), "Calories must be a whole number."
        )
        return cls(match.group("meal"), calories)

    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        logger.info("Executing AddMealCommand.")

        new_meal = MealEntry(self.meal, self.calories)
        entry_list.add(new_meal)
        persist(entry_list, storage)

        return CommandResult(f"Got it. I've added this meal:\n  {new_meal.to_list_line()}")
