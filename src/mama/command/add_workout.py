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
from mama.model.workout import WorkoutEntry, validate_workout
from mama.repository.storage import Storage

logger = logging.getLogger(__name__)

_ARGUMENTS_RE = re.compile(
    r"^(?P<name>.+?)\s+/dur\s+(?P<minutes>\S+)\s+/feel\s+(?P<feel>\S+)$"
)


class AddWorkoutCommand(Command):
    MESSAGE_USAGE = (
        "Usage: workout NAME /dur MINUTES /feel 1-5\n"
        "Records a workout, e.g. 'workout yoga /dur 30 /feel 4'."
    )

    def __init__(self, name: str, minutes: int, feel: int) -> None:
        try:
            self.name = validate_workout(name, minutes, feel)
        except EntryValidationError as e:
            raise CommandError(str(e)) from e
        self.minutes = minutes
        self.feel = feel

    @classmethod
    def from_input(cls, arguments: str) -> Self:
        match = _ARGUMENTS_RE.match(arguments.strip())
        if match is None:
            raise CommandError(f"Invalid workout format.\n{cls.MESSAGE_USAGE}")
        minutes = parse_whole_number(
            match.group("minutes"), "Workout duration must be a whole number of minutes."
        )
        feel = parse_whole_number(
            match.group("feel"), "Feel rating must be a whole number from 1 to 5."
        )
        return cls(match.group("name"), minutes, feel)

    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        logger.info("Executing AddWorkoutCommand.")

        new_workout = WorkoutEntry(self.name, self.minutes, self.feel)
        entry_list.add(new_workout)
        persist(entry_list, storage)

        return CommandResult(f"Got it. I've logged this workout:\n  {new_workout.to_list_line()}")
