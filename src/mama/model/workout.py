# SPDX-License-Identifier: MIT

import re
from typing import Optional, Self

import pendulum

from mama.model.entry import Entry, ensure_storable_text, parse_clamped_int
from mama.model.entry_type import EntryType
from mama.model.error import EntryValidationError, MalformedEntryError

MAX_WORKOUT_MINUTES = 24 * 60
MIN_FEEL = 1
MAX_FEEL = 5

_DESCRIPTION_RE = re.compile(
    r"^(?P<name>.+) \((?P<minutes>\d+) mins, feel (?P<feel>\d+)/5\)$"
)


def validate_workout(name: str, minutes: int, feel: int) -> str:
    """
    Check a workout's fields.

    Returns:
        The stripped workout name

    Raises:
        EntryValidationError: If any field is out of range
    """
    name = ensure_storable_text("Workout name", name)
    if not (0 < minutes <= MAX_WORKOUT_MINUTES):
        raise EntryValidationError(
            f"Workout duration must be between 1 and {MAX_WORKOUT_MINUTES} minutes!"
        )
    if not (MIN_FEEL <= feel <= MAX_FEEL):
        raise EntryValidationError(
            f"Feel rating must be between {MIN_FEEL} and {MAX_FEEL}!"
        )
    return name


class WorkoutEntry(Entry):
    """A workout with its duration and how it felt (1-5)."""

    entry_type = EntryType.WORKOUT

    def __init__(
        self,
        name: str,
        minutes: int,
        feel: int,
        timestamp: Optional[pendulum.DateTime] = None,
    ) -> None:
        name = validate_workout(name, minutes, feel)
        super().__init__(f"{name} ({minutes} mins, feel {feel}/5)", timestamp)
        self._name = name
        self._minutes = minutes
        self._feel = feel

    @property
    def name(self) -> str:
        return self._name

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def feel(self) -> int:
        return self._feel

    @classmethod
    def from_storage(cls, line: str) -> Self:
        description, timestamp = cls.split_storage_line(line)
        match = _DESCRIPTION_RE.match(description)
        if match is None:
            raise MalformedEntryError(f"Invalid WORKOUT entry line: {line}")
        return cls(
            match.group("name"),
            parse_clamped_int(match.group("minutes")),
            parse_clamped_int(match.group("feel")),
            cls.parse_storage_timestamp(line, timestamp),
        )
