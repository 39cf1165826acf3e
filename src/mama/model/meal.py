# SPDX-License-Identifier: MIT

import re
from typing import Optional, Self

import pendulum

from mama.model.entry import Entry, ensure_storable_text, parse_clamped_int
from mama.model.entry_type import EntryType
from mama.model.error import EntryValidationError, MalformedEntryError

MAX_MEAL_CALORIES = 10000

_DESCRIPTION_RE = re.compile(r"^(?P<meal>.+) \((?P<calories>\d+)kcal\)$")


def validate_meal(meal: str, calories: int) -> str:
    meal = ensure_storable_text("Meal", meal)
    if not (0 <= calories <= MAX_MEAL_CALORIES):
        raise EntryValidationError(
            f"Calories must be between 0 and {MAX_MEAL_CALORIES}!"
        )
    return meal


class MealEntry(Entry):
    """A meal and its calories."""

    entry_type = EntryType.MEAL

    def __init__(
        self,
        meal: str,
        calories: int,
        timestamp: Optional[pendulum.DateTime] = None,
    ) -> None:
        meal = validate_meal(meal, calories)
        super().__init__(f"{meal} ({calories}kcal)", timestamp)
        self._meal = meal
        self._calories = calories

    @property
    def meal(self) -> str:
        return self._meal

    @property
    def calories(self) -> int:
        return self._calories

    @classmethod
    def from_storage(cls, line: str) -> Self:
        description, timestamp = cls.split_storage_line(line)
        match = _DESCRIPTION_RE.match(description)
        if match is None:
            raise MalformedEntryError(f"Invalid MEAL entry line: {line}")
        return cls(
            match.group("meal"),
            parse_clamped_int(match.group("calories")),
            cls.parse_storage_timestamp(line, timestamp),
        )
