# SPDX-License-Identifier: MIT

import re
from typing import Optional, Self, Union

import pendulum

from mama.model.entry import Entry, parse_clamped_int
from mama.model.entry_type import EntryType
from mama.model.error import EntryValidationError

MAX_MILK_VOLUME_ML = 1000
MILK_UNIT = "ml"

_VOLUME_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_volume_ml(volume: Union[int, str]) -> int:
    """
    Read a volume given either as a number or as text with an optional "ml" suffix.

    Raises:
        EntryValidationError: If the value is not a whole number
    """
    if isinstance(volume, int):
        return volume
    text = volume.strip().lower().removesuffix(MILK_UNIT).strip()
    if _VOLUME_RE.fullmatch(text) is None:
        raise EntryValidationError(f"Invalid milk volume: '{volume}'")
    return parse_clamped_int(text)


def validate_volume_ml(volume_ml: int) -> int:
    if volume_ml <= 0:
        raise EntryValidationError("Milk volume must be a positive number!")
    if volume_ml > MAX_MILK_VOLUME_ML:
        raise EntryValidationError(
            "Milk volume too large! Please enter a realistic value "
            f"(at most {MAX_MILK_VOLUME_ML} ml)."
        )
    return volume_ml


def format_total_milk(total_ml: int) -> str:
    return f"Total breast milk pumped: {total_ml}{MILK_UNIT}"


class MilkEntry(Entry):
    """A breast milk pumping session."""

    entry_type = EntryType.MILK

    def __init__(
        self,
        volume: Union[int, str],
        timestamp: Optional[pendulum.DateTime] = None,
    ) -> None:
        volume_ml = validate_volume_ml(parse_volume_ml(volume))
        super().__init__(f"{volume_ml}{MILK_UNIT}", timestamp)
        self._volume_ml = volume_ml

    @property
    def volume_ml(self) -> int:
        return self._volume_ml

    @classmethod
    def from_storage(cls, line: str) -> Self:
        volume, timestamp = cls.split_storage_line(line)
        return cls(volume, cls.parse_storage_timestamp(line, timestamp))
