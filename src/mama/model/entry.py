# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Self

import pendulum

from mama.model.error import EntryValidationError, MalformedEntryError
from mama.time import (
    datetime_from_storage_str,
    datetime_to_storage_str,
    now_local_minute,
)

STORAGE_SEPARATOR = "|"


class Entry(ABC):
    """
    A single journal record.

    Entries are immutable once built: the description is formatted for
    display at construction time and only read afterwards. Two entries are
    the same entry only when they are the same object, so identical
    readings taken twice stay distinct in the list.
    """

    entry_type: ClassVar[str]
    has_timestamp: ClassVar[bool] = True

    def __init__(
        self, description: str, timestamp: Optional[pendulum.DateTime] = None
    ) -> None:
        if self.has_timestamp:
            self._timestamp: Optional[pendulum.DateTime] = (
                timestamp if timestamp is not None else now_local_minute()
            )
        else:
            self._timestamp = None
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    @property
    def timestamp(self) -> Optional[pendulum.DateTime]:
        return self._timestamp

    def timestamp_str(self) -> Optional[str]:
        if self._timestamp is None:
            return None
        return datetime_to_storage_str(self._timestamp)

    def to_list_line(self) -> str:
        """Render the entry the way the user sees it, e.g. [MILK] 150ml (28/10/25 01:14)."""
        line = f"[{self.entry_type}] {self.description}"
        timestamp = self.timestamp_str()
        if timestamp is not None:
            line += f" ({timestamp})"
        return line

    def to_storage_string(self) -> str:
        """Render the entry as one journal file line, e.g. MILK|150ml|28/10/25 01:14."""
        fields = [self.entry_type, self.description]
        timestamp = self.timestamp_str()
        if timestamp is not None:
            fields.append(timestamp)
        return STORAGE_SEPARATOR.join(fields)

    @classmethod
    @abstractmethod
    def from_storage(cls, line: str) -> Self: ...

    @classmethod
    def split_storage_line(cls, line: str) -> list[str]:
        """
        Split a journal file line and check it belongs to this entry type.

        Returns:
            The fields after the type tag: [payload] or [payload, timestamp]

        Raises:
            MalformedEntryError: If the field count or type tag is wrong
        """
        parts = line.strip().split(STORAGE_SEPARATOR)
        expected_field_count = 3 if cls.has_timestamp else 2
        if len(parts) != expected_field_count or parts[0] != cls.entry_type:
            raise MalformedEntryError(f"Invalid {cls.entry_type} entry line: {line}")
        return parts[1:]

    @classmethod
    def parse_storage_timestamp(cls, line: str, value: str) -> pendulum.DateTime:
        try:
            return datetime_from_storage_str(value)
        except ValueError as e:
            raise MalformedEntryError(
                f"Invalid timestamp in {cls.entry_type} entry line: {line}"
            ) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_storage_string()!r})"


def ensure_storable_text(label: str, value: str) -> str:
    """Strip a free-text field and make sure it can't break a journal line."""
    text = value.strip()
    if not text:
        raise EntryValidationError(f"{label} cannot be empty!")
    if STORAGE_SEPARATOR in text:
        raise EntryValidationError(f"{label} cannot contain '{STORAGE_SEPARATOR}'!")
    return text


MAX_NUMBER_DIGITS = 18


def parse_clamped_int(text: str) -> int:
    """
    Convert a string of digits with an optional sign to an int.

    Numbers with more than MAX_NUMBER_DIGITS significant digits come back
    as +/- 10**MAX_NUMBER_DIGITS, which every range check in the journal
    rejects with its usual message.

    Raises:
        ValueError: If the text is not a whole number
    """
    text = text.strip()
    sign = -1 if text.startswith("-") else 1
    unsigned = text[1:] if text[:1] in ("+", "-") else text
    if not unsigned.isascii() or not unsigned.isdigit():
        raise ValueError(f"Invalid whole number: '{text}'")
    digits = unsigned.lstrip("0")
    if len(digits) > MAX_NUMBER_DIGITS:
        return sign * 10**MAX_NUMBER_DIGITS
    return sign * int(digits or "0")
