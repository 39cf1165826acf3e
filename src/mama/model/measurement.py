# SPDX-License-Identifier: MIT

import re
from typing import Optional, Self

import pendulum

from mama.model.entry import Entry, parse_clamped_int
from mama.model.entry_type import EntryType
from mama.model.error import EntryValidationError, MalformedEntryError

MAX_MEASUREMENT_CM = 300

# Display order of the body measurements
MEASUREMENT_FIELDS = ["waist", "hips", "chest", "thigh", "arm"]
REQUIRED_MEASUREMENT_FIELDS = ["waist", "hips"]

_FIELD_RE = re.compile(r"^(?P<field>[a-z]+)=(?P<value>\d+)cm$")


def validate_measurements(values: dict[str, Optional[int]]) -> None:
    """Check the recorded measurements, keyed by field name (missing = None)."""
    for field in REQUIRED_MEASUREMENT_FIELDS:
        if values.get(field) is None:
            raise EntryValidationError(f"The {field} measurement is required!")
    for field, value in values.items():
        if field not in MEASUREMENT_FIELDS:
            raise EntryValidationError(f"Unknown measurement: {field}")
        if value is not None and not (0 < value <= MAX_MEASUREMENT_CM):
            raise EntryValidationError(
                f"The {field} measurement must be between 1 and {MAX_MEASUREMENT_CM} cm!"
            )


class MeasurementEntry(Entry):
    """Body measurements in centimetres; waist and hips are always recorded."""

    entry_type = EntryType.MEASUREMENT

    def __init__(
        self,
        waist: Optional[int],
        hips: Optional[int],
        chest: Optional[int] = None,
        thigh: Optional[int] = None,
        arm: Optional[int] = None,
        timestamp: Optional[pendulum.DateTime] = None,
    ) -> None:
        values = {
            "waist": waist,
            "hips": hips,
            "chest": chest,
            "thigh": thigh,
            "arm": arm,
        }
        validate_measurements(values)

        description = ", ".join(
            f"{field}={values[field]}cm"
            for field in MEASUREMENT_FIELDS
            if values[field] is not None
        )
        super().__init__(description, timestamp)
        self._values = values

    def get(self, field: str) -> Optional[int]:
        return self._values[field]

    @property
    def waist(self) -> int:
        return self._values["waist"]  # type: ignore[return-value]

    @property
    def hips(self) -> int:
        return self._values["hips"]  # type: ignore[return-value]

    @classmethod
    def from_storage(cls, line: str) -> Self:
        description, timestamp = cls.split_storage_line(line)
        values: dict[str, int] = {}
        for part in description.split(", "):
            match = _FIELD_RE.match(part)
            if match is None or match.group("field") not in MEASUREMENT_FIELDS:
                raise MalformedEntryError(f"Invalid MEASUREMENT entry line: {line}")
            values[match.group("field")] = parse_clamped_int(match.group("value"))
        return cls(
            values.get("waist"),
            values.get("hips"),
            chest=values.get("chest"),
            thigh=values.get("thigh"),
            arm=values.get("arm"),
            timestamp=cls.parse_storage_timestamp(line, timestamp),
        )
