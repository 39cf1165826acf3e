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
from mama.model.measurement import (
    MEASUREMENT_FIELDS,
    MeasurementEntry,
    validate_measurements,
)
from mama.repository.storage import Storage

logger = logging.getLogger(__name__)


class AddMeasurementCommand(Command):
    MESSAGE_USAGE = (
        "Usage: measure waist/<cm> hips/<cm> [chest/<cm>] [thigh/<cm>] [arm/<cm>]"
    )

    def __init__(
        self,
        waist: Optional[int],
        hips: Optional[int],
        chest: Optional[int] = None,
        thigh: Optional[int] = None,
        arm: Optional[int] = None,
    ) -> None:
        self.values: dict[str, Optional[int]] = {
            "waist": waist,
            "hips": hips,
            "chest": chest,
            "thigh": thigh,
            "arm": arm,
        }
        try:
            validate_measurements(self.values)
        except EntryValidationError as e:
            raise CommandError(f"{e}\n{self.MESSAGE_USAGE}") from e

    @classmethod
    def from_input(cls, arguments: str) -> Self:
        """Build the command from tokens like 'waist/70 hips/95 arm/30'."""
        tokens = arguments.split()
        if tokens == ["?"]:
            raise CommandError(cls.MESSAGE_USAGE)

        values: dict[str, int] = {}
        for token in tokens:
            field, separator, value = token.lower().partition("/")
            if not separator or field not in MEASUREMENT_FIELDS:
                raise CommandError(f"Unknown field: {token}\n{cls.MESSAGE_USAGE}")
            values[field] = parse_whole_number(
                value, f"Invalid number format for: {token}"
            )
        return cls(
            values.get("waist"),
            values.get("hips"),
            chest=values.get("chest"),
            thigh=values.get("thigh"),
            arm=values.get("arm"),
        )

    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        logger.info("Executing AddMeasurementCommand.")

        new_measurement = MeasurementEntry(
            self.values["waist"],
            self.values["hips"],
            chest=self.values["chest"],
            thigh=self.values["thigh"],
            arm=self.values["arm"],
        )
        entry_list.add(new_measurement)
        persist(entry_list, storage)

        return CommandResult(f"Added measurement: {new_measurement.to_list_line()}")
