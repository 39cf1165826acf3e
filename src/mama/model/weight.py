# SPDX-License-Identifier: MIT

import logging
import sys
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Self, Union

from mama.model.entry import Entry
from mama.model.entry_type import EntryType
from mama.model.error import EntryValidationError

logger = logging.getLogger(__name__)

WEIGHT_UNIT = "kg"
TWO_DECIMAL_PLACES = Decimal("0.01")


def round_weight_kg(weight: Union[float, int, str, Decimal]) -> Decimal:
    """
    Round a weight half-up to two decimal places.

    Rounding works on the decimal text of the value, so 65.505 becomes 65.51.
    Values outside the float range are rejected.

    Raises:
        EntryValidationError: If the value is not a finite number
    """
    text = str(weight).strip().lower().removesuffix(WEIGHT_UNIT).strip()
    try:
        value = Decimal(text)
        if not value.is_finite() or value.adjusted() > sys.float_info.max_10_exp:
            raise InvalidOperation(text)
        with localcontext() as context:
            # room for every integer digit plus the two decimals
            context.prec = max(context.prec, value.adjusted() + 3)
            rounded = value.quantize(TWO_DECIMAL_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise EntryValidationError(f"Invalid weight: '{weight}'") from e
    # avoid rendering -0.00
    return rounded if rounded != 0 else Decimal("0.00")


class WeightEntry(Entry):
    """A body weight reading. Weight readings carry no timestamp."""

    entry_type = EntryType.WEIGHT
    has_timestamp = False

    def __init__(self, weight_kg: Union[float, int, str, Decimal]) -> None:
        rounded = round_weight_kg(weight_kg)
        if rounded < 0:
            raise EntryValidationError("Weight cannot be negative!")
        super().__init__(f"{rounded}{WEIGHT_UNIT}")
        self._weight_kg = float(rounded)

    @property
    def weight_kg(self) -> float:
        return self._weight_kg

    @classmethod
    def from_storage(cls, line: str) -> Self:
        """
        Rebuild a weight entry from a journal file line.

        An unreadable weight value doesn't fail the whole load: the entry
        falls back to 0.00kg and a warning is logged.
        """
        (weight,) = cls.split_storage_line(line)
        try:
            return cls(weight)
        except EntryValidationError:
            logger.warning("Invalid weight: %s, defaulting to 0.00kg", weight)
            return cls(0)
