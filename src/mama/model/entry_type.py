# SPDX-License-Identifier: MIT


class EntryType:
    MILK = "MILK"
    WEIGHT = "WEIGHT"
    WORKOUT = "WORKOUT"
    MEAL = "MEAL"
    MEASUREMENT = "MEASUREMENT"


ALL_ENTRY_TYPES = [
    EntryType.MILK,
    EntryType.WEIGHT,
    EntryType.WORKOUT,
    EntryType.MEAL,
    EntryType.MEASUREMENT,
]
