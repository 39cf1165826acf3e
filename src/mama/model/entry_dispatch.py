# SPDX-License-Identifier: MIT

from mama.model.entry import STORAGE_SEPARATOR, Entry
from mama.model.entry_type import ALL_ENTRY_TYPES, EntryType
from mama.model.error import MalformedEntryError
from mama.model.meal import MealEntry
from mama.model.measurement import MeasurementEntry
from mama.model.milk import MilkEntry
from mama.model.weight import WeightEntry
from mama.model.workout import WorkoutEntry


def entry_from_storage(line: str) -> Entry:
    """Rebuild an entry from a journal file line, chosen by its leading type tag."""
    match line.strip().split(STORAGE_SEPARATOR, 1)[0]:
        case EntryType.MILK:
            return MilkEntry.from_storage(line)
        case EntryType.WEIGHT:
            return WeightEntry.from_storage(line)
        case EntryType.WORKOUT:
            return WorkoutEntry.from_storage(line)
        case EntryType.MEAL:
            return MealEntry.from_storage(line)
        case EntryType.MEASUREMENT:
            return MeasurementEntry.from_storage(line)
    raise MalformedEntryError(f"Unknown entry type in line: {line}")


def entry_type_from_name(name: str) -> str:
    """Resolve a user-typed entry type name (milk, Weight, ...) to its tag."""
    entry_type = name.strip().upper()
    if entry_type not in ALL_ENTRY_TYPES:
        raise ValueError(
            f"Unknown entry type '{name}'. "
            f"Valid types: {', '.join(t.lower() for t in ALL_ENTRY_TYPES)}"
        )
    return entry_type
