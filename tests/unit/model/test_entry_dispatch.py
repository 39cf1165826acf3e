import pytest

from mama.model.entry_dispatch import entry_from_storage, entry_type_from_name
from mama.model.entry_type import EntryType
from mama.model.error import MalformedEntryError
from mama.model.meal import MealEntry
from mama.model.measurement import MeasurementEntry
from mama.model.milk import MilkEntry
from mama.model.weight import WeightEntry
from mama.model.workout import WorkoutEntry


@pytest.mark.parametrize(
    "line, expected_class",
    [
        ("MILK|150ml|28/10/25 01:14", MilkEntry),
        ("WEIGHT|65.50kg", WeightEntry),
        ("WORKOUT|Run (30 mins, feel 4/5)|28/10/25 01:14", WorkoutEntry),
        ("MEAL|soup (200kcal)|28/10/25 01:14", MealEntry),
        ("MEASUREMENT|waist=70cm, hips=95cm|28/10/25 01:14", MeasurementEntry),
    ],
)
def test_dispatches_on_type_tag(line, expected_class):
    entry = entry_from_storage(line)
    assert isinstance(entry, expected_class)
    assert entry.to_storage_string() == line


def test_unknown_tag_is_rejected():
    with pytest.raises(MalformedEntryError, match="Unknown entry type"):
        entry_from_storage("SLEEP|8h|28/10/25 01:14")


def test_entry_type_names_are_case_insensitive():
    assert entry_type_from_name("milk") == EntryType.MILK
    assert entry_type_from_name(" Measurement ") == EntryType.MEASUREMENT


def test_unknown_entry_type_name_lists_valid_types():
    with pytest.raises(ValueError, match="milk, weight, workout, meal, measurement"):
        entry_type_from_name("sleep")
