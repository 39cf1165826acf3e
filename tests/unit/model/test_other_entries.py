import pytest

from mama.model.entry import MAX_NUMBER_DIGITS, parse_clamped_int
from mama.model.error import EntryValidationError, MalformedEntryError
from mama.model.meal import MealEntry
from mama.model.measurement import MeasurementEntry
from mama.model.workout import WorkoutEntry


class TestWorkoutEntry:
    def test_rendering(self, timestamp):
        entry = WorkoutEntry("Swim", 30, 3, timestamp)
        assert entry.to_list_line() == "[WORKOUT] Swim (30 mins, feel 3/5) (28/10/25 01:14)"
        assert entry.to_storage_string() == "WORKOUT|Swim (30 mins, feel 3/5)|28/10/25 01:14"

    def test_round_trip_keeps_fields(self, timestamp):
        original = WorkoutEntry("Power walk (hills)", 45, 5, timestamp)
        restored = WorkoutEntry.from_storage(original.to_storage_string())
        assert restored.name == "Power walk (hills)"
        assert restored.minutes == 45
        assert restored.feel == 5
        assert restored.timestamp == original.timestamp

    @pytest.mark.parametrize(
        "name, minutes, feel",
        [("", 30, 3), ("Run", 0, 3), ("Run", 30, 0), ("Run", 30, 6), ("a|b", 30, 3)],
    )
    def test_invalid_fields_fail(self, name, minutes, feel):
        with pytest.raises(EntryValidationError):
            WorkoutEntry(name, minutes, feel)

    def test_unreadable_description_is_rejected(self):
        with pytest.raises(MalformedEntryError):
            WorkoutEntry.from_storage("WORKOUT|Run for a while|28/10/25 01:14")


class TestMealEntry:
    def test_rendering(self, timestamp):
        entry = MealEntry("fried rice", 550, timestamp)
        assert entry.to_list_line() == "[MEAL] fried rice (550kcal) (28/10/25 01:14)"

    def test_round_trip(self, timestamp):
        original = MealEntry("fried rice", 550, timestamp)
        restored = MealEntry.from_storage(original.to_storage_string())
        assert restored.meal == "fried rice"
        assert restored.calories == 550
        assert restored.to_list_line() == original.to_list_line()

    def test_negative_calories_fail(self):
        with pytest.raises(EntryValidationError):
            MealEntry("soup", -10)


class TestMeasurementEntry:
    def test_description_lists_recorded_fields_in_order(self, timestamp):
        entry = MeasurementEntry(70, 95, arm=30, timestamp=timestamp)
        assert entry.description == "waist=70cm, hips=95cm, arm=30cm"
        assert entry.get("chest") is None

    def test_round_trip(self, timestamp):
        original = MeasurementEntry(70, 95, chest=88, thigh=55, arm=30, timestamp=timestamp)
        restored = MeasurementEntry.from_storage(original.to_storage_string())
        assert restored.description == original.description
        assert restored.waist == 70
        assert restored.get("thigh") == 55

    def test_waist_and_hips_are_required(self):
        with pytest.raises(EntryValidationError, match="hips"):
            MeasurementEntry(70, None)

    def test_values_must_be_positive(self):
        with pytest.raises(EntryValidationError, match="chest"):
            MeasurementEntry(70, 95, chest=0)

    def test_unknown_stored_field_is_rejected(self):
        with pytest.raises(MalformedEntryError):
            MeasurementEntry.from_storage(
                "MEASUREMENT|waist=70cm, neck=30cm|28/10/25 01:14"
            )


def test_parse_clamped_int():
    assert parse_clamped_int("42") == 42
    assert parse_clamped_int("-007") == -7
    assert parse_clamped_int("9" * 5000) == 10**MAX_NUMBER_DIGITS
    assert parse_clamped_int("-" + "9" * 5000) == -(10**MAX_NUMBER_DIGITS)
    assert parse_clamped_int("0" * 5000 + "5") == 5


@pytest.mark.parametrize("text", ["", "abc", "+-5", "1.5"])
def test_parse_clamped_int_rejects_non_numbers(text):
    with pytest.raises(ValueError):
        parse_clamped_int(text)
