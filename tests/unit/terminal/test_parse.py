import pytest

from mama.command.add_meal import AddMealCommand
from mama.command.add_measurement import AddMeasurementCommand
from mama.command.add_milk import AddMilkCommand
from mama.command.add_weight import AddWeightCommand
from mama.command.add_workout import AddWorkoutCommand
from mama.command.delete import DeleteCommand
from mama.command.list_entries import ListCommand
from mama.command.simple import ExitCommand, HelpCommand, InvalidCommand
from mama.terminal.parse import UNKNOWN_COMMAND_MESSAGE, parse_command


@pytest.mark.parametrize(
    "text, expected_class",
    [
        ("bye", ExitCommand),
        ("  BYE  ", ExitCommand),
        ("help", HelpCommand),
        ("list", ListCommand),
        ("list /t milk", ListCommand),
        ("delete 1", DeleteCommand),
        ("milk 150", AddMilkCommand),
        ("Milk 150ML", AddMilkCommand),
        ("weight 65.5", AddWeightCommand),
        ("workout run /dur 30 /feel 4", AddWorkoutCommand),
        ("meal soup /cal 200", AddMealCommand),
        ("measure waist/70 hips/95", AddMeasurementCommand),
    ],
)
def test_keywords_map_to_commands(text, expected_class):
    assert isinstance(parse_command(text), expected_class)


def test_arguments_are_passed_on():
    command = parse_command("delete   3")
    assert isinstance(command, DeleteCommand)
    assert command.index_one_based == 3


@pytest.mark.parametrize("text", ["", "dance", "milky 150", "deletes 1"])
def test_unknown_input(text):
    command = parse_command(text)
    assert isinstance(command, InvalidCommand)
    assert command.message == UNKNOWN_COMMAND_MESSAGE


def test_separator_is_rejected_anywhere():
    command = parse_command("meal rice|beans /cal 300")
    assert isinstance(command, InvalidCommand)
    assert command.message == "Invalid command arguments! No | allowed!"


def test_syntax_errors_become_invalid_commands():
    command = parse_command("delete abc")
    assert isinstance(command, InvalidCommand)
    assert command.message.startswith("Index must be a positive whole number.")


def test_invalid_command_leaves_list_untouched(mixed_list):
    result = parse_command("milk 0").execute(mixed_list)
    assert result.feedback == "Milk volume must be a positive number!"
    assert mixed_list.size() == 4


def test_parsed_command_runs(mixed_list):
    result = parse_command("list /t weight").execute(mixed_list)
    assert result.feedback == "Here are your entries:\n1. [WEIGHT] 60.00kg"


@pytest.mark.parametrize(
    "text, message",
    [
        ("milk " + "9" * 5000, "Milk volume too large!"),
        ("delete " + "9" * 5000, "Index is too large."),
        ("workout run /dur " + "9" * 5000 + " /feel 3", "Workout duration must be between"),
        ("meal soup /cal " + "9" * 5000, "Calories must be between"),
    ],
)
def test_thousands_of_digits_fail_cleanly(text, message):
    command = parse_command(text)
    assert isinstance(command, InvalidCommand)
    assert command.message.startswith(message)
