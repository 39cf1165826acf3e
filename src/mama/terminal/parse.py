# SPDX-License-Identifier: MIT

import logging

from mama.command.add_meal import AddMealCommand
from mama.command.add_measurement import AddMeasurementCommand
from mama.command.add_milk import AddMilkCommand
from mama.command.add_weight import AddWeightCommand
from mama.command.add_workout import AddWorkoutCommand
from mama.command.command import Command, CommandError
from mama.command.delete import DeleteCommand
from mama.command.list_entries import ListCommand
from mama.command.simple import ExitCommand, HelpCommand, InvalidCommand
from mama.model.entry import STORAGE_SEPARATOR

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_MESSAGE = "Unknown command. Type 'help' to see all commands."


def parse_command(text: str) -> Command:
    """
    Turn one line of user input into the command it asks for.

    Input that can't be parsed comes back as an InvalidCommand carrying the
    message to show, so the caller always gets something to execute.

    Args:
        text: Raw input line, e.g. "milk 150" or "delete 2"

    Returns:
        The matching command, or an InvalidCommand
    """
    lower = text.strip().lower()
    if STORAGE_SEPARATOR in lower:
        return InvalidCommand(
            f"Invalid command arguments! No {STORAGE_SEPARATOR} allowed!"
        )

    parts = lower.split(maxsplit=1)
    keyword = parts[0] if parts else ""
    arguments = parts[1] if len(parts) > 1 else ""
    try:
        match keyword:
            case "bye":
                return ExitCommand()
            case "help":
                return HelpCommand()
            case "list":
                return ListCommand.from_input(arguments)
            case "delete":
                return DeleteCommand.from_input(arguments)
            case "milk":
                return AddMilkCommand.from_input(arguments)
            case "weight":
                return AddWeightCommand.from_input(arguments)
            case "workout":
                return AddWorkoutCommand.from_input(arguments)
            case "meal":
                return AddMealCommand.from_input(arguments)
            case "measure":
                return AddMeasurementCommand.from_input(arguments)
    except CommandError as e:
        logger.info("Rejected input %r: %s", lower, e.message)
        return InvalidCommand(e.message)

    return InvalidCommand(UNKNOWN_COMMAND_MESSAGE)
