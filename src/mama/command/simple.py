# SPDX-License-Identifier: MIT

from typing import Optional

from mama.command.command import Command, CommandResult
from mama.model.entry_list import EntryList
from mama.repository.storage import Storage

HELP_MESSAGE = "\n".join(
    [
        "Here are the commands you can use:",
        "  milk VOLUME                             record pumped breast milk (ml)",
        "  weight KG                               record your weight",
        "  workout NAME /dur MINUTES /feel 1-5     record a workout",
        "  meal NAME /cal CALORIES                 record a meal",
        "  measure waist/CM hips/CM [chest/CM] [thigh/CM] [arm/CM]",
        "                                          record body measurements",
        "  list [/t TYPE]                          show entries, optionally one type",
        "  delete INDEX                            delete an entry from the shown list",
        "  help                                    show this message",
        "  bye                                     save and exit",
    ]
)


class HelpCommand(Command):
    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        return CommandResult(HELP_MESSAGE)


class ExitCommand(Command):
    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        return CommandResult("Bye. Hope to see you again soon!", should_exit=True)


class InvalidCommand(Command):
    """
    Stands in for input that couldn't be parsed.

    Executing it reports the problem and leaves the journal untouched.
    """

    def __init__(self, message: str) -> None:
        self.message = message

    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        return CommandResult(self.message)
