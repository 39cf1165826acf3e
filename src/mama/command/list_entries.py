# SPDX-License-Identifier: MIT

from typing import Optional, Self

from mama.command.command import Command, CommandError, CommandResult
from mama.model.entry import Entry
from mama.model.entry_dispatch import entry_type_from_name
from mama.model.entry_list import EntryList
from mama.model.entry_type import EntryType
from mama.model.milk import format_total_milk
from mama.repository.storage import Storage


class ListCommand(Command):
    """Shows the journal, optionally narrowed to one entry type."""

    MESSAGE_USAGE = (
        "Usage: list [/t TYPE]\n"
        "Shows all entries, or only entries of TYPE (milk, weight, workout, meal, measurement)."
    )

    def __init__(self, entry_type: Optional[str] = None) -> None:
        self.entry_type = entry_type

    @classmethod
    def from_input(cls, arguments: str) -> Self:
        tokens = arguments.split()
        if not tokens:
            return cls()
        if len(tokens) != 2 or tokens[0] != "/t":
            raise CommandError(f"Invalid list format.\n{cls.MESSAGE_USAGE}")
        try:
            return cls(entry_type_from_name(tokens[1]))
        except ValueError as e:
            raise CommandError(f"{e}\n{cls.MESSAGE_USAGE}") from e

    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        if self.entry_type is None:
            entry_list.clear_filter()
        else:
            entry_type = self.entry_type

            def matches_type(entry: Entry) -> bool:
                return entry.entry_type == entry_type

            entry_list.set_filter(matches_type, entry_type.lower())

        entries = entry_list.shown_snapshot()
        if not entries:
            return CommandResult("No entries found.")

        lines = ["Here are your entries:"]
        lines += [f"{i}. {entry.to_list_line()}" for i, entry in enumerate(entries, start=1)]
        if self.entry_type == EntryType.MILK:
            lines.append(format_total_milk(entry_list.total_milk_ml))
        return CommandResult("\n".join(lines))
