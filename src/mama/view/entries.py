# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from mama.model.entry import Entry
from mama.model.entry_type import EntryType
from mama.model.milk import format_total_milk
from mama.view.header import header

ENTRY_TYPE_COLORS = {
    EntryType.MILK: "bright_cyan",
    EntryType.WEIGHT: "gold",
    EntryType.WORKOUT: "spring_green",
    EntryType.MEAL: "orange",
    EntryType.MEASUREMENT: "magenta",
}


def entries_view(
    console: Console,
    entries: list[Entry],
    total_milk_ml: int,
    columns: list[str] = ["index", "type", "description", "timestamp"],
    no_wrap: bool = False,
) -> None:
    """Display a numbered table of entries followed by the milk total."""
    header(console, "entries")

    entries_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap and column not in ("index",):
            entries_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            entries_table.add_column(column)

    for index, entry in enumerate(entries, start=1):
        color = ENTRY_TYPE_COLORS.get(entry.entry_type, "")
        row = []
        for column in columns:
            column_value = ""
            if column == "index":
                column_value = str(index)
            elif column == "type":
                column_value = entry.entry_type.lower()
            elif column == "description":
                column_value = entry.description
            elif column == "timestamp":
                column_value = entry.timestamp_str() or ""
            row.append(Text(column_value, style=color))
        entries_table.add_row(*row)

    console.print(entries_table)
    console.print(Text(format_total_milk(total_milk_ml)))
