# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from mama import configuration
from mama.model.entry import Entry
from mama.repository.storage import Storage
from mama.terminal.validate import validate_entry_type
from mama.view.console import get_console
from mama.view.entries import entries_view


def list_entries(
    entry_type: Annotated[
        Optional[str],
        typer.Option(
            "--type",
            "-t",
            help="valid inputs: milk, weight, workout, meal, measurement",
            callback=validate_entry_type,
        ),
    ] = None,
    no_wrap: Annotated[
        bool, typer.Option("--no-wrap", "-nw", help="Truncate long columns")
    ] = False,
) -> None:
    """
    Show the journal's entries as a table.
    """
    entry_list = Storage(configuration.DATA_ENTRIES_PATH).load()

    if entry_type is not None:

        def matches_type(entry: Entry) -> bool:
            return entry.entry_type == entry_type

        entry_list.set_filter(matches_type, entry_type.lower())

    entries_view(
        get_console(),
        list(entry_list.shown_snapshot()),
        entry_list.total_milk_ml,
        no_wrap=no_wrap,
    )
