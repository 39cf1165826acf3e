# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import typer
from rich.console import Console

from mama import configuration
from mama.command.command import CommandError
from mama.model.entry_list import EntryList
from mama.repository.storage import Storage, StorageError
from mama.terminal.parse import parse_command
from mama.view.console import get_console
from mama.view.feedback import show_error, show_result
from mama.view.header import header

logger = logging.getLogger(__name__)

GREETING = "Hello! I'm Mama, your maternal health journal.\nType 'help' to see all commands."
PROMPT = "> "


def shell() -> None:
    """
    Open the interactive journal.
    """
    console = get_console()
    storage = Storage(configuration.DATA_ENTRIES_PATH)
    try:
        entry_list = storage.load()
    except StorageError as e:
        show_error(console, e.args[0])
        raise typer.Exit(1)

    header(console, f"{entry_list.size()} entries in {storage.path}")
    run_loop(console, entry_list, storage)


def run_loop(
    console: Console, entry_list: EntryList, storage: Optional[Storage]
) -> None:
    """
    Read, run and report one command at a time until 'bye' or end of input.

    A failed command is reported and the loop carries on with the next line.
    """
    console.print(GREETING, markup=False, highlight=False)
    while True:
        try:
            line = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not line.strip():
            continue

        command = parse_command(line)
        try:
            result = command.execute(entry_list, storage)
        except CommandError as e:
            show_error(console, e.message)
            continue

        show_result(console, result)
        if result.should_exit:
            break

    logger.info("Session ended with %d entries", entry_list.size())
