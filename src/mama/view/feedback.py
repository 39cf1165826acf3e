# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.padding import Padding
from rich.text import Text

from mama.command.command import CommandResult

# Messages contain entry lines like "[MILK] 150ml", so they are printed as
# plain Text and never parsed as rich markup.


def show_result(console: Console, result: CommandResult) -> None:
    console.print(Padding(Text(result.feedback), (0, 1)))


def show_error(console: Console, message: str) -> None:
    console.print(Padding(Text(message, style="bold red"), (0, 1)))
