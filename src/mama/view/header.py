# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from mama.view.state import get_show_header


def header(console: Console, sub_header: Optional[str] = None) -> None:
    """Print the application banner.

    Args:
        console: Console to print to
        sub_header: Optional line shown under the banner
    """
    if not get_show_header():
        return

    console.print(Padding("[bold plum1]mama[/bold plum1]", (1, 0, 0, 1)))
    console.print(
        Padding("[sandy_brown]your maternal health journal[/sandy_brown]", (0, 1))
    )
    if sub_header is not None:
        console.print(Padding(f"[dark_orange]{sub_header}[/dark_orange]", (0, 1)))
