# SPDX-License-Identifier: MIT

from rich.console import Console

from mama.view.state import get_use_color


def get_console() -> Console:
    """Console honouring the current colour setting."""
    return Console(no_color=not get_use_color(), highlight=False)
