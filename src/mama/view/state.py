"""Display state for the current invocation, held in context variables."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for controlling the banner printed when the journal opens
# Default is True (show header)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Context variable for controlling coloured output
# Default is True (use color)
_use_color_var: ContextVar[bool] = ContextVar("use_color", default=True)


def set_show_header(value: bool) -> None:
    """Set whether the banner should be displayed.

    Args:
        value: True to show the banner, False to hide it
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_use_color(value: bool) -> None:
    """Set whether output should be coloured.

    Args:
        value: True for coloured output, False for plain text
    """
    _use_color_var.set(value)


def get_use_color() -> bool:
    return _use_color_var.get()
