# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import typer

from mama.model.entry_dispatch import entry_type_from_name

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_entry_type(entry_type: Optional[str]) -> Optional[str]:
    if entry_type is None:
        return None
    try:
        return entry_type_from_name(entry_type)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    level = log_level.upper()
    if level not in LOG_LEVELS or not isinstance(logging.getLevelName(level), int):
        raise typer.BadParameter(
            f"Log level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
        )
    return level
