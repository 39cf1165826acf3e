# SPDX-License-Identifier: MIT

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from mama.model.entry import parse_clamped_int
from mama.model.entry_list import EntryList
from mama.repository.storage import Storage, StorageError

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = (
    "Failed to save updated data to disk. "
    "Please check your file permissions or try again."
)

_WHOLE_NUMBER_RE = re.compile(r"[+-]?\d+", re.ASCII)


class CommandError(Exception):
    """A command could not run; the message is meant for the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SaveFailedError(CommandError):
    """
    The journal file could not be written after a successful change.

    The in-memory change is kept, so the list and the file differ until
    the next successful save.
    """


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    should_exit: bool = False


class Command(ABC):
    @abstractmethod
    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        """
        Run the command against the journal.

        Args:
            entry_list: The journal's entries
            storage: Where to persist changes; None runs without saving

        Raises:
            CommandError: If the command fails; the list is unchanged unless
                the failure is a SaveFailedError
        """
        ...


def persist(entry_list: EntryList, storage: Optional[Storage]) -> None:
    if storage is None:
        return
    try:
        storage.save(entry_list)
    except StorageError as e:
        logger.error("Failed to persist journal: %s", e)
        raise SaveFailedError(SAVE_FAILED_MESSAGE) from e


def parse_whole_number(text: str, error_message: str) -> int:
    """
    Parse a whole number typed by the user.

    An absurdly long number comes back clamped, so the caller's range
    check reports it as too large.
    """
    text = text.strip()
    if _WHOLE_NUMBER_RE.fullmatch(text) is None:
        raise CommandError(error_message)
    return parse_clamped_int(text)
