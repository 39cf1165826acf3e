# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Self

from mama.command.command import Command, CommandError, CommandResult, persist
from mama.model.entry import MAX_NUMBER_DIGITS
from mama.model.entry_list import EntryList
from mama.model.error import EntryListConsistencyError, ShownIndexError
from mama.model.milk import MilkEntry, format_total_milk
from mama.repository.storage import Storage

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "There are no items to delete. The shown list is empty."


class DeleteCommand(Command):
    """
    Deletes an entry from the currently shown list by its index.

    The index is 1-based and counts entries in the shown (filtered) view,
    not in the full journal. An index outside the view fails with the view
    printed in full so the user can pick again.
    """

    MESSAGE_USAGE = (
        "Usage: delete INDEX\n"
        "Deletes the entry at INDEX from the currently shown list.\n"
        "• INDEX must be a positive whole number (1, 2, 3, ...)."
    )

    def __init__(self, index_one_based: int) -> None:
        if index_one_based <= 0:
            raise ValueError("index_one_based must be greater than 0")
        self.index_one_based = index_one_based

    @classmethod
    def from_input(cls, arguments: str) -> Self:
        """
        Build the command from the text after 'delete'.

        Only the syntax is checked here (missing, non-numeric, overlong or
        zero index); the range is checked against the shown list in execute().
        """
        text = arguments.strip()
        if not text:
            raise CommandError(with_usage("Missing index."))
        if not text.isascii() or not text.isdigit():
            raise CommandError(with_usage("Index must be a positive whole number."))
        digits = text.lstrip("0")
        if len(digits) > MAX_NUMBER_DIGITS:
            raise CommandError(with_usage("Index is too large."))
        index = int(digits or "0")
        if index <= 0:
            raise CommandError(with_usage("Index must be greater than 0."))
        return cls(index)

    def execute(
        self, entry_list: EntryList, storage: Optional[Storage] = None
    ) -> CommandResult:
        shown_size = entry_list.shown_size()
        self.__check_bounds(entry_list, shown_size)

        try:
            removed = entry_list.delete_by_shown_index(self.index_one_based - 1)
        except ShownIndexError as e:
            # The view changed between the check and the removal
            size_now = entry_list.shown_size()
            logger.info(
                "Delete index went out of range during execution: %d / size=%d",
                self.index_one_based,
                size_now,
            )
            self.__check_bounds(entry_list, size_now)
            raise self.__out_of_bounds(entry_list, size_now) from e
        except EntryListConsistencyError as e:
            logger.error(
                "Shown entry %d missing from backing list", self.index_one_based
            )
            raise CommandError(
                "Something went wrong internally and nothing was deleted. Please try again."
            ) from e

        persist(entry_list, storage)

        logger.info(
            "Deleted (shown view) index %d: %s",
            self.index_one_based,
            removed.to_list_line(),
        )
        feedback = f"Deleted: {removed.to_list_line()}"
        if isinstance(removed, MilkEntry):
            feedback += f"\n{format_total_milk(entry_list.total_milk_ml)}"
        return CommandResult(feedback)

    def __check_bounds(self, entry_list: EntryList, shown_size: int) -> None:
        if shown_size == 0:
            logger.info("Delete attempted on empty shown list.")
            raise CommandError(with_usage(EMPTY_LIST_MESSAGE))
        if self.index_one_based > shown_size:
            logger.info(
                "Delete index out of bounds (shown list): %d / size=%d",
                self.index_one_based,
                shown_size,
            )
            raise self.__out_of_bounds(entry_list, shown_size)

    def __out_of_bounds(self, entry_list: EntryList, shown_size: int) -> CommandError:
        reason = (
            f"Index {self.index_one_based} is out of bounds (shown list). "
            f"{format_valid_range(shown_size)}"
        )
        return CommandError(reason_with_preview(reason, entry_list))


def format_valid_range(shown_size: int) -> str:
    return "Valid index: 1." if shown_size == 1 else f"Valid range: 1..{shown_size}."


def with_usage(reason: str) -> str:
    return f"{reason}\n{DeleteCommand.MESSAGE_USAGE}"


def reason_with_preview(reason: str, entry_list: EntryList) -> str:
    return f"{with_usage(reason)}\n{preview_shown(entry_list)}"


def preview_shown(entry_list: EntryList) -> str:
    """Number the shown entries exactly as the user sees them."""
    entries = entry_list.shown_snapshot()
    if not entries:
        return "Here are your entries:\n(none)"
    lines = [f"{i}. {entry.to_list_line()}" for i, entry in enumerate(entries, start=1)]
    return "Here are your entries:\n" + "\n".join(lines)
