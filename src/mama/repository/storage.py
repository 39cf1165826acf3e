# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

from mama.model.entry_dispatch import entry_from_storage
from mama.model.entry_list import EntryList
from mama.model.error import EntryValidationError, MalformedEntryError

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """The journal file could not be written or read."""


class Storage:
    """
    Line-oriented journal file: one entry per line, in backing-list order.

    Lines look like TYPE|payload|timestamp (TYPE|payload for weight).
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def save(self, entry_list: EntryList) -> None:
        lines = [entry.to_storage_string() for entry in entry_list.as_list()]
        text = "".join(f"{line}\n" for line in lines)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not save journal to {self.path}: {e}") from e
        logger.debug("Saved %d entries to %s", len(lines), self.path)

    def load(self) -> EntryList:
        """
        Read the journal file into a fresh EntryList.

        Entries go through EntryList.add so the milk total is rebuilt. A line
        that can't be read is skipped with a warning rather than discarding
        the rest of the journal.
        """
        entry_list = EntryList()
        if not self.path.is_file():
            logger.info("No journal file at %s, starting empty", self.path)
            return entry_list

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not read journal from {self.path}: {e}") from e

        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                entry_list.add(entry_from_storage(line))
            except (MalformedEntryError, EntryValidationError) as e:
                logger.warning("Skipping line %d of %s: %s", line_number, self.path, e)

        logger.info("Loaded %d entries from %s", entry_list.size(), self.path)
        return entry_list
