# SPDX-License-Identifier: MIT

from typing import Callable, Optional, TypeAlias

from mama.model.entry import Entry
from mama.model.error import EntryListConsistencyError, ShownIndexError
from mama.model.milk import MilkEntry

EntryPredicate: TypeAlias = Callable[[Entry], bool]


class EntryList:
    """
    The journal's entries in insertion order, plus the filtered "shown" view.

    Every mutator rebuilds the shown view before returning, so sizes and
    indices read afterwards always agree with the backing list and the
    last filter set. The running milk total is kept in step with every add
    and delete, including the adds made while loading the journal file.
    """

    def __init__(self) -> None:
        self._items: list[Entry] = []
        self._shown: list[Entry] = []
        self._filter: Optional[EntryPredicate] = None
        self._filter_label: Optional[str] = None
        self._total_milk_ml = 0

    # Backing list

    def add(self, entry: Entry) -> None:
        self._items.append(entry)
        if isinstance(entry, MilkEntry):
            self._total_milk_ml += entry.volume_ml
        self.__recompute_shown()

    def delete_by_index(self, index: int) -> Entry:
        """Remove the entry at a 0-based position in the backing list."""
        if not (0 <= index < len(self._items)):
            raise IndexError(
                f"Index {index} out of range (size={len(self._items)})"
            )
        removed = self._items.pop(index)
        if isinstance(removed, MilkEntry):
            self._total_milk_ml -= removed.volume_ml
        self.__recompute_shown()
        return removed

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, index: int) -> Entry:
        return self._items[index]

    def as_list(self) -> list[Entry]:
        return list(self._items)

    @property
    def total_milk_ml(self) -> int:
        return self._total_milk_ml

    # Shown view

    def shown_size(self) -> int:
        return len(self._shown)

    def get_shown(self, index: int) -> Entry:
        """Entry at a 0-based position in the shown view."""
        if not (0 <= index < len(self._shown)):
            raise ShownIndexError(
                f"Shown index {index} out of range (size={len(self._shown)})"
            )
        return self._shown[index]

    def shown_snapshot(self) -> tuple[Entry, ...]:
        return tuple(self._shown)

    def delete_by_shown_index(self, index: int) -> Entry:
        """
        Remove the entry the user sees at a 0-based position in the shown view.

        Raises:
            ShownIndexError: If the index is outside the shown view
            EntryListConsistencyError: If the shown entry is missing from the backing list
        """
        target = self.get_shown(index)
        real_index = self.__index_of(target)
        if real_index < 0:
            raise EntryListConsistencyError("Shown entry not found in backing list")
        return self.delete_by_index(real_index)

    def set_filter(
        self, predicate: Optional[EntryPredicate], label: Optional[str] = None
    ) -> None:
        """Show only the entries matching `predicate` (None shows everything)."""
        self._filter = predicate
        self._filter_label = label if predicate is not None else None
        self.__recompute_shown()

    def clear_filter(self) -> None:
        self.set_filter(None)

    @property
    def filter_label(self) -> Optional[str]:
        return self._filter_label

    def __recompute_shown(self) -> None:
        self._shown = [
            entry
            for entry in self._items
            if self._filter is None or self._filter(entry)
        ]

    def __index_of(self, target: Entry) -> int:
        for index, entry in enumerate(self._items):
            if entry is target:
                return index
        return -1
