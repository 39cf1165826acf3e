# SPDX-License-Identifier: MIT


class EntryValidationError(ValueError):
    """A value is outside the range an entry accepts (negative weight, 5000ml, ...)."""


class MalformedEntryError(ValueError):
    """A journal file line cannot be turned back into an entry."""


class ShownIndexError(IndexError):
    """An index does not point into the currently shown entries."""


class EntryListConsistencyError(RuntimeError):
    """A shown entry could not be found in the backing list."""
