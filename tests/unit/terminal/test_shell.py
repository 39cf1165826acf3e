import io

import pytest
from rich.console import Console

from mama.model.entry_list import EntryList
from mama.terminal.shell import GREETING, run_loop


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, no_color=True, highlight=False)


@pytest.fixture
def typed(monkeypatch):
    """Feed lines to the prompt; running out of lines is end of input."""

    def feed(*lines):
        remaining = iter(lines)

        def fake_input(*args):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return feed


def output(console):
    return console.file.getvalue()


def test_greets_and_stops_on_bye(console, typed):
    entry_list = EntryList()
    typed("milk 150", "bye", "milk 200")

    run_loop(console, entry_list, None)

    text = output(console)
    assert text.startswith(GREETING)
    assert "Total breast milk pumped: 150ml" in text
    assert "Bye. Hope to see you again soon!" in text
    assert entry_list.total_milk_ml == 150


def test_end_of_input_stops_the_loop(console, typed):
    entry_list = EntryList()
    typed("weight 60")

    run_loop(console, entry_list, None)

    assert entry_list.size() == 1


def test_errors_are_reported_and_loop_continues(console, typed, mixed_list):
    typed("delete 9", "dance", "", "delete 1")

    run_loop(console, mixed_list, None)

    text = output(console)
    assert "Index 9 is out of bounds (shown list). Valid range: 1..4." in text
    assert "Unknown command. Type 'help' to see all commands." in text
    assert "Deleted: [MILK] 100ml" in text
    assert mixed_list.size() == 3


def test_entry_lines_are_printed_literally(console, typed, mixed_list):
    typed("list /t milk")
    run_loop(console, mixed_list, None)
    assert "1. [MILK] 100ml (28/10/25 01:14)" in output(console)


def test_failed_save_is_reported_and_change_kept(console, typed, failing_storage):
    entry_list = EntryList()
    typed("milk 100", "milk 50")

    run_loop(console, entry_list, failing_storage)

    assert output(console).count("Failed to save updated data to disk.") == 2
    assert entry_list.total_milk_ml == 150


def test_filtered_delete_through_the_prompt(console, typed, mixed_list, storage):
    typed("list /t milk", "delete 2", "list")

    run_loop(console, mixed_list, storage)

    text = output(console)
    assert "Deleted: [MILK] 150ml" in text
    assert "Total breast milk pumped: 100ml" in text
    assert storage.load().total_milk_ml == 100
    assert mixed_list.shown_size() == 3
