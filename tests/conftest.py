"""
conftest.py
-----------
Shared pytest fixtures for the mama tests.

Provides fixtures for:
- Fixed timestamps
- Pre-filled entry lists
- Journal storage in a temporary directory
- An isolated configuration for CLI tests
"""
from pathlib import Path

import pendulum
import pytest
import yaml

from mama import configuration
from mama.model.entry_list import EntryList
from mama.model.milk import MilkEntry
from mama.model.weight import WeightEntry
from mama.model.workout import WorkoutEntry
from mama.repository.configuration import CONFIGURATION_REPO
from mama.repository.storage import Storage, StorageError
from mama.time import datetime_from_storage_str
from mama.view import state as view_state


# ----- Time Fixtures -----

@pytest.fixture
def timestamp() -> pendulum.DateTime:
    """The timestamp used in the journal file examples."""
    return datetime_from_storage_str("28/10/25 01:14")


# ----- Entry List Fixtures -----

@pytest.fixture
def workout_list(timestamp):
    """Three workouts: Run, Swim, Cycle."""
    entry_list = EntryList()
    entry_list.add(WorkoutEntry("Run", 30, 4, timestamp))
    entry_list.add(WorkoutEntry("Swim", 30, 3, timestamp))
    entry_list.add(WorkoutEntry("Cycle", 30, 5, timestamp))
    return entry_list


@pytest.fixture
def mixed_list(timestamp):
    """Milk, weight, milk, workout in that order."""
    entry_list = EntryList()
    entry_list.add(MilkEntry(100, timestamp))
    entry_list.add(WeightEntry(60.0))
    entry_list.add(MilkEntry(150, timestamp))
    entry_list.add(WorkoutEntry("Yoga", 45, 5, timestamp))
    return entry_list


# ----- Storage Fixtures -----

@pytest.fixture
def storage(tmp_path: Path) -> Storage:
    return Storage(tmp_path / "data" / "mama.txt")


class FailingStorage(Storage):
    """Storage whose every save fails, as with a read-only disk."""

    def save(self, entry_list: EntryList) -> None:
        raise StorageError("disk is read-only")


@pytest.fixture
def failing_storage(tmp_path: Path) -> Storage:
    return FailingStorage(tmp_path / "mama.txt")


# ----- Configuration Fixtures -----

@pytest.fixture
def isolated_configuration(tmp_path: Path, monkeypatch):
    """Point every config, data and log path at a temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    log_path = tmp_path / "log"
    config_path.mkdir()
    data_path.mkdir()
    (config_path / "config.yaml").write_text(
        yaml.dump(dict(configuration.get_default_configuration()))
    )

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_ENTRIES_PATH", data_path / "mama.txt")
    monkeypatch.setattr(configuration, "LOG_PATH", log_path)
    monkeypatch.setattr(configuration, "LOG_FILE_PATH", log_path / "mama.log")

    CONFIGURATION_REPO.reset()
    yield tmp_path
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)
    view_state.set_use_color(True)
