import yaml

from mama import configuration
from mama.repository.configuration import CONFIGURATION_REPO


def read_config_file():
    return yaml.safe_load(configuration.APP_CONFIG_PATH.read_text())


class TestConfigurationRepository:
    def test_reads_defaults(self, isolated_configuration):
        assert CONFIGURATION_REPO.get_config() == configuration.get_default_configuration()

    def test_back_fills_missing_settings(self, isolated_configuration):
        configuration.APP_CONFIG_PATH.write_text("show_header: false\n")

        config = CONFIGURATION_REPO.get_config()

        assert config["show_header"] is False
        assert config["use_color"] is True
        assert config["log_level"] == "INFO"

    def test_empty_file_gives_defaults(self, isolated_configuration):
        configuration.APP_CONFIG_PATH.write_text("")
        assert CONFIGURATION_REPO.get_config()["data_path"] is None

    def test_get_config_returns_a_copy(self, isolated_configuration):
        CONFIGURATION_REPO.get_config()["log_level"] = "DEBUG"
        assert CONFIGURATION_REPO.get_config()["log_level"] == "INFO"

    def test_flush_writes_only_when_dirty(self, isolated_configuration):
        CONFIGURATION_REPO.get_config()
        assert CONFIGURATION_REPO.flush() is False

        CONFIGURATION_REPO.update_config(use_color=False, log_level="DEBUG")
        assert CONFIGURATION_REPO.flush() is True
        assert CONFIGURATION_REPO.flush() is False

        saved = read_config_file()
        assert saved["use_color"] is False
        assert saved["log_level"] == "DEBUG"

    def test_remove_data_path(self, isolated_configuration):
        CONFIGURATION_REPO.update_config(data_path="/tmp/journal")
        assert CONFIGURATION_REPO.get_config()["data_path"] == "/tmp/journal"

        CONFIGURATION_REPO.update_config(remove_data_path=True)
        assert CONFIGURATION_REPO.get_config()["data_path"] is None


def test_data_path_setting_moves_journal_file(isolated_configuration, tmp_path):
    journal_dir = tmp_path / "elsewhere"
    configuration.APP_CONFIG_PATH.write_text(
        yaml.dump({"data_path": str(journal_dir)})
    )

    configuration.load_data_path_configuration()

    assert configuration.DATA_PATH == journal_dir
    assert configuration.DATA_ENTRIES_PATH == journal_dir / "mama.txt"
