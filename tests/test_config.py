from pathlib import Path

import pytest

from epicboard.config import ConfigLoader
from epicboard.errors import ConfigError


def test_defaults_and_first_run_file(tmp_path: Path) -> None:
    config = ConfigLoader()

    assert config.get("storage.db_path") == "./data/db.json"
    assert config.id_length == 6
    assert config.log_file == Path("~/.config/epicboard/events.log").expanduser()
    assert (tmp_path / "xdg" / "epicboard" / "config.toml").exists()
    assert config.get("missing.key", "fallback") == "fallback"


def test_generated_default_file_parses_back(tmp_path: Path) -> None:
    ConfigLoader()
    config = ConfigLoader()

    assert config.get("storage.id_length") == 6
    assert config.get("general.log_enabled") is True


def test_project_config_overrides_global(tmp_path: Path) -> None:
    global_dir = tmp_path / "xdg" / "epicboard"
    global_dir.mkdir(parents=True)
    (global_dir / "config.toml").write_text('[storage]\ndb_path = "/global/db.json"\nid_length = 10\n')
    project_dir = tmp_path / ".epicboard"
    project_dir.mkdir()
    (project_dir / "config.toml").write_text('[storage]\ndb_path = "project.json"\n')

    config = ConfigLoader()

    assert config.project_dir == project_dir
    assert config.get("storage.db_path") == "project.json"
    assert config.id_length == 10


def test_env_overrides_files(monkeypatch) -> None:
    monkeypatch.setenv("EPICBOARD_STORAGE__DB_PATH", "/env/db.json")
    monkeypatch.setenv("EPICBOARD_STORAGE__ID_LENGTH", "12")
    monkeypatch.setenv("EPICBOARD_GENERAL__LOG_ENABLED", "false")

    config = ConfigLoader()

    assert config.db_path == Path("/env/db.json")
    assert config.id_length == 12
    assert config.log_file is None


def test_set_overrides_everything(monkeypatch) -> None:
    monkeypatch.setenv("EPICBOARD_STORAGE__DB_PATH", "/env/db.json")
    config = ConfigLoader(create_default=False)

    config.set("storage.db_path", "/cli/db.json")

    assert config.get("storage.db_path") == "/cli/db.json"


def test_invalid_id_length_is_a_config_error(monkeypatch) -> None:
    monkeypatch.setenv("EPICBOARD_STORAGE__ID_LENGTH", "abc")
    with pytest.raises(ConfigError):
        ConfigLoader().id_length

    monkeypatch.setenv("EPICBOARD_STORAGE__ID_LENGTH", "0")
    with pytest.raises(ConfigError):
        ConfigLoader().id_length


def test_empty_log_file_disables_logging(monkeypatch) -> None:
    monkeypatch.setenv("EPICBOARD_GENERAL__LOG_FILE", "")

    assert ConfigLoader().log_file is None
