"""Unit tests for studybook.config."""

from pathlib import Path

from studybook import config


def test_default_data_path_is_per_user(monkeypatch):
    """The default file lives in the platform's user data directory."""
    monkeypatch.setattr(config.platformdirs, "user_data_dir", lambda app: f"/data/{app}")
    assert config.default_data_path() == Path("/data/studybook/studybook.json")


def test_env_var_overrides_default(monkeypatch, tmp_path):
    """STUDYBOOK_DATA_PATH wins over the default."""
    target = tmp_path / "book.json"
    monkeypatch.setenv(config.DATA_PATH_ENV_VAR, str(target))
    assert config.get_data_path() == target


def test_env_var_expands_user(monkeypatch, tmp_path):
    """A leading ~ is expanded."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv(config.DATA_PATH_ENV_VAR, "~/book.json")
    assert config.get_data_path() == tmp_path / "book.json"


def test_empty_env_var_falls_back(monkeypatch):
    """An empty variable is treated as unset."""
    monkeypatch.setenv(config.DATA_PATH_ENV_VAR, "")
    assert config.get_data_path() == config.default_data_path()
