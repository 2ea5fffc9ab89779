"""Tests for the optional configuration file."""

import json

import pytest

from dockviz.managers.config_manager import ConfigError, ConfigManager, find_config_file


def write_config(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults_without_config_file():
    """Test defaults are used when no file is found."""
    config = ConfigManager().load_config()

    assert config["images"] == {"no_trunc": False, "incremental": False, "only_labelled": False}
    assert config["log_level"] == "WARNING"


def test_find_config_file_walks_up(tmp_path, monkeypatch):
    """Test the config file is found in a parent directory."""
    config_file = write_config(tmp_path / ".dockviz.json", {})
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert find_config_file() == config_file.resolve()


def test_find_config_file_from_env(tmp_path, monkeypatch):
    """Test DOCKVIZ_CONFIG takes precedence."""
    config_file = write_config(tmp_path / "custom.json", {})
    monkeypatch.setenv("DOCKVIZ_CONFIG", str(config_file))

    assert find_config_file() == config_file


def test_load_config_merges_defaults(tmp_path):
    """Test user values are merged over the defaults."""
    config_file = write_config(tmp_path / ".dockviz.json", {"images": {"only_labelled": True}, "log_level": "debug"})
    config = ConfigManager().load_config()

    assert config["images"]["only_labelled"] is True
    assert config["images"]["no_trunc"] is False
    assert config["log_level"] == "DEBUG"
    assert config_file.exists()


def test_load_config_type_error(tmp_path):
    """Test a wrongly typed value raises ConfigError."""
    write_config(tmp_path / ".dockviz.json", {"images": {"no_trunc": "yes"}})

    with pytest.raises(ConfigError, match="no_trunc"):
        ConfigManager().load_config()


def test_load_config_bad_level(tmp_path):
    """Test an unknown log level raises ConfigError."""
    write_config(tmp_path / ".dockviz.json", {"log_level": "LOUD"})

    with pytest.raises(ConfigError):
        ConfigManager().load_config()


def test_load_config_invalid_json(tmp_path):
    """Test malformed config files raise ConfigError."""
    (tmp_path / ".dockviz.json").write_text("{", encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigManager().load_config()


def test_render_options_or_flags(tmp_path):
    """Test command line flags can only switch options on."""
    write_config(tmp_path / ".dockviz.json", {"images": {"incremental": True}})
    manager = ConfigManager()
    manager.load_config()

    options = manager.render_options(tree=True, dot=False, incremental=False, no_trunc=True)

    assert options["tree"] is True
    assert options["dot"] is False
    assert options["incremental"] is True
    assert options["no_trunc"] is True
    assert options["only_labelled"] is False
