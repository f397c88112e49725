"""Tests for the configuration store."""

import json
import pytest

from civicrm_provider.core.models import ProviderConfig, ConfigError
from civicrm_provider.core.config_store import (
    get_base_dir,
    config_path,
    save_json,
    load_json,
    save_provider_config,
    load_provider_config,
    state_path,
    save_state,
    load_state,
    delete_state,
)


def test_get_base_dir_with_env_var(temp_home):
    """Test get_base_dir uses CIVICRM_PROVIDER_HOME environment variable."""
    base_dir = get_base_dir()
    assert base_dir == temp_home
    assert base_dir.exists()


def test_get_base_dir_creates_directory(temp_home):
    """Test get_base_dir creates the directory if it doesn't exist."""
    temp_home.rmdir()
    assert not temp_home.exists()

    base_dir = get_base_dir()
    assert base_dir.exists()
    assert base_dir.is_dir()


def test_get_base_dir_defaults_to_home(tmp_path, monkeypatch):
    monkeypatch.delenv("CIVICRM_PROVIDER_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_base_dir() == tmp_path / ".civicrm_provider"


def test_config_path(temp_home):
    assert config_path("provider") == temp_home / "provider_config.json"
    assert config_path("civicrm_group_7", "state") == temp_home / "civicrm_group_7_state.json"


def test_save_and_load_json(temp_home):
    """Test saving and loading JSON data."""
    data = {
        "key1": "value1",
        "key2": 42,
        "key3": ["list", "of", "items"],
    }

    path = save_json("test", "config", data)
    assert path.exists()
    assert path == temp_home / "test_config.json"

    assert load_json("test", "config") == data


def test_load_json_missing_file(temp_home):
    """Test load_json raises ConfigError for missing file."""
    with pytest.raises(ConfigError) as exc_info:
        load_json("nonexistent", "config")

    assert "not found" in str(exc_info.value).lower()


def test_load_json_invalid_json(temp_home):
    """Test load_json raises ConfigError for invalid JSON."""
    path = config_path("invalid", "config")
    path.write_text("{ invalid json content")

    with pytest.raises(ConfigError) as exc_info:
        load_json("invalid", "config")

    assert "invalid json" in str(exc_info.value).lower()


def test_provider_config_never_stores_api_key(temp_home):
    config = ProviderConfig(url="https://crm.example.org", api_key="secret", insecure=True)

    path = save_provider_config(config)

    saved = json.loads(path.read_text())
    assert saved == {"url": "https://crm.example.org", "insecure": True}
    assert "secret" not in path.read_text()
    assert load_provider_config() == saved


def test_load_provider_config_missing(temp_home):
    with pytest.raises(ConfigError):
        load_provider_config()


def test_load_provider_config_invalid(temp_home):
    save_json("provider", "config", {"insecure": False})

    with pytest.raises(ConfigError):
        load_provider_config()


def test_state_lifecycle(temp_home):
    state = {"id": 7, "name": "admins", "group_type": ["Access Control"]}

    path = save_state("civicrm_group", 7, state)
    assert path == state_path("civicrm_group", 7)
    assert load_state("civicrm_group", 7) == state

    assert delete_state("civicrm_group", 7) is True
    assert not path.exists()
    assert delete_state("civicrm_group", 7) is False

    with pytest.raises(ConfigError):
        load_state("civicrm_group", 7)


def test_json_format(temp_home):
    """Test that saved JSON is properly formatted."""
    path = save_json("format", "config", {"a": 1})

    assert path.read_text() == '{\n  "a": 1\n}'
