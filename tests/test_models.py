"""Tests for core data models."""

import pytest
from civicrm_provider.core.models import (
    ProviderConfig,
    ConfigError,
    InputError,
    ResourceError,
)


def test_provider_config_defaults():
    """Test creating a ProviderConfig with only the required fields."""
    config = ProviderConfig(url="https://crm.example.org", api_key="k")

    assert config.insecure is False


def test_provider_config_to_dict_omits_api_key():
    config = ProviderConfig(url="https://crm.example.org", api_key="secret", insecure=True)

    data = config.to_dict()

    assert data == {"url": "https://crm.example.org", "insecure": True}
    assert "api_key" not in data


def test_provider_config_from_dict():
    config = ProviderConfig.from_dict({"url": "https://crm.example.org"})

    assert config.url == "https://crm.example.org"
    assert config.api_key == ""
    assert config.insecure is False


def test_provider_config_from_dict_missing_url():
    with pytest.raises(KeyError):
        ProviderConfig.from_dict({"insecure": True})


def test_resource_error_message():
    error = ResourceError("Error reading group", "Could not read group ID 4: boom")

    assert error.summary == "Error reading group"
    assert error.detail == "Could not read group ID 4: boom"
    assert str(error) == "Error reading group: Could not read group ID 4: boom"


def test_input_error_is_value_error():
    assert issubclass(InputError, ValueError)
    assert not issubclass(ConfigError, ValueError)
