"""Configuration and state persistence for the CiviCRM provider."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import ProviderConfig, ConfigError

logger = logging.getLogger(__name__)

PROVIDER_CONFIG_NAME = "provider"


def get_base_dir() -> Path:
    """
    Get the base directory for storing configuration and state.

    The directory is determined by:
    1. Environment variable CIVICRM_PROVIDER_HOME if set
    2. Otherwise, ~/.civicrm_provider

    The directory is created if it does not exist.

    Returns:
        Path to the base directory
    """
    env_home = os.environ.get("CIVICRM_PROVIDER_HOME")
    if env_home:
        base_dir = Path(env_home)
    else:
        base_dir = Path.home() / ".civicrm_provider"

    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


def config_path(name: str, suffix: str = "config") -> Path:
    """
    Get the path for a named JSON document.

    Args:
        name: Document name (e.g., "provider", "civicrm_group_12")
        suffix: File suffix (default: "config")

    Returns:
        Path to the JSON file
    """
    return get_base_dir() / f"{name}_{suffix}.json"


def save_json(name: str, suffix: str, data: dict) -> Path:
    """
    Save a dictionary as JSON.

    Args:
        name: Document name
        suffix: File suffix
        data: Dictionary to save

    Returns:
        Path to the saved file

    Raises:
        ConfigError: If the file cannot be written
    """
    path = config_path(name, suffix)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
    except (OSError, TypeError) as e:
        raise ConfigError(f"Failed to save JSON to {path}: {e}") from e

    logger.debug(f"Saved JSON to {path}")
    return path


def load_json(name: str, suffix: str) -> dict:
    """
    Load a dictionary from a JSON document.

    Raises:
        ConfigError: If the file does not exist or JSON is invalid
    """
    path = config_path(name, suffix)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load JSON from {path}: {e}") from e

    logger.debug(f"Loaded JSON from {path}")
    return data


def save_provider_config(config: ProviderConfig) -> Path:
    """
    Persist provider settings.

    Only the url and the insecure flag are written; the API key is always
    read from the command line or the environment.
    """
    return save_json(PROVIDER_CONFIG_NAME, "config", config.to_dict())


def load_provider_config() -> dict[str, Any]:
    """
    Load persisted provider settings.

    Returns:
        Dictionary with ``url`` and ``insecure``

    Raises:
        ConfigError: If nothing was saved or the file is invalid
    """
    data = load_json(PROVIDER_CONFIG_NAME, "config")
    if not isinstance(data, dict) or "url" not in data:
        raise ConfigError(f"Invalid provider configuration in {config_path(PROVIDER_CONFIG_NAME)}")
    return data


# ===== Resource state =====


def state_path(type_name: str, record_id: int) -> Path:
    """Path of the state document for one resource instance."""
    return config_path(f"{type_name}_{record_id}", "state")


def save_state(type_name: str, record_id: int, state: dict[str, Any]) -> Path:
    """Persist the state document of a resource instance."""
    return save_json(f"{type_name}_{record_id}", "state", state)


def load_state(type_name: str, record_id: int) -> dict[str, Any]:
    """
    Load the state document of a resource instance.

    Raises:
        ConfigError: If no state was saved for the instance
    """
    return load_json(f"{type_name}_{record_id}", "state")


def delete_state(type_name: str, record_id: int) -> bool:
    """
    Remove the state document of a resource instance.

    Returns:
        True if a document was removed
    """
    path = state_path(type_name, record_id)
    if not path.exists():
        return False

    path.unlink()
    logger.debug(f"Deleted state {path}")
    return True
