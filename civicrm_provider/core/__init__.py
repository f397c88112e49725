"""Core components for the CiviCRM provider."""

from .models import (
    ProviderConfig,
    ConfigError,
    InputError,
    ResourceError,
    ResourceNotRegisteredError,
)
from .registry import (
    register_resource,
    get_resource,
    list_resources,
    register_data_source,
    get_data_source,
    list_data_sources,
    reset_registry,
)
from .config_store import (
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

__all__ = [
    "ProviderConfig",
    "ConfigError",
    "InputError",
    "ResourceError",
    "ResourceNotRegisteredError",
    "register_resource",
    "get_resource",
    "list_resources",
    "register_data_source",
    "get_data_source",
    "list_data_sources",
    "reset_registry",
    "get_base_dir",
    "config_path",
    "save_json",
    "load_json",
    "save_provider_config",
    "load_provider_config",
    "state_path",
    "save_state",
    "load_state",
    "delete_state",
]
