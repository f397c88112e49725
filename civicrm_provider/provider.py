"""
Provider configuration and type registration.

Resolves the connection settings, builds the shared API client and exposes
the registered resource and data source types.
"""

import logging
import os

from civicrm_provider.client.api_client import CiviCRMClient
from civicrm_provider.core.models import ProviderConfig, ConfigError
from civicrm_provider.core.registry import (
    register_resource,
    get_resource,
    register_data_source,
    get_data_source,
)
from civicrm_provider.data_sources import ALL_DATA_SOURCES
from civicrm_provider.resources import ALL_RESOURCES

logger = logging.getLogger(__name__)

URL_ENV = "CIVICRM_URL"
API_KEY_ENV = "CIVICRM_API_KEY"
INSECURE_ENV = "CIVICRM_INSECURE"

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUE_VALUES


def resolve_config(
    url: str | None = None,
    api_key: str | None = None,
    insecure: bool | None = None,
) -> ProviderConfig:
    """
    Resolve provider settings from explicit values and the environment.

    Explicit values win over CIVICRM_URL, CIVICRM_API_KEY and
    CIVICRM_INSECURE.

    Raises:
        ConfigError: If the url or the API key is missing
    """
    if not url:
        url = os.environ.get(URL_ENV, "")
    if not url:
        raise ConfigError(
            "Missing CiviCRM URL: set the 'url' attribute or the "
            f"{URL_ENV} environment variable"
        )

    if not api_key:
        api_key = os.environ.get(API_KEY_ENV, "")
    if not api_key:
        raise ConfigError(
            "Missing CiviCRM API key: set the 'api_key' attribute or the "
            f"{API_KEY_ENV} environment variable"
        )

    if insecure is None:
        insecure = _env_flag(INSECURE_ENV)

    return ProviderConfig(url=url, api_key=api_key, insecure=insecure)


def configure_provider(
    url: str | None = None,
    api_key: str | None = None,
    insecure: bool | None = None,
) -> CiviCRMClient:
    """
    Build the API client shared by every resource and data source.

    Returns:
        Configured CiviCRMClient
    """
    config = resolve_config(url, api_key, insecure)

    logger.debug(f"Configuring CiviCRM client for {config.url}")
    if config.insecure:
        logger.warning("TLS certificate verification is disabled")

    return CiviCRMClient(
        base_url=config.url,
        api_key=config.api_key,
        insecure=config.insecure,
    )


def register_builtin_types() -> None:
    """Register every resource and data source shipped with the provider."""
    for adapter_cls in ALL_RESOURCES:
        register_resource(adapter_cls)
    for source_cls in ALL_DATA_SOURCES:
        register_data_source(source_cls)


def new_resource(type_name: str, client: CiviCRMClient):
    """Instantiate the registered resource adapter for ``type_name``."""
    return get_resource(type_name)(client)


def new_data_source(type_name: str, client: CiviCRMClient):
    """Instantiate the registered data source for ``type_name``."""
    return get_data_source(type_name)(client)


register_builtin_types()
