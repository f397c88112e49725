"""Registry of resource and data source types."""

import logging

from .models import ResourceNotRegisteredError

logger = logging.getLogger(__name__)

# In-memory storage keyed by declarative type name
_RESOURCES: dict[str, type] = {}
_DATA_SOURCES: dict[str, type] = {}


def register_resource(adapter_cls: type) -> type:
    """
    Register a resource adapter class under its ``type_name``.

    Args:
        adapter_cls: ResourceAdapter subclass

    Returns:
        The adapter class, so this can be used as a decorator

    Note:
        If the type name already exists, it will be overwritten.
    """
    type_name = adapter_cls.type_name
    if type_name in _RESOURCES:
        logger.warning(f"Resource '{type_name}' already exists. Overwriting.")

    _RESOURCES[type_name] = adapter_cls
    logger.debug(f"Registered resource: {type_name} ({adapter_cls.entity})")
    return adapter_cls


def get_resource(type_name: str) -> type:
    """
    Retrieve a resource adapter class.

    Raises:
        ResourceNotRegisteredError: If the type is not in the registry
    """
    if type_name not in _RESOURCES:
        raise ResourceNotRegisteredError(f"Resource '{type_name}' not found in registry")

    return _RESOURCES[type_name]


def list_resources() -> list[str]:
    """List registered resource type names, sorted."""
    return sorted(_RESOURCES)


def register_data_source(source_cls: type) -> type:
    """Register a data source class under its ``type_name``."""
    type_name = source_cls.type_name
    if type_name in _DATA_SOURCES:
        logger.warning(f"Data source '{type_name}' already exists. Overwriting.")

    _DATA_SOURCES[type_name] = source_cls
    logger.debug(f"Registered data source: {type_name} ({source_cls.entity})")
    return source_cls


def get_data_source(type_name: str) -> type:
    """
    Retrieve a data source class.

    Raises:
        ResourceNotRegisteredError: If the type is not in the registry
    """
    if type_name not in _DATA_SOURCES:
        raise ResourceNotRegisteredError(f"Data source '{type_name}' not found in registry")

    return _DATA_SOURCES[type_name]


def list_data_sources() -> list[str]:
    """List registered data source type names, sorted."""
    return sorted(_DATA_SOURCES)


def reset_registry() -> None:
    """
    Clear all resource and data source types from the registry.

    This is primarily intended for testing.
    """
    global _RESOURCES, _DATA_SOURCES
    _RESOURCES = {}
    _DATA_SOURCES = {}
    logger.debug("Registry reset")
