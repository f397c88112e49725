"""Core data models for the CiviCRM provider."""

from dataclasses import dataclass
from typing import Any


@dataclass
class ProviderConfig:
    """Connection settings for a CiviCRM instance."""
    url: str
    api_key: str
    insecure: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert ProviderConfig to a dictionary (without the API key)."""
        return {
            "url": self.url,
            "insecure": self.insecure,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProviderConfig":
        """Create ProviderConfig from a dictionary."""
        return cls(
            url=data["url"],
            api_key=data.get("api_key", ""),
            insecure=bool(data.get("insecure", False)),
        )


class ConfigError(Exception):
    """Raised when provider configuration is missing or cannot be persisted."""
    pass


class InputError(ValueError):
    """Raised when a declared configuration or identifier is invalid."""
    pass


class ResourceNotRegisteredError(Exception):
    """Raised when a resource or data source type is not in the registry."""
    pass


class ResourceError(Exception):
    """
    Raised when a resource operation fails.

    Carries a short summary (e.g. "Error creating group") and a detail
    message with the entity type and id when known. The underlying client
    error is available as ``__cause__``.
    """

    def __init__(self, summary: str, detail: str):
        super().__init__(f"{summary}: {detail}")
        self.summary = summary
        self.detail = detail
