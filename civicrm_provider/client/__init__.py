"""
CiviCRM API v4 client and response coercion helpers.
"""

from .api_client import (
    CiviCRMClient,
    APIError,
    TransportError,
    ResponseParseError,
    EmptyResultError,
    NotFoundError,
)

__all__ = [
    "CiviCRMClient",
    "APIError",
    "TransportError",
    "ResponseParseError",
    "EmptyResultError",
    "NotFoundError",
]
