"""CiviCRM access-control provider."""

__version__ = "0.1.0"
