"""Command-line interface for the CiviCRM provider."""
