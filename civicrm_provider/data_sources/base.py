"""Base class for read-only lookup data sources."""

import dataclasses
import logging
from abc import ABC
from typing import Any

from civicrm_provider.client.api_client import APIError, CiviCRMClient
from civicrm_provider.core.models import InputError, ResourceError
from civicrm_provider.core.schema import Attribute, plan_model, schema_of
from civicrm_provider.resources.base import decode_attribute, is_empty

logger = logging.getLogger(__name__)


class DataSource(ABC):
    """
    Abstract base class for lookups of existing CiviCRM records.

    Filter attributes are optional and computed: whichever are declared are
    turned into ``where`` clauses, and the first matching record fills in
    every attribute.
    """

    type_name: str = ""
    entity: str = ""
    label: str = ""
    model_cls: type | None = None
    #: Attributes usable as equality filters, in clause order
    filters: tuple[str, ...] = ("id", "name")
    #: Clauses always sent ahead of the declared filters
    base_filters: tuple[tuple[Any, ...], ...] = ()

    def __init__(self, client: CiviCRMClient):
        self.client = client

    @classmethod
    def schema(cls) -> dict[str, Attribute]:
        return schema_of(cls.model_cls)

    def missing_filter_message(self, model) -> str | None:
        """Return an error message if the declared filters are not enough."""
        if all(getattr(model, name) is None for name in self.filters):
            quoted = " or ".join(f"'{name}'" for name in self.filters)
            return f"At least one of {quoted} must be specified."
        return None

    def build_where(self, model) -> list[list[Any]]:
        """Build the filter clauses from the declared filter attributes."""
        where = [list(clause) for clause in self.base_filters]
        for name in self.filters:
            value = getattr(model, name)
            if value is not None:
                where.append([name, "=", value])
        return where

    def read(self, config: dict[str, Any]):
        """
        Look up the first record matching the declared filters.

        Args:
            config: Declared filter values

        Returns:
            Model with every attribute filled from the matching record

        Raises:
            InputError: If the filters are invalid or insufficient
            ResourceError: If the lookup fails or nothing matches
        """
        model = plan_model(self.model_cls, config)

        message = self.missing_filter_message(model)
        if message:
            raise InputError(f"Missing Filter: {message}")

        where = self.build_where(model)
        logger.debug(f"Reading {self.label} data source with filters {where}")

        try:
            results = self.client.get(self.entity, where)
        except APIError as e:
            raise ResourceError(
                f"Error reading {self.label}",
                f"Could not read {self.label}: {e}",
            ) from e

        if not results:
            raise ResourceError(
                f"{self.label[0].upper()}{self.label[1:]} not found",
                f"No {self.label} found matching the specified criteria.",
            )

        return self.apply_record(model, results[0])

    def apply_record(self, model, record: dict[str, Any]):
        """
        Copy every present attribute of a record onto the model.

        Empty strings and empty lists read back as unset.
        """
        updates = {}
        for name, attr in self.schema().items():
            value, present = decode_attribute(attr, record)
            if present:
                updates[name] = None if is_empty(value) else value
        return dataclasses.replace(model, **updates)
