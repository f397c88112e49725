"""Base class for resource adapters."""

import dataclasses
import logging
import re
from abc import ABC
from typing import Any

from civicrm_provider.client.api_client import APIError, CiviCRMClient
from civicrm_provider.client.coercion import (
    INT64_MAX,
    INT64_MIN,
    get_bool,
    get_int64,
    get_int64_list,
    get_string,
    get_string_list,
)
from civicrm_provider.core.models import InputError, ResourceError
from civicrm_provider.core.schema import Attribute, AttrKind, schema_of

logger = logging.getLogger(__name__)

_IMPORT_ID = re.compile(r"[+-]?[0-9]+")

_DECODERS = {
    AttrKind.INT64: get_int64,
    AttrKind.STRING: get_string,
    AttrKind.BOOL: get_bool,
    AttrKind.STRING_LIST: get_string_list,
    AttrKind.INT64_LIST: get_int64_list,
}


def parse_import_id(raw_id: str) -> int:
    """
    Parse an external identifier as a 64-bit integer id.

    Raises:
        InputError: If the identifier is not a bare decimal integer
    """
    if not isinstance(raw_id, str) or not _IMPORT_ID.fullmatch(raw_id):
        raise InputError(
            f"Could not parse import ID as integer: {raw_id!r}"
        )

    value = int(raw_id)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InputError(f"Could not parse import ID as integer: {raw_id!r} is out of range")

    return value


def decode_attribute(attr: Attribute, record: dict[str, Any]) -> tuple[Any, bool]:
    """Read one attribute from an API record using the coercion helpers."""
    return _DECODERS[attr.kind](record, attr.wire)


def is_empty(value: Any) -> bool:
    """Empty strings and empty lists read back as unset."""
    return value == "" or value == []


class ResourceAdapter(ABC):
    """
    Abstract base class for CiviCRM resource adapters.

    Subclasses declare which entity they manage and which model dataclass
    describes their attributes. The base class translates models into API
    payloads and API records back into models, and implements the
    create/read/update/delete/import lifecycle with one client call each.
    """

    #: Declarative type name (e.g. "civicrm_group")
    type_name: str = ""
    #: Remote entity type (e.g. "Group")
    entity: str = ""
    #: Human readable name used in messages (e.g. "group")
    label: str = ""
    #: Model dataclass declared with ``attribute()`` fields
    model_cls: type | None = None
    #: Extra filter clauses applied when reading by id
    read_filters: tuple[tuple[Any, ...], ...] = ()

    def __init__(self, client: CiviCRMClient):
        """
        Initialize the adapter with a configured API client.

        Args:
            client: Shared CiviCRM API client
        """
        self.client = client

    @classmethod
    def schema(cls) -> dict[str, Attribute]:
        return schema_of(cls.model_cls)

    # ===== Translation hooks =====

    def encode(self, attr: Attribute, value: Any) -> Any:
        """Translate a declared value into its wire representation."""
        return value

    def decode(self, attr: Attribute, record: dict[str, Any]) -> tuple[Any, bool]:
        """Read an attribute's value from an API record."""
        return decode_attribute(attr, record)

    # ===== Payloads =====

    def to_create_payload(self, model) -> dict[str, Any]:
        """
        Build the ``values`` map for a create call.

        Every attribute with a value is sent. Unset attributes are omitted.
        """
        values = {}
        for name, attr in self.schema().items():
            if attr.computed_only:
                continue
            value = getattr(model, name)
            if value is None:
                continue
            values[attr.wire] = self.encode(attr, value)
        return values

    def to_update_payload(self, model) -> dict[str, Any]:
        """
        Build the ``values`` map for an update call.

        Every attribute with a value is sent. Clearable attributes that are
        now unset are sent as None so the remote system clears them.
        """
        values = {}
        for name, attr in self.schema().items():
            if attr.computed_only or attr.create_only:
                continue
            value = getattr(model, name)
            if value is not None:
                values[attr.wire] = self.encode(attr, value)
            elif attr.clearable:
                values[attr.wire] = None
        return values

    def apply_response(self, model, record: dict[str, Any]):
        """
        Copy the fields of an API record onto a model.

        Present values replace the model's value. Clearable attributes that
        are absent or empty become unset; other absent attributes keep their
        current value. Sensitive attributes are never read back.
        """
        updates = {}
        for name, attr in self.schema().items():
            if attr.sensitive:
                continue

            value, present = self.decode(attr, record)
            if present and not is_empty(value):
                updates[name] = value
            elif attr.clearable:
                updates[name] = None

        return dataclasses.replace(model, **updates)

    # ===== Lifecycle =====

    def _wrap(self, summary: str, detail: str, error: APIError) -> ResourceError:
        return ResourceError(summary, f"{detail}: {error}")

    def _require_id(self, model) -> int:
        if model.id is None:
            raise InputError(f"{self.label} has no id in state")
        return model.id

    def _create(self, model, extra_values: dict[str, Any] | None = None):
        values = self.to_create_payload(model)
        if extra_values:
            values.update(extra_values)

        try:
            record = self.client.create(self.entity, values)
        except APIError as e:
            raise self._wrap(
                f"Error creating {self.label}",
                f"Could not create {self.label}, unexpected error",
                e,
            ) from e

        created = self.apply_response(model, record)
        logger.debug(f"Created {self.label} {created.id}")
        return created

    def create(self, model):
        """
        Create the remote record described by a planned model.

        Returns:
            Model populated from the API response
        """
        logger.debug(f"Creating {self.label}")
        return self._create(model)

    def read(self, model):
        """
        Refresh a model from the remote record with the same id.

        Returns:
            Model populated from the API response
        """
        record_id = self._require_id(model)
        logger.debug(f"Reading {self.label} {record_id}")

        try:
            record = self.client.get_by_id(
                self.entity,
                record_id,
                where=[list(clause) for clause in self.read_filters] or None,
            )
        except APIError as e:
            raise self._wrap(
                f"Error reading {self.label}",
                f"Could not read {self.label} ID {record_id}",
                e,
            ) from e

        current = self.apply_response(model, record)
        logger.debug(f"Read {self.label} {record_id}")
        return current

    def update(self, model, prior):
        """
        Update the remote record to match a planned model.

        Args:
            model: Planned model
            prior: Model from the current state (provides the id)

        Returns:
            Model populated from the API response
        """
        record_id = self._require_id(prior)
        logger.debug(f"Updating {self.label} {record_id}")

        values = self.to_update_payload(model)
        try:
            record = self.client.update(self.entity, record_id, values)
        except APIError as e:
            raise self._wrap(
                f"Error updating {self.label}",
                f"Could not update {self.label} ID {record_id}",
                e,
            ) from e

        updated = self.apply_response(dataclasses.replace(model, id=record_id), record)
        logger.debug(f"Updated {self.label} {record_id}")
        return updated

    def delete(self, model) -> None:
        """Delete the remote record."""
        record_id = self._require_id(model)
        logger.debug(f"Deleting {self.label} {record_id}")

        try:
            self.client.delete(self.entity, record_id)
        except APIError as e:
            raise self._wrap(
                f"Error deleting {self.label}",
                f"Could not delete {self.label} ID {record_id}",
                e,
            ) from e

        logger.debug(f"Deleted {self.label} {record_id}")

    def import_state(self, raw_id: str):
        """
        Seed a model from an external identifier.

        Only the id is set; call ``read`` to populate the rest.
        """
        return self.model_cls(id=parse_import_id(raw_id))
