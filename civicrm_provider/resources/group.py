"""
Group resource.

Groups are the unit ACLs are granted to. ``group_type`` is declared with
readable names and sent to CiviCRM as option values.
"""

from dataclasses import dataclass
from typing import Any

from civicrm_provider.core.schema import Attribute, AttrKind, attribute

from .base import ResourceAdapter

GROUP_TYPE_VALUES = {
    "Access Control": "1",
    "Mailing List": "2",
}
GROUP_TYPE_NAMES = {value: name for name, value in GROUP_TYPE_VALUES.items()}


def group_types_to_values(names: list[str]) -> list[str]:
    """Translate group type names to option values, dropping unknown names."""
    return [GROUP_TYPE_VALUES[n] for n in names if n in GROUP_TYPE_VALUES]


def group_types_from_values(values: list[Any]) -> list[str]:
    """Translate option values to group type names, dropping unknown values."""
    names = []
    for value in values:
        name = GROUP_TYPE_NAMES.get(str(value))
        if name is not None:
            names.append(name)
    return names


@dataclass
class Group:
    id: int | None = attribute(AttrKind.INT64, computed=True, description="Group ID")
    name: str | None = attribute(AttrKind.STRING, required=True, description="Machine name")
    title: str | None = attribute(AttrKind.STRING, required=True, description="Display title")
    description: str | None = attribute(AttrKind.STRING, optional=True)
    is_active: bool | None = attribute(AttrKind.BOOL, default=True)
    visibility: str | None = attribute(
        AttrKind.STRING,
        default="User and User Admin Only",
        description="'User and User Admin Only' or 'Public Pages'",
    )
    group_type: list[str] | None = attribute(
        AttrKind.STRING_LIST,
        optional=True,
        description="Group types: 'Access Control', 'Mailing List'",
    )
    is_hidden: bool | None = attribute(AttrKind.BOOL, default=False)
    is_reserved: bool | None = attribute(AttrKind.BOOL, default=False)
    frontend_title: str | None = attribute(AttrKind.STRING, optional=True)
    frontend_description: str | None = attribute(AttrKind.STRING, optional=True)
    parents: list[int] | None = attribute(
        AttrKind.INT64_LIST, optional=True, description="Parent group IDs"
    )


class GroupResource(ResourceAdapter):
    """Manages CiviCRM groups."""

    type_name = "civicrm_group"
    entity = "Group"
    label = "group"
    model_cls = Group

    def encode(self, attr: Attribute, value: Any) -> Any:
        if attr.name == "group_type":
            return group_types_to_values(value)
        return value

    def decode(self, attr: Attribute, record: dict[str, Any]) -> tuple[Any, bool]:
        if attr.name == "group_type":
            raw = record.get("group_type")
            if not isinstance(raw, list):
                return [], False
            return group_types_from_values(raw), True
        return super().decode(attr, record)
