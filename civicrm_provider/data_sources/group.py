"""Group lookup."""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute

from .base import DataSource


@dataclass
class GroupLookup:
    id: int | None = attribute(AttrKind.INT64, optional=True, computed=True)
    name: str | None = attribute(AttrKind.STRING, optional=True, computed=True)
    title: str | None = attribute(AttrKind.STRING, computed=True)
    description: str | None = attribute(AttrKind.STRING, computed=True)
    is_active: bool | None = attribute(AttrKind.BOOL, computed=True)
    visibility: str | None = attribute(AttrKind.STRING, computed=True)


class GroupDataSource(DataSource):
    type_name = "civicrm_group"
    entity = "Group"
    label = "group"
    model_cls = GroupLookup
