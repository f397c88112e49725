"""ACL rule lookup."""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute

from .base import DataSource


@dataclass
class ACLLookup:
    id: int | None = attribute(AttrKind.INT64, optional=True, computed=True)
    name: str | None = attribute(AttrKind.STRING, optional=True, computed=True)
    entity_table: str | None = attribute(AttrKind.STRING, computed=True)
    entity_id: int | None = attribute(AttrKind.INT64, computed=True)
    operation: str | None = attribute(AttrKind.STRING, computed=True)
    object_table: str | None = attribute(AttrKind.STRING, computed=True)
    object_id: int | None = attribute(AttrKind.INT64, computed=True)
    is_active: bool | None = attribute(AttrKind.BOOL, computed=True)
    deny: bool | None = attribute(AttrKind.BOOL, computed=True)
    priority: int | None = attribute(AttrKind.INT64, computed=True)


class ACLDataSource(DataSource):
    type_name = "civicrm_acl"
    entity = "ACL"
    label = "ACL"
    model_cls = ACLLookup
