"""ACL entity role resource: binds an ACL role to a group."""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute

from .base import ResourceAdapter


@dataclass
class ACLEntityRole:
    id: int | None = attribute(AttrKind.INT64, computed=True)
    acl_role_id: int | None = attribute(AttrKind.INT64, required=True)
    entity_table: str | None = attribute(AttrKind.STRING, default="civicrm_group")
    entity_id: int | None = attribute(
        AttrKind.INT64, required=True, description="ID of the group receiving the role"
    )
    is_active: bool | None = attribute(AttrKind.BOOL, default=True)


class ACLEntityRoleResource(ResourceAdapter):
    type_name = "civicrm_acl_entity_role"
    entity = "ACLEntityRole"
    label = "ACL entity role"
    model_cls = ACLEntityRole
