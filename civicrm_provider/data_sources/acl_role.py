"""ACL role lookup."""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute
from civicrm_provider.resources.acl_role import ACL_ROLE_OPTION_GROUP

from .base import DataSource


@dataclass
class ACLRoleLookup:
    id: int | None = attribute(AttrKind.INT64, optional=True, computed=True)
    name: str | None = attribute(AttrKind.STRING, optional=True, computed=True)
    label: str | None = attribute(AttrKind.STRING, computed=True)
    description: str | None = attribute(AttrKind.STRING, computed=True)
    is_active: bool | None = attribute(AttrKind.BOOL, computed=True)
    weight: int | None = attribute(AttrKind.INT64, computed=True)
    value: str | None = attribute(AttrKind.STRING, computed=True)


class ACLRoleDataSource(DataSource):
    """Looks up an ACL role among the acl_role option values."""

    type_name = "civicrm_acl_role"
    entity = "OptionValue"
    label = "ACL role"
    model_cls = ACLRoleLookup
    base_filters = (("option_group_id:name", "=", ACL_ROLE_OPTION_GROUP),)
