"""ACL entity role lookup."""

from dataclasses import dataclass

from civicrm_provider.core.schema import AttrKind, attribute

from .base import DataSource


@dataclass
class ACLEntityRoleLookup:
    id: int | None = attribute(AttrKind.INT64, optional=True, computed=True)
    acl_role_id: int | None = attribute(AttrKind.INT64, optional=True, computed=True)
    entity_table: str | None = attribute(AttrKind.STRING, optional=True, computed=True)
    entity_id: int | None = attribute(AttrKind.INT64, optional=True, computed=True)
    is_active: bool | None = attribute(AttrKind.BOOL, computed=True)


class ACLEntityRoleDataSource(DataSource):
    """Looks up a role binding by id, or by role and group together."""

    type_name = "civicrm_acl_entity_role"
    entity = "ACLEntityRole"
    label = "ACL entity role"
    model_cls = ACLEntityRoleLookup
    filters = ("id", "acl_role_id", "entity_table", "entity_id")

    def missing_filter_message(self, model) -> str | None:
        has_id = model.id is not None
        has_pair = model.acl_role_id is not None and model.entity_id is not None
        if not has_id and not has_pair:
            return "Either 'id' or both 'acl_role_id' and 'entity_id' must be specified."
        return None
