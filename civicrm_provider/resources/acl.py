"""ACL rule resource."""

from dataclasses import dataclass

from civicrm_provider.core.models import InputError
from civicrm_provider.core.schema import AttrKind, attribute

from .base import ResourceAdapter

ACL_OPERATIONS = ("Edit", "View", "Create", "Delete", "Search", "All")


@dataclass
class ACL:
    id: int | None = attribute(AttrKind.INT64, computed=True)
    name: str | None = attribute(AttrKind.STRING, required=True)
    entity_table: str | None = attribute(
        AttrKind.STRING, default="civicrm_acl_role", description="Table of the grantee"
    )
    entity_id: int | None = attribute(
        AttrKind.INT64, required=True, description="ACL role ID the rule applies to"
    )
    operation: str | None = attribute(
        AttrKind.STRING, required=True, description="Edit, View, Create, Delete, Search or All"
    )
    object_table: str | None = attribute(
        AttrKind.STRING, required=True, description="Protected table (e.g. civicrm_group)"
    )
    object_id: int | None = attribute(AttrKind.INT64, optional=True)
    is_active: bool | None = attribute(AttrKind.BOOL, default=True)
    deny: bool | None = attribute(AttrKind.BOOL, default=False)
    priority: int | None = attribute(AttrKind.INT64, optional=True, computed=True)


def check_operation(operation: str) -> None:
    if operation not in ACL_OPERATIONS:
        raise InputError(
            f"Invalid ACL operation '{operation}'. Must be one of: {', '.join(ACL_OPERATIONS)}"
        )


class ACLResource(ResourceAdapter):
    """Manages ACL rules."""

    type_name = "civicrm_acl"
    entity = "ACL"
    label = "ACL"
    model_cls = ACL

    def to_create_payload(self, model):
        check_operation(model.operation)
        return super().to_create_payload(model)

    def to_update_payload(self, model):
        check_operation(model.operation)
        return super().to_update_payload(model)
