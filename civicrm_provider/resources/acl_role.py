"""
ACL role resource.

ACL roles are not an entity of their own: they are option values in the
``acl_role`` option group.
"""

from dataclasses import dataclass

from civicrm_provider.client.api_client import APIError
from civicrm_provider.core.schema import AttrKind, attribute

from .base import ResourceAdapter

ACL_ROLE_OPTION_GROUP = "acl_role"


@dataclass
class ACLRole:
    id: int | None = attribute(AttrKind.INT64, computed=True, description="Option value ID")
    name: str | None = attribute(AttrKind.STRING, required=True)
    label: str | None = attribute(AttrKind.STRING, required=True)
    description: str | None = attribute(AttrKind.STRING, optional=True)
    is_active: bool | None = attribute(AttrKind.BOOL, default=True)
    weight: int | None = attribute(AttrKind.INT64, optional=True, computed=True)
    value: str | None = attribute(
        AttrKind.STRING, computed=True, description="Option value assigned by CiviCRM"
    )


class ACLRoleResource(ResourceAdapter):
    """Manages ACL roles (OptionValue records in the acl_role group)."""

    type_name = "civicrm_acl_role"
    entity = "OptionValue"
    label = "ACL role"
    model_cls = ACLRole
    read_filters = (("option_group_id:name", "=", ACL_ROLE_OPTION_GROUP),)

    def create(self, model):
        """Resolve the acl_role option group, then create the option value."""
        try:
            option_group_id = self.client.get_option_group_id(ACL_ROLE_OPTION_GROUP)
        except APIError as e:
            raise self._wrap(
                "Error looking up option group",
                f"Could not find {ACL_ROLE_OPTION_GROUP} option group",
                e,
            ) from e

        return self._create(model, extra_values={"option_group_id": option_group_id})
