"""Resource adapters for CiviCRM entities."""

from .base import ResourceAdapter
from .group import GroupResource
from .acl_role import ACLRoleResource
from .acl import ACLResource
from .acl_entity_role import ACLEntityRoleResource
from .tag import TagResource
from .contact_type import ContactTypeResource
from .custom_group import CustomGroupResource
from .custom_field import CustomFieldResource
from .mail_settings import MailSettingsResource
from .relationship_type import RelationshipTypeResource
from .site_email_address import SiteEmailAddressResource

ALL_RESOURCES = [
    GroupResource,
    ACLRoleResource,
    ACLResource,
    ACLEntityRoleResource,
    TagResource,
    ContactTypeResource,
    CustomGroupResource,
    CustomFieldResource,
    MailSettingsResource,
    RelationshipTypeResource,
    SiteEmailAddressResource,
]

__all__ = [
    "ResourceAdapter",
    "GroupResource",
    "ACLRoleResource",
    "ACLResource",
    "ACLEntityRoleResource",
    "TagResource",
    "ContactTypeResource",
    "CustomGroupResource",
    "CustomFieldResource",
    "MailSettingsResource",
    "RelationshipTypeResource",
    "SiteEmailAddressResource",
    "ALL_RESOURCES",
]
