"""Read-only data sources for looking up existing CiviCRM records."""

from .base import DataSource
from .group import GroupDataSource
from .acl_role import ACLRoleDataSource
from .acl import ACLDataSource
from .acl_entity_role import ACLEntityRoleDataSource

ALL_DATA_SOURCES = [
    GroupDataSource,
    ACLRoleDataSource,
    ACLDataSource,
    ACLEntityRoleDataSource,
]

__all__ = [
    "DataSource",
    "GroupDataSource",
    "ACLRoleDataSource",
    "ACLDataSource",
    "ACLEntityRoleDataSource",
    "ALL_DATA_SOURCES",
]
