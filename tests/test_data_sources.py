"""Tests for the lookup data sources."""

import pytest

from civicrm_provider.core.models import InputError, ResourceError
from civicrm_provider.data_sources import (
    ACLDataSource,
    ACLEntityRoleDataSource,
    ACLRoleDataSource,
    GroupDataSource,
)


def test_group_lookup_by_name(api_client, fake_civicrm):
    record = fake_civicrm.seed("Group", {
        "name": "admins",
        "title": "Administrators",
        "is_active": True,
        "visibility": "Public Pages",
    })

    found = GroupDataSource(api_client).read({"name": "admins"})

    assert found.id == record["id"]
    assert found.title == "Administrators"
    assert found.visibility == "Public Pages"
    assert found.description is None
    _, _, params = fake_civicrm.calls("Group", "get")[0]
    assert params["where"] == [["name", "=", "admins"]]


def test_group_lookup_requires_filter(api_client, fake_civicrm):
    with pytest.raises(InputError) as exc_info:
        GroupDataSource(api_client).read({})

    assert "At least one of 'id' or 'name' must be specified." in str(exc_info.value)
    assert not fake_civicrm.requests


def test_group_lookup_not_found(api_client):
    with pytest.raises(ResourceError) as exc_info:
        GroupDataSource(api_client).read({"id": 404})

    assert exc_info.value.summary == "Group not found"
    assert exc_info.value.detail == "No group found matching the specified criteria."


def test_lookup_rejects_output_attributes(api_client):
    with pytest.raises(InputError):
        GroupDataSource(api_client).read({"name": "admins", "title": "x"})


def test_acl_role_lookup_always_filters_option_group(api_client, fake_civicrm):
    fake_civicrm.seed("OptionValue", {"name": "editor", "label": "Other", "option_group_id": 99})
    role = fake_civicrm.seed("OptionValue", {
        "name": "editor",
        "label": "Editor",
        "option_group_id": fake_civicrm.acl_role_group_id,
        "value": "3",
        "weight": 2,
    })

    found = ACLRoleDataSource(api_client).read({"name": "editor"})

    assert found.id == role["id"]
    assert found.label == "Editor"
    assert found.value == "3"
    assert found.weight == 2
    _, _, params = fake_civicrm.calls("OptionValue", "get")[0]
    assert params["where"] == [
        ["option_group_id:name", "=", "acl_role"],
        ["name", "=", "editor"],
    ]


def test_acl_role_lookup_requires_filter(api_client, fake_civicrm):
    with pytest.raises(InputError):
        ACLRoleDataSource(api_client).read({})

    assert not fake_civicrm.requests


def test_acl_lookup_by_id(api_client, fake_civicrm):
    acl = fake_civicrm.seed("ACL", {
        "name": "Edit admins",
        "entity_table": "civicrm_acl_role",
        "entity_id": 3,
        "operation": "Edit",
        "object_table": "civicrm_group",
        "object_id": 7,
        "is_active": 1,
        "deny": 0,
        "priority": 5,
    })

    found = ACLDataSource(api_client).read({"id": acl["id"]})

    assert found.operation == "Edit"
    assert found.is_active is True
    assert found.deny is False
    assert found.priority == 5


def test_acl_entity_role_lookup_by_pair(api_client, fake_civicrm):
    binding = fake_civicrm.seed("ACLEntityRole", {
        "acl_role_id": 3,
        "entity_table": "civicrm_group",
        "entity_id": 7,
        "is_active": True,
    })

    found = ACLEntityRoleDataSource(api_client).read({"acl_role_id": 3, "entity_id": 7})

    assert found.id == binding["id"]
    assert found.entity_table == "civicrm_group"
    _, _, params = fake_civicrm.calls("ACLEntityRole", "get")[0]
    assert params["where"] == [["acl_role_id", "=", 3], ["entity_id", "=", 7]]


@pytest.mark.parametrize("config", [
    {},
    {"acl_role_id": 3},
    {"entity_id": 7, "entity_table": "civicrm_group"},
])
def test_acl_entity_role_lookup_requires_id_or_pair(api_client, fake_civicrm, config):
    with pytest.raises(InputError) as exc_info:
        ACLEntityRoleDataSource(api_client).read(config)

    assert "Either 'id' or both 'acl_role_id' and 'entity_id'" in str(exc_info.value)
    assert not fake_civicrm.requests


def test_lookup_api_error(api_client, fake_civicrm):
    fake_civicrm.error_message = "Authorization failed"

    with pytest.raises(ResourceError) as exc_info:
        GroupDataSource(api_client).read({"id": 1})

    assert exc_info.value.summary == "Error reading group"


def test_lookup_empty_string_reads_as_unset(api_client, fake_civicrm):
    fake_civicrm.seed("Group", {"name": "g", "title": "G", "description": ""})

    found = GroupDataSource(api_client).read({"name": "g"})

    assert found.description is None
    assert found.title == "G"


def test_acl_role_lookup_empty_description(api_client, fake_civicrm):
    fake_civicrm.seed("OptionValue", {
        "name": "viewer",
        "label": "Viewer",
        "description": "",
        "option_group_id": fake_civicrm.acl_role_group_id,
    })

    found = ACLRoleDataSource(api_client).read({"name": "viewer"})

    assert found.description is None


def test_base_filters_are_immutable(api_client, fake_civicrm):
    fake_civicrm.seed("OptionValue", {
        "name": "viewer", "label": "Viewer", "option_group_id": fake_civicrm.acl_role_group_id,
    })
    source = ACLRoleDataSource(api_client)

    source.read({"name": "viewer"})
    source.read({"name": "viewer"})

    assert isinstance(ACLRoleDataSource.base_filters, tuple)
    assert ACLRoleDataSource.base_filters == (("option_group_id:name", "=", "acl_role"),)
    _, _, params = fake_civicrm.calls("OptionValue", "get")[-1]
    assert params["where"] == [
        ["option_group_id:name", "=", "acl_role"],
        ["name", "=", "viewer"],
    ]
