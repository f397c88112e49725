"""Integration test: wire up a complete access-control setup and look it up again."""

from civicrm_provider.core.schema import model_from_state, model_to_state, plan_model
from civicrm_provider.provider import new_data_source, new_resource


def apply(client, type_name, config, prior=None):
    """Plan and create (or update) a resource the way an orchestrator would."""
    adapter = new_resource(type_name, client)
    planned = plan_model(adapter.model_cls, config, prior)
    if prior is None:
        return adapter.create(planned)
    return adapter.update(planned, prior)


def test_access_control_setup(api_client, fake_civicrm):
    group = apply(api_client, "civicrm_group", {
        "name": "event_admins",
        "title": "Event administrators",
        "group_type": ["Access Control"],
    })
    role = apply(api_client, "civicrm_acl_role", {
        "name": "event_editor",
        "label": "Event editor",
    })
    binding = apply(api_client, "civicrm_acl_entity_role", {
        "acl_role_id": int(role.value),
        "entity_id": group.id,
    })
    acl = apply(api_client, "civicrm_acl", {
        "name": "Edit event admins",
        "entity_id": int(role.value),
        "operation": "Edit",
        "object_table": "civicrm_group",
        "object_id": group.id,
    })

    found_group = new_data_source("civicrm_group", api_client).read({"name": "event_admins"})
    assert found_group.id == group.id

    found_role = new_data_source("civicrm_acl_role", api_client).read({"name": "event_editor"})
    assert found_role.id == role.id
    assert found_role.value == role.value

    found_binding = new_data_source("civicrm_acl_entity_role", api_client).read({
        "acl_role_id": int(role.value),
        "entity_id": group.id,
    })
    assert found_binding.id == binding.id

    found_acl = new_data_source("civicrm_acl", api_client).read({"id": acl.id})
    assert found_acl.object_id == group.id
    assert found_acl.operation == "Edit"


def test_state_survives_round_trip_and_refresh(api_client):
    group = apply(api_client, "civicrm_group", {
        "name": "newsletter",
        "title": "Newsletter",
        "group_type": ["Mailing List"],
        "is_hidden": True,
    })

    state = model_to_state(group)
    adapter = new_resource("civicrm_group", api_client)
    restored = model_from_state(adapter.model_cls, state)

    assert adapter.read(restored) == group


def test_unchanged_plan_keeps_remote_record(api_client, fake_civicrm):
    config = {"name": "volunteers", "title": "Volunteers", "frontend_title": "Join us"}
    group = apply(api_client, "civicrm_group", config)

    updated = apply(api_client, "civicrm_group", config, prior=group)

    assert updated == group
    assert fake_civicrm.records["Group"][group.id]["frontend_title"] == "Join us"
