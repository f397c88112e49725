"""Shared fixtures: an in-memory CiviCRM APIv4 served through httpx.MockTransport."""

import copy
import json
from urllib.parse import parse_qs

import httpx
import pytest

from civicrm_provider.client.api_client import CiviCRMClient

API_KEY = "test-key"
BASE_URL = "https://crm.test"

ACL_ROLE_GROUP_ID = 12

# Values CiviCRM fills in when a create leaves them out
SERVER_DEFAULTS = {
    "OptionValue": {"weight": 1},
    "ACL": {"priority": 0},
    "MailSettings": {"domain_id": 1},
    "SiteEmailAddress": {"domain_id": 1},
}

# Fields the API never returns
WRITE_ONLY = {
    "MailSettings": {"password"},
}


class FakeCiviCRM:
    """
    Minimal APIv4 server keeping records in memory.

    Supports create/get/update/delete with equality filters, the
    ``option_group_id:name`` pseudo-field and error injection.
    """

    def __init__(self):
        self.records: dict[str, dict[int, dict]] = {
            "OptionGroup": {ACL_ROLE_GROUP_ID: {"id": ACL_ROLE_GROUP_ID, "name": "acl_role"}},
        }
        self.acl_role_group_id = ACL_ROLE_GROUP_ID
        self.next_id = 100
        self.requests: list[tuple[str, str, dict]] = []
        self.error_message: str | None = None

    def seed(self, entity: str, record: dict) -> dict:
        record = dict(record)
        if "id" not in record:
            record["id"] = self._new_id()
        self.records.setdefault(entity, {})[record["id"]] = record
        return record

    def calls(self, entity: str | None = None, action: str | None = None):
        return [
            (e, a, p) for e, a, p in self.requests
            if (entity is None or e == entity) and (action is None or a == action)
        ]

    def _new_id(self) -> int:
        self.next_id += 1
        return self.next_id

    def handle(self, request: httpx.Request) -> httpx.Response:
        if request.headers.get("Authorization") != f"Bearer {API_KEY}":
            return httpx.Response(401, text="Unauthorized")

        entity, action = request.url.path.split("/")[-2:]
        if request.method == "GET":
            raw = request.url.params["params"]
        else:
            raw = parse_qs(request.read().decode())["params"][0]
        params = json.loads(raw)
        self.requests.append((entity, action, params))

        if self.error_message:
            return httpx.Response(
                200, json={"error_code": 1, "error_message": self.error_message}
            )

        values = getattr(self, f"_{action}")(entity, params)
        return httpx.Response(
            200, json={"version": 4, "count": len(values), "values": values}
        )

    # ===== Actions =====

    def _create(self, entity, params):
        record = dict(SERVER_DEFAULTS.get(entity, {}))
        record.update({k: v for k, v in params["values"].items() if v is not None})
        record["id"] = self._new_id()

        if entity == "OptionValue":
            record.setdefault("value", str(record["id"]))
        if entity == "CustomGroup":
            record.setdefault("table_name", f"civicrm_value_{record['name']}_{record['id']}")
        if entity == "CustomField":
            record.setdefault("column_name", f"{record['name']}_{record['id']}")

        self.records.setdefault(entity, {})[record["id"]] = record
        return [self._render(entity, record)]

    def _get(self, entity, params):
        matches = self._match(entity, params.get("where", []))
        return [self._render(entity, r, params.get("select")) for r in matches]

    def _update(self, entity, params):
        updated = []
        for record in self._match(entity, params["where"]):
            for key, value in params["values"].items():
                if value is None:
                    record.pop(key, None)
                else:
                    record[key] = value
            updated.append(self._render(entity, record))
        return updated

    def _delete(self, entity, params):
        deleted = []
        for record in self._match(entity, params["where"]):
            del self.records[entity][record["id"]]
            deleted.append({"id": record["id"]})
        return deleted

    # ===== Helpers =====

    def _field(self, record, field):
        if field == "option_group_id:name":
            group = self.records["OptionGroup"].get(record.get("option_group_id"))
            return group["name"] if group else None
        return record.get(field)

    def _match(self, entity, where):
        matches = []
        for record in self.records.get(entity, {}).values():
            if all(op == "=" and self._field(record, f) == v for f, op, v in where):
                matches.append(record)
        return matches

    def _render(self, entity, record, select=None):
        rendered = copy.deepcopy(record)
        for key in WRITE_ONLY.get(entity, ()):
            rendered.pop(key, None)
        if select:
            rendered = {k: v for k, v in rendered.items() if k in select}
        return rendered


@pytest.fixture
def fake_civicrm():
    return FakeCiviCRM()


@pytest.fixture
def make_client(fake_civicrm):
    """Factory for API clients talking to the fake server."""
    def factory(**kwargs):
        http_client = httpx.Client(transport=httpx.MockTransport(fake_civicrm.handle))
        return CiviCRMClient(base_url=BASE_URL, api_key=API_KEY, http_client=http_client)
    return factory


@pytest.fixture
def api_client(make_client):
    client = make_client()
    yield client
    client.http_client.close()


@pytest.fixture
def temp_home(tmp_path, monkeypatch):
    """Set up a temporary home directory for config and state storage."""
    monkeypatch.setenv("CIVICRM_PROVIDER_HOME", str(tmp_path))
    return tmp_path
