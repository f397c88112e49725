"""
CiviCRM API v4 Client

Provides a generic client for the CiviCRM APIv4 ajax endpoint. Every
operation is a single request against
``<base_url>/civicrm/ajax/api4/<Entity>/<action>``.
"""

import json
import logging
from typing import Any

import httpx

from .coercion import get_int64

logger = logging.getLogger(__name__)

API_PATH = "civicrm/ajax/api4"
DEFAULT_TIMEOUT_SECONDS = 30.0


class APIError(Exception):
    """Raised when an API request fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.body = body


class TransportError(APIError):
    """Raised when the request could not be sent or no response arrived."""
    pass


class ResponseParseError(APIError):
    """Raised when the response body is not a valid API envelope."""
    pass


class EmptyResultError(APIError):
    """Raised when an operation that must affect one record returned none."""
    pass


class NotFoundError(APIError):
    """Raised when a lookup by id matched no record."""
    pass


class CiviCRMClient:
    """
    Generic CiviCRM API v4 client.

    Features:
    - One synchronous round trip per operation, no retries
    - Bearer token authentication
    - Parameters JSON-encoded into a single ``params`` form field
    - Envelope-level error detection
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        insecure: bool = False,
        http_client: httpx.Client | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the CiviCRM site
            api_key: API key sent as a bearer token
            insecure: Skip TLS certificate verification (development only)
            http_client: Optional httpx client (created if None)
            timeout_seconds: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.insecure = insecure
        self.timeout_seconds = timeout_seconds

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(
                timeout=timeout_seconds,
                verify=not insecure,
            )
        else:
            self.http_client = http_client

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _build_url(self, entity: str, action: str) -> str:
        """
        Build the endpoint URL for an entity action.

        Args:
            entity: Entity type (e.g., "Group")
            action: API action (create, get, update, delete)

        Returns:
            Full URL
        """
        return f"{self.base_url}/{API_PATH}/{entity}/{action}"

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "X-Requested-With": "XMLHttpRequest",
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        }

    def _request(
        self,
        method: str,
        entity: str,
        action: str,
        params: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method (GET, POST)
            entity: Entity type
            action: API action
            params: API parameters (where, values, select)

        Returns:
            Parsed response envelope

        Raises:
            TransportError: If the request could not be completed
            APIError: On a non-2xx response or an error in the envelope
            ResponseParseError: If the body is not valid JSON
        """
        url = self._build_url(entity, action)
        form = {"params": json.dumps(params)}

        logger.debug(f"{method} {url}")

        try:
            if method.upper() == "GET":
                response = self.http_client.request(
                    method=method,
                    url=url,
                    headers=self._build_headers(),
                    params=form,
                )
            else:
                response = self.http_client.request(
                    method=method,
                    url=url,
                    headers=self._build_headers(),
                    data=form,
                )
        except httpx.RequestError as e:
            raise TransportError(f"Request failed: {e}") from e

        body = response.text

        if not 200 <= response.status_code < 300:
            raise APIError(
                f"API request failed with status {response.status_code}: {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            envelope = response.json()
        except ValueError as e:
            raise ResponseParseError(
                f"Failed to parse response: {e}, body: {body}",
                status_code=response.status_code,
                body=body,
            ) from e

        if not isinstance(envelope, dict):
            raise ResponseParseError(
                f"Unexpected response format, body: {body}",
                status_code=response.status_code,
                body=body,
            )

        error_code = envelope.get("error_code") or 0
        error_message = envelope.get("error_message") or ""
        if error_code or error_message:
            raise APIError(
                f"API error {error_code}: {error_message}",
                status_code=response.status_code,
                error_code=error_code,
                body=body,
            )

        return envelope

    @staticmethod
    def _values(envelope: dict[str, Any]) -> list[dict[str, Any]]:
        values = envelope.get("values") or []
        # APIv4 keys results by id when indexed
        if isinstance(values, dict):
            values = list(values.values())
        return values

    def create(self, entity: str, values: dict[str, Any]) -> dict[str, Any]:
        """
        Create one record.

        Args:
            entity: Entity type
            values: Field values for the new record

        Returns:
            Created record
        """
        envelope = self._request("POST", entity, "create", {"values": values})

        results = self._values(envelope)
        if not results:
            raise EmptyResultError("No values returned from create operation")

        return results[0]

    def get(
        self,
        entity: str,
        where: list[list[Any]],
        select: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch records matching the filters (single page).

        Args:
            entity: Entity type
            where: Filter clauses as [field, operator, value] triples
            select: Optional list of fields to return

        Returns:
            List of matching records (possibly empty)
        """
        params: dict[str, Any] = {"where": where}
        if select:
            params["select"] = select

        envelope = self._request("POST", entity, "get", params)
        return self._values(envelope)

    def get_by_id(
        self,
        entity: str,
        record_id: int,
        select: list[str] | None = None,
        where: list[list[Any]] | None = None,
    ) -> dict[str, Any]:
        """
        Fetch a single record by id.

        Args:
            entity: Entity type
            record_id: Record id
            select: Optional list of fields to return
            where: Extra filter clauses appended after the id filter

        Returns:
            Matching record

        Raises:
            NotFoundError: If no record matched
        """
        clauses = [["id", "=", record_id]]
        if where:
            clauses.extend(where)

        results = self.get(entity, clauses, select)
        if not results:
            raise NotFoundError(f"{entity} with ID {record_id} not found")

        return results[0]

    def update(
        self,
        entity: str,
        record_id: int,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Update one record by id.

        ``None`` values are sent as JSON null, which clears the field.

        Returns:
            Updated record
        """
        params = {
            "where": [["id", "=", record_id]],
            "values": values,
        }
        envelope = self._request("POST", entity, "update", params)

        results = self._values(envelope)
        if not results:
            raise EmptyResultError("No values returned from update operation")

        return results[0]

    def delete(self, entity: str, record_id: int) -> None:
        """Delete one record by id."""
        params = {"where": [["id", "=", record_id]]}
        self._request("POST", entity, "delete", params)

    def get_option_group_id(self, name: str) -> int:
        """
        Resolve the id of a named option group.

        Args:
            name: Option group name (e.g., "acl_role")

        Returns:
            Option group id

        Raises:
            NotFoundError: If the option group does not exist
        """
        results = self.get("OptionGroup", [["name", "=", name]], ["id"])
        if not results:
            raise NotFoundError(f"OptionGroup '{name}' not found")

        group_id, ok = get_int64(results[0], "id")
        if not ok:
            raise ResponseParseError(f"OptionGroup '{name}' returned no usable id")

        return group_id
