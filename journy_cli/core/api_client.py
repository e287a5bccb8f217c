"""API Client for communicating with the journy.io API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import httpx

from journy_cli.core.config import DEFAULT_BASE_URL
from journy_cli.core.errors import (
    ApiError,
    JournyError,
    PreconditionError,
    RateLimitedError,
    RequestFailedError,
    TransportError,
    UnauthorizedError,
)

MISSING_API_KEY = "API key not configured. Run: journy config set --api-key YOUR_KEY"
NON_ASCII_API_KEY = "API key contains non-ASCII characters and cannot be sent in a header"

# operation -> (method, path)
ENDPOINTS: dict[str, tuple[str, str]] = {
    "upsert_user": ("POST", "/users/upsert"),
    "delete_user": ("DELETE", "/users"),
    "upsert_account": ("POST", "/accounts/upsert"),
    "delete_account": ("DELETE", "/accounts"),
    "add_users_to_account": ("POST", "/accounts/users/add"),
    "remove_users_from_account": ("POST", "/accounts/users/remove"),
    "track_event": ("POST", "/track"),
    "get_events": ("GET", "/events"),
    "get_user_properties": ("GET", "/properties/users"),
    "get_account_properties": ("GET", "/properties/accounts"),
    "get_user_segments": ("GET", "/segments/users"),
    "get_account_segments": ("GET", "/segments/accounts"),
    "link_user_to_account": ("POST", "/link"),
    "validate_api_key": ("GET", "/validate"),
    "get_tracking_snippet": ("GET", "/tracking/snippet"),
}


@dataclass
class APIResponse:
    """Wrapper for API responses."""
    success: bool
    data: Optional[dict[str, Any]] = None
    error: Optional[JournyError] = None
    status_code: int = 0

    @property
    def request_id(self) -> Optional[str]:
        """Request identifier the API attaches to every response."""
        meta = (self.data or {}).get("meta")
        if isinstance(meta, dict):
            return meta.get("requestId")
        return None

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""


def _identification(**fields: Optional[str]) -> dict[str, str]:
    """Build an identification record from the supplied fields only."""
    return {key: value for key, value in fields.items() if value}


def _user_refs(user_ids: list[str]) -> list[dict[str, Any]]:
    return [{"identification": {"userId": user_id}} for user_id in user_ids]


def classify_response(response: httpx.Response) -> Optional[JournyError]:
    """Map a non-2xx response to an error kind. Returns None on success."""
    status = response.status_code
    if 200 <= status < 300:
        return None
    if status == 401:
        return UnauthorizedError("Unauthorized: Invalid API key", status_code=status)
    if status == 429:
        return RateLimitedError("Rate limit exceeded (1800 requests/min)", status_code=status)

    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return ApiError(f"API Error: {body['message']}", status_code=status)

    detail = response.reason_phrase or response.text[:200]
    return RequestFailedError(f"Request failed: HTTP {status}: {detail}", status_code=status)


class JournyClient:
    """HTTP client for the journy.io API.

    Every operation returns an ``APIResponse``; nothing is raised, logged or
    retried. The credential is checked before any request is built.
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = (api_key or "").strip()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "JournyClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        return {
            "X-Api-Key": self.api_key,
            "Content-Type": "application/json",
        }

    def _request(self, operation: str, json: Optional[dict] = None) -> APIResponse:
        """Dispatch one operation from the endpoint table.

        Args:
            operation: Key into ``ENDPOINTS``
            json: Request body, already stripped of omitted fields
        """
        if not self.api_key:
            return APIResponse(success=False, error=PreconditionError(MISSING_API_KEY))
        if not self.api_key.isascii():
            return APIResponse(success=False, error=PreconditionError(NON_ASCII_API_KEY))

        method, endpoint = ENDPOINTS[operation]
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.client.request(method, url, json=json, headers=self._headers())
        except httpx.InvalidURL as e:
            return APIResponse(success=False, error=PreconditionError(f"Invalid API URL {url!r}: {e}"))
        except UnicodeEncodeError as e:
            return APIResponse(success=False, error=PreconditionError(f"Request headers cannot be encoded: {e}"))
        except httpx.HTTPError as e:
            return APIResponse(
                success=False,
                error=TransportError(f"Request failed: {type(e).__name__}: {e}"),
            )

        error = classify_response(response)
        if error is not None:
            return APIResponse(success=False, error=error, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            data = {"raw": response.text}
        if not isinstance(data, dict):
            data = {"data": data}

        return APIResponse(success=True, data=data, status_code=response.status_code)

    # Users
    def upsert_user(
        self,
        user_id: str,
        email: Optional[str] = None,
        properties: Optional[dict[str, Any]] = None,
    ) -> APIResponse:
        """Create or update a user."""
        body: dict[str, Any] = {"identification": _identification(userId=user_id, email=email)}
        if properties:
            body["properties"] = properties
        return self._request("upsert_user", json=body)

    def delete_user(self, user_id: Optional[str] = None, email: Optional[str] = None) -> APIResponse:
        """Delete a user by id and/or email."""
        return self._request("delete_user", json={
            "identification": _identification(userId=user_id, email=email),
        })

    # Accounts
    def upsert_account(
        self,
        account_id: str,
        domain: Optional[str] = None,
        properties: Optional[dict[str, Any]] = None,
    ) -> APIResponse:
        """Create or update an account."""
        body: dict[str, Any] = {
            "identification": _identification(accountId=account_id, domain=domain),
        }
        if properties:
            body["properties"] = properties
        return self._request("upsert_account", json=body)

    def delete_account(self, account_id: Optional[str] = None, domain: Optional[str] = None) -> APIResponse:
        """Delete an account by id and/or domain."""
        return self._request("delete_account", json={
            "identification": _identification(accountId=account_id, domain=domain),
        })

    def add_users_to_account(self, account_id: str, user_ids: list[str]) -> APIResponse:
        """Add users to an account. The 100 id limit is checked by the caller."""
        return self._request("add_users_to_account", json={
            "identification": {"accountId": account_id},
            "users": _user_refs(user_ids),
        })

    def remove_users_from_account(self, account_id: str, user_ids: list[str]) -> APIResponse:
        """Remove users from an account. The 100 id limit is checked by the caller."""
        return self._request("remove_users_from_account", json={
            "identification": {"accountId": account_id},
            "users": _user_refs(user_ids),
        })

    # Events
    def track_event(
        self,
        name: str,
        user_id: Optional[str] = None,
        account_id: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> APIResponse:
        """Track an event for a user, an account, or both."""
        body: dict[str, Any] = {"name": name}
        if user_id:
            body["userId"] = user_id
        if account_id:
            body["accountId"] = account_id
        if metadata:
            body["metadata"] = metadata
        return self._request("track_event", json=body)

    def get_events(self) -> APIResponse:
        return self._request("get_events")

    # Properties
    def get_user_properties(self) -> APIResponse:
        return self._request("get_user_properties")

    def get_account_properties(self) -> APIResponse:
        return self._request("get_account_properties")

    # Segments
    def get_user_segments(self) -> APIResponse:
        return self._request("get_user_segments")

    def get_account_segments(self) -> APIResponse:
        return self._request("get_account_segments")

    # Link
    def link_user_to_account(self, user_id: str, account_id: str) -> APIResponse:
        """Link a user to an account."""
        return self._request("link_user_to_account", json={
            "user": {"identification": {"userId": user_id}},
            "account": {"identification": {"accountId": account_id}},
        })

    # Validation & snippet
    def validate_api_key(self) -> APIResponse:
        return self._request("validate_api_key")

    def get_tracking_snippet(self) -> APIResponse:
        return self._request("get_tracking_snippet")
