"""Tests for the journy.io API client."""

import httpx
import pytest

from journy_cli.core.api_client import ENDPOINTS, APIResponse, JournyClient, classify_response
from journy_cli.core.errors import (
    ApiError,
    PreconditionError,
    RateLimitedError,
    RequestFailedError,
    TransportError,
    UnauthorizedError,
)

BASE_URL = "https://api.journy.test"


@pytest.fixture
def client(api):
    """A client with a valid key talking to the recording API."""
    with JournyClient("secret-key", base_url=BASE_URL, transport=api.transport) as c:
        yield c


class TestRequestBodies:
    """Request bodies carry only the fields that were supplied."""

    def test_track_event_without_metadata(self, client, api):
        """A bare user event should contain only name and userId."""
        client.track_event("signed_in", user_id="u1")
        assert api.last_body == {"name": "signed_in", "userId": "u1"}

    def test_track_event_with_everything(self, client, api):
        client.track_event("paid", user_id="u1", account_id="a1", metadata={"amount": 10})
        assert api.last_body == {
            "name": "paid",
            "userId": "u1",
            "accountId": "a1",
            "metadata": {"amount": 10},
        }

    def test_track_event_empty_metadata_is_dropped(self, client, api):
        client.track_event("signed_in", account_id="a1", metadata={})
        assert api.last_body == {"name": "signed_in", "accountId": "a1"}

    def test_upsert_user_full(self, client, api):
        """Email joins the identification; properties sit beside it."""
        client.upsert_user("u1", "a@b.com", {"plan": "Pro"})
        assert api.last_body == {
            "identification": {"userId": "u1", "email": "a@b.com"},
            "properties": {"plan": "Pro"},
        }

    def test_upsert_user_minimal(self, client, api):
        client.upsert_user("u1")
        assert api.last_body == {"identification": {"userId": "u1"}}

    def test_upsert_account_without_domain(self, client, api):
        """Omitting the domain must not produce a domain key."""
        client.upsert_account("a1", properties={"seats": 5})
        body = api.last_body
        assert body == {"identification": {"accountId": "a1"}, "properties": {"seats": 5}}
        assert "domain" not in body["identification"]

    def test_upsert_account_with_domain(self, client, api):
        client.upsert_account("a1", "acme.com")
        assert api.last_body == {"identification": {"accountId": "a1", "domain": "acme.com"}}

    def test_delete_user_by_email_only(self, client, api):
        client.delete_user(email="a@b.com")
        assert api.last_body == {"identification": {"email": "a@b.com"}}

    def test_delete_account_by_id_only(self, client, api):
        client.delete_account("a1")
        assert api.last_body == {"identification": {"accountId": "a1"}}

    def test_add_users_to_account_boundary(self, client, api):
        """Exactly 100 ids are forwarded unchanged."""
        user_ids = [f"u{i}" for i in range(100)]
        response = client.add_users_to_account("a1", user_ids)

        assert response.success
        body = api.last_body
        assert body["identification"] == {"accountId": "a1"}
        assert len(body["users"]) == 100
        assert body["users"][0] == {"identification": {"userId": "u0"}}

    def test_remove_users_from_account(self, client, api):
        client.remove_users_from_account("a1", ["u1", "u2"])
        assert api.last_body == {
            "identification": {"accountId": "a1"},
            "users": [
                {"identification": {"userId": "u1"}},
                {"identification": {"userId": "u2"}},
            ],
        }

    def test_link_user_to_account(self, client, api):
        client.link_user_to_account("u1", "a1")
        assert api.last_body == {
            "user": {"identification": {"userId": "u1"}},
            "account": {"identification": {"accountId": "a1"}},
        }


class TestEndpoints:
    """Method, path and headers follow the endpoint table."""

    @pytest.mark.parametrize(
        "operation",
        [
            "get_events",
            "get_user_properties",
            "get_account_properties",
            "get_user_segments",
            "get_account_segments",
            "validate_api_key",
            "get_tracking_snippet",
        ],
    )
    def test_read_operations(self, client, api, operation):
        getattr(client, operation)()

        request = api.requests[-1]
        method, path = ENDPOINTS[operation]
        assert method == "GET"
        assert request.method == "GET"
        assert request.url.path == path
        assert request.content == b""

    def test_mutating_verbs(self, client, api):
        client.upsert_user("u1")
        client.delete_user("u1")
        client.track_event("x", user_id="u1")

        assert [(r.method, r.url.path) for r in api.requests] == [
            ("POST", "/users/upsert"),
            ("DELETE", "/users"),
            ("POST", "/track"),
        ]

    def test_headers(self, client, api):
        client.validate_api_key()

        request = api.requests[-1]
        assert request.headers["X-Api-Key"] == "secret-key"
        assert request.headers["Content-Type"] == "application/json"
        assert str(request.url).startswith(BASE_URL)


class TestCredential:
    """The credential is checked before anything is sent."""

    @pytest.mark.parametrize("api_key", [None, "", "   "])
    def test_missing_key_is_precondition_error(self, api, api_key):
        client = JournyClient(api_key, base_url=BASE_URL, transport=api.transport)

        response = client.upsert_user("u1")

        assert not response.success
        assert isinstance(response.error, PreconditionError)
        assert "API key not configured" in response.message
        assert api.requests == []

    def test_every_operation_checks_the_key(self, api):
        client = JournyClient(None, base_url=BASE_URL, transport=api.transport)

        responses = [
            client.get_events(),
            client.delete_account("a1"),
            client.link_user_to_account("u1", "a1"),
            client.add_users_to_account("a1", ["u1"]),
        ]

        assert all(isinstance(r.error, PreconditionError) for r in responses)
        assert api.requests == []

    def test_non_ascii_key_is_precondition_error(self, api):
        client = JournyClient("clé-secrète", base_url=BASE_URL, transport=api.transport)

        response = client.validate_api_key()

        assert isinstance(response.error, PreconditionError)
        assert "non-ASCII" in response.message
        assert api.requests == []

    def test_malformed_base_url_is_precondition_error(self, api):
        client = JournyClient("secret-key", base_url="https://api.journy.test\x00", transport=api.transport)

        response = client.get_events()

        assert not response.success
        assert isinstance(response.error, PreconditionError)
        assert "Invalid API URL" in response.message
        assert api.requests == []


class TestErrorClassification:
    """Failures are classified into a single error kind."""

    def test_unauthorized_wins_over_message(self, client, api):
        api.respond(401, {"message": "Your key is bad"})
        response = client.validate_api_key()

        assert isinstance(response.error, UnauthorizedError)
        assert response.status_code == 401
        assert "Unauthorized" in response.message

    def test_rate_limited_wins_over_message(self, client, api):
        api.respond(429, {"message": "slow down"})
        response = client.track_event("x", user_id="u1")

        assert isinstance(response.error, RateLimitedError)
        assert "1800" in response.message

    def test_message_body_becomes_api_error(self, client, api):
        api.respond(400, {"message": "identification is required"})
        response = client.upsert_user("u1")

        assert isinstance(response.error, ApiError)
        assert response.message == "API Error: identification is required"
        assert response.status_code == 400

    def test_message_body_on_server_error(self, client, api):
        api.respond(503, {"message": "maintenance"})
        response = client.get_events()

        assert isinstance(response.error, ApiError)

    def test_other_status_is_request_failed(self, client, api):
        api.respond(500, text="boom")
        response = client.get_events()

        assert isinstance(response.error, RequestFailedError)
        assert "500" in response.message

    def test_connect_error_is_transport_error(self, client, api):
        api.fail_with(httpx.ConnectError("name resolution failed"))
        response = client.get_events()

        assert isinstance(response.error, TransportError)
        assert "name resolution failed" in response.message
        assert response.status_code == 0

    def test_timeout_is_transport_error(self, client, api):
        api.fail_with(httpx.ReadTimeout("timed out"))
        response = client.get_events()

        assert isinstance(response.error, TransportError)
        assert "ReadTimeout" in response.message

    def test_classify_success_returns_none(self):
        assert classify_response(httpx.Response(201, json={})) is None


class TestSuccessPayload:
    """Successful responses are relayed as parsed payloads."""

    def test_request_id(self, client, api):
        api.respond(200, {"data": {}, "meta": {"requestId": "abc-123", "status": 200}})
        response = client.upsert_user("u1")

        assert response.success
        assert response.request_id == "abc-123"
        assert response.error is None

    def test_non_json_body_is_wrapped(self, client, api):
        api.respond(200, text="<script>journy</script>")
        response = client.get_tracking_snippet()

        assert response.success
        assert response.data == {"raw": "<script>journy</script>"}

    def test_request_id_missing(self):
        assert APIResponse(success=True, data={"data": []}).request_id is None
