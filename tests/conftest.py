"""Shared test fixtures for the Okta action tests."""

import pytest
import httpx

import mock_okta


OKTA_ADDRESS = "https://example.okta.com"
USER_ID = "user123"


@pytest.fixture
def user_record():
    return {
        "id": USER_ID,
        "status": "ACTIVE",
        "created": "2024-01-15T10:00:00.000Z",
        "activated": "2024-01-15T10:00:00.000Z",
        "statusChanged": "2024-01-15T10:00:00.000Z",
        "lastLogin": "2024-01-16T08:30:00.000Z",
        "lastUpdated": "2024-01-16T14:15:00.000Z",
        "profile": {
            "firstName": "Jane",
            "lastName": "Smith",
            "email": "jane.smith@example.com",
            "login": "jane.smith@example.com",
            "department": "Engineering",
        },
        "_links": {"self": {"href": f"{OKTA_ADDRESS}/api/v1/users/{USER_ID}"}},
    }


@pytest.fixture
def bearer_context():
    return {
        "environment": {"ADDRESS": OKTA_ADDRESS},
        "secrets": {"BEARER_AUTH_TOKEN": "test-okta-token-123456"},
        "outputs": {},
    }


@pytest.fixture
def captured():
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(captured):
    """
    Build an AsyncClient whose transport records each request and answers
    with the response returned by *respond(request)*.
    """
    def _make(respond):
        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return respond(request)
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make


@pytest.fixture
def okta_client(make_client, user_record):
    """Client that answers every request with the user record."""
    return make_client(lambda request: httpx.Response(200, json=user_record))


@pytest.fixture
def mock_okta_client():
    """Client wired to the FastAPI mock Okta server."""
    mock_okta.reset_mock_state()
    yield httpx.AsyncClient(transport=httpx.ASGITransport(app=mock_okta.app))
    mock_okta.reset_mock_state()
