"""
Okta Mock API Server

A FastAPI mock server that simulates the Okta endpoints used by the actions,
for local development and testing without a real Okta org.

Run with: uvicorn mock_okta:app --port 5003 --reload

Endpoints:
    POST /api/v1/users/{userId}   partial profile update (SSWS token required)
    POST /oauth2/v1/token         client credentials grant
"""

import base64
import copy
import secrets
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import parse_qs

from fastapi import FastAPI, Header, Request
from fastapi.responses import JSONResponse

from app.config import settings


# =============================================================================
# APP SETUP
# =============================================================================

app = FastAPI(
    title="Okta Mock API",
    description="Mock Okta server for action development",
    version="1.0.0",
)


# =============================================================================
# MOCK DATA STORES
# =============================================================================

mock_tokens: set[str] = set()

SEED_USERS = {
    "00u1abcdEFGH2345ijkl": {
        "id": "00u1abcdEFGH2345ijkl",
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
    },
}

mock_users: dict[str, dict] = copy.deepcopy(SEED_USERS)


def reset_mock_state() -> None:
    """Restore seeded users and forget issued tokens."""
    mock_tokens.clear()
    mock_users.clear()
    mock_users.update(copy.deepcopy(SEED_USERS))


def okta_error(status_code: int, code: str, summary: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "errorCode": code,
            "errorSummary": summary,
            "errorLink": code,
            "errorId": f"oae{secrets.token_hex(8)}",
            "errorCauses": [],
        },
    )


def is_authorized(authorization: Optional[str]) -> bool:
    if not authorization or not authorization.startswith("SSWS "):
        return False
    token = authorization[len("SSWS "):]
    return token == settings.MOCK_OKTA_API_TOKEN or token in mock_tokens


def now_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000Z")


# =============================================================================
# USERS
# =============================================================================


@app.post("/api/v1/users/{user_id}")
async def update_user(user_id: str, request: Request, authorization: Optional[str] = Header(None)):
    if not is_authorized(authorization):
        return okta_error(401, "E0000011", "Invalid token provided")

    user = mock_users.get(user_id)
    if not user:
        return okta_error(404, "E0000007", f"Not found: Resource not found: {user_id} (User)")

    try:
        body = await request.json()
    except ValueError:
        return okta_error(400, "E0000003", "The request body was not well-formed.")

    profile = body.get("profile") if isinstance(body, dict) else None
    if not isinstance(profile, dict):
        return okta_error(400, "E0000001", "Api validation failed: profile")

    user["profile"] = {**user["profile"], **profile}
    user["lastUpdated"] = now_iso()
    return user


# =============================================================================
# OAUTH2
# =============================================================================


def _client_from_header(authorization: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    if not authorization or not authorization.startswith("Basic "):
        return None, None
    try:
        decoded = base64.b64decode(authorization[len("Basic "):]).decode("utf-8")
    except ValueError:
        return None, None
    client_id, _, client_secret = decoded.partition(":")
    return client_id, client_secret


@app.post("/oauth2/v1/token")
async def token(request: Request, authorization: Optional[str] = Header(None)):
    form = {k: v[0] for k, v in parse_qs((await request.body()).decode("utf-8")).items()}

    if form.get("grant_type") != "client_credentials":
        return JSONResponse(
            status_code=400,
            content={
                "error": "unsupported_grant_type",
                "error_description": "The authorization grant type is not supported.",
            },
        )

    client_id, client_secret = _client_from_header(authorization)
    if client_id is None:
        client_id = form.get("client_id")
        client_secret = form.get("client_secret")

    if (
        client_id != settings.MOCK_OKTA_CLIENT_ID
        or client_secret != settings.MOCK_OKTA_CLIENT_SECRET
    ):
        return JSONResponse(
            status_code=401,
            content={
                "error": "invalid_client",
                "error_description": "The client secret supplied for a confidential client is invalid.",
            },
        )

    access_token = f"mock_access_{secrets.token_hex(16)}"
    mock_tokens.add(access_token)

    return {
        "token_type": "Bearer",
        "expires_in": settings.MOCK_OKTA_TOKEN_EXPIRES_IN,
        "access_token": access_token,
        "scope": form.get("scope", "okta.users.manage"),
    }
