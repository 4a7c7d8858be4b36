"""
OAuth2 client credentials token exchange.

Fetches an access token from a token endpoint using a client ID and secret.
Client credentials are sent as a Basic header by default, or in the form
body when the auth style is "InParams".
"""

import json
import logging
from typing import Optional

import httpx

from common.utils.exceptions import ConfigurationException, OAuth2TokenException

logger = logging.getLogger(__name__)

AUTH_STYLE_IN_PARAMS = "InParams"


async def get_client_credentials_token(
    token_url: str,
    client_id: str,
    client_secret: str,
    scope: Optional[str] = None,
    audience: Optional[str] = None,
    auth_style: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Exchange client credentials for an access token.

    Args:
        token_url: Token endpoint URL
        client_id: OAuth2 client ID
        client_secret: OAuth2 client secret
        scope: Optional space-separated scopes
        audience: Optional audience
        auth_style: "InParams" to send credentials in the body, anything else for a Basic header
        client: Optional HTTP client to reuse

    Returns:
        The access token string

    Raises:
        ConfigurationException: If token_url, client_id or client_secret is missing
        OAuth2TokenException: If the token endpoint rejects the request
    """
    if not token_url or not client_id or not client_secret:
        raise ConfigurationException(
            "OAuth2 Client Credentials flow requires tokenUrl, clientId, and clientSecret"
        )

    data = {"grant_type": "client_credentials"}

    if scope:
        data["scope"] = scope

    if audience:
        data["audience"] = audience

    headers = {
        "Content-Type": "application/x-www-form-urlencoded",
        "Accept": "application/json",
    }
    auth = None

    if auth_style == AUTH_STYLE_IN_PARAMS:
        data["client_id"] = client_id
        data["client_secret"] = client_secret
    else:
        auth = httpx.BasicAuth(client_id, client_secret)

    logger.info(f"Requesting OAuth2 client credentials token from {token_url}")

    if client is not None:
        response = await client.post(token_url, data=data, headers=headers, auth=auth)
    else:
        async with httpx.AsyncClient() as own_client:
            response = await own_client.post(token_url, data=data, headers=headers, auth=auth)

    if not response.is_success:
        try:
            error_text = json.dumps(response.json())
        except ValueError:
            error_text = response.text

        logger.error(f"OAuth2 token request failed with status {response.status_code}")
        raise OAuth2TokenException(
            f"OAuth2 token request failed: {response.status_code} "
            f"{response.reason_phrase} - {error_text}",
            status_code=response.status_code,
        )

    payload = response.json()
    access_token = payload.get("access_token") if isinstance(payload, dict) else None

    if not access_token:
        raise OAuth2TokenException("No access_token in OAuth2 response")

    return access_token
