"""
Authorization header resolution.

Walks the strategy chain in priority order and asks the first strategy
whose credentials are present for a header value.

Example:
    header = await get_authorization_header(context.environment, context.secrets)
    header = to_ssws(header)  # Okta only
"""

import logging
from typing import Any, List, Mapping, Optional

import httpx

from common.auth.base import AuthKind, AuthStrategy
from common.auth.strategies import (
    BasicAuth,
    BearerTokenAuth,
    OAuth2AuthorizationCodeAuth,
    OAuth2ClientCredentialsAuth,
)
from common.utils.exceptions import AuthenticationException

logger = logging.getLogger(__name__)

# Priority order: first match wins
DEFAULT_STRATEGIES: List[AuthStrategy] = [
    BearerTokenAuth(),
    BasicAuth(),
    OAuth2AuthorizationCodeAuth(),
    OAuth2ClientCredentialsAuth(),
]

NO_AUTH_MESSAGE = (
    "No authentication configured. Provide one of: "
    "BEARER_AUTH_TOKEN, BASIC_USERNAME/BASIC_PASSWORD, "
    "OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN, or OAUTH2_CLIENT_CREDENTIALS_*"
)


def resolve_auth_strategy(
    environment: Optional[Mapping[str, Any]],
    secrets: Optional[Mapping[str, Any]],
    strategies: Optional[List[AuthStrategy]] = None,
) -> AuthStrategy:
    """
    Pick the first strategy whose credentials are configured.

    Args:
        environment: Execution context environment
        secrets: Execution context secrets
        strategies: Strategy chain (defaults to DEFAULT_STRATEGIES)

    Returns:
        The matching AuthStrategy

    Raises:
        AuthenticationException: If no strategy matches
    """
    environment = environment or {}
    secrets = secrets or {}

    for strategy in strategies or DEFAULT_STRATEGIES:
        if strategy.matches(environment, secrets):
            return strategy

    raise AuthenticationException(NO_AUTH_MESSAGE)


def configured_auth_kinds(
    environment: Optional[Mapping[str, Any]],
    secrets: Optional[Mapping[str, Any]],
) -> List[AuthKind]:
    """List every scheme whose credentials are present, in priority order."""
    environment = environment or {}
    secrets = secrets or {}
    return [s.kind for s in DEFAULT_STRATEGIES if s.matches(environment, secrets)]


async def get_authorization_header(
    environment: Optional[Mapping[str, Any]],
    secrets: Optional[Mapping[str, Any]],
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Resolve the Authorization header value for the execution context.

    Args:
        environment: Execution context environment
        secrets: Execution context secrets
        client: Optional HTTP client, used for OAuth2 token exchange

    Returns:
        Authorization header value (e.g., "Bearer xxx" or "Basic xxx")

    Raises:
        AuthenticationException: If no credentials are configured
        ConfigurationException: If OAuth2 environment settings are incomplete
        OAuth2TokenException: If the token exchange fails
    """
    strategy = resolve_auth_strategy(environment, secrets)
    logger.info(f"Using {strategy.kind.value} authentication")
    return await strategy.authorization_header(environment or {}, secrets or {}, client)


def to_ssws(header: str, scheme: str = "SSWS") -> str:
    """
    Rewrite a Bearer header into Okta's SSWS scheme.

    Non-Bearer headers (Basic) are returned unchanged, and a token that
    already carries the SSWS prefix is not prefixed twice.
    """
    if not header.startswith("Bearer "):
        return header

    token = header[len("Bearer "):]
    prefix = f"{scheme} "
    return token if token.startswith(prefix) else f"{prefix}{token}"
