"""
Abstract authentication strategy interface.

Defines the contract that every credential scheme must implement.
Strategies are tried in a fixed priority order; the first one whose
credentials are present in the execution context produces the
Authorization header.

Example:
    from common.auth import resolve_auth_strategy

    strategy = resolve_auth_strategy(environment, secrets)
    header = await strategy.authorization_header(environment, secrets, client)
"""

import base64
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping, Optional

import httpx


class AuthKind(str, Enum):
    """Supported credential schemes, in resolution priority order."""

    BEARER = "bearer"
    BASIC = "basic"
    OAUTH2_AUTHORIZATION_CODE = "oauth2_authorization_code"
    OAUTH2_CLIENT_CREDENTIALS = "oauth2_client_credentials"


class AuthStrategy(ABC):
    """
    Abstract authentication strategy.

    Implement this interface for each credential scheme.
    `authorization_header` is async because some schemes need a
    token exchange before a header can be produced.
    """

    @property
    @abstractmethod
    def kind(self) -> AuthKind:
        """
        Scheme identifier for this strategy.

        Returns:
            AuthKind member
        """
        pass

    @abstractmethod
    def matches(self, environment: Mapping[str, Any], secrets: Mapping[str, Any]) -> bool:
        """
        Check whether the context holds this scheme's credentials.

        Args:
            environment: Execution context environment
            secrets: Execution context secrets

        Returns:
            True if this strategy can authenticate the request
        """
        pass

    @abstractmethod
    async def authorization_header(
        self,
        environment: Mapping[str, Any],
        secrets: Mapping[str, Any],
        client: Optional[httpx.AsyncClient] = None,
    ) -> str:
        """
        Build the Authorization header value.

        Args:
            environment: Execution context environment
            secrets: Execution context secrets
            client: HTTP client for strategies that call a token endpoint

        Returns:
            Header value (e.g., "Bearer xxx" or "Basic xxx")
        """
        pass


def bearer(token: str) -> str:
    """Prefix a token with Bearer unless it already carries the prefix."""
    return token if token.startswith("Bearer ") else f"Bearer {token}"


def basic(username: str, password: str) -> str:
    """Encode a username/password pair as a Basic header value."""
    credentials = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {credentials}"
