"""
Concrete authentication strategies.

One class per supported credential scheme:
- BEARER_AUTH_TOKEN secret
- BASIC_USERNAME + BASIC_PASSWORD secrets
- OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN secret (pre-issued token)
- OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET secret + OAUTH2_CLIENT_CREDENTIALS_* environment
"""

from typing import Any, Mapping, Optional

import httpx

from common.auth.base import AuthKind, AuthStrategy, basic, bearer
from common.auth.oauth2 import get_client_credentials_token
from common.utils.exceptions import ConfigurationException


class BearerTokenAuth(AuthStrategy):
    """Static bearer token."""

    SECRET = "BEARER_AUTH_TOKEN"

    @property
    def kind(self) -> AuthKind:
        return AuthKind.BEARER

    def matches(self, environment: Mapping[str, Any], secrets: Mapping[str, Any]) -> bool:
        return bool(secrets.get(self.SECRET))

    async def authorization_header(
        self,
        environment: Mapping[str, Any],
        secrets: Mapping[str, Any],
        client: Optional[httpx.AsyncClient] = None,
    ) -> str:
        return bearer(secrets[self.SECRET])


class BasicAuth(AuthStrategy):
    """Username and password."""

    USERNAME = "BASIC_USERNAME"
    PASSWORD = "BASIC_PASSWORD"

    @property
    def kind(self) -> AuthKind:
        return AuthKind.BASIC

    def matches(self, environment: Mapping[str, Any], secrets: Mapping[str, Any]) -> bool:
        return bool(secrets.get(self.USERNAME)) and bool(secrets.get(self.PASSWORD))

    async def authorization_header(
        self,
        environment: Mapping[str, Any],
        secrets: Mapping[str, Any],
        client: Optional[httpx.AsyncClient] = None,
    ) -> str:
        return basic(secrets[self.USERNAME], secrets[self.PASSWORD])


class OAuth2AuthorizationCodeAuth(AuthStrategy):
    """Access token already issued through an authorization code flow."""

    SECRET = "OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN"

    @property
    def kind(self) -> AuthKind:
        return AuthKind.OAUTH2_AUTHORIZATION_CODE

    def matches(self, environment: Mapping[str, Any], secrets: Mapping[str, Any]) -> bool:
        return bool(secrets.get(self.SECRET))

    async def authorization_header(
        self,
        environment: Mapping[str, Any],
        secrets: Mapping[str, Any],
        client: Optional[httpx.AsyncClient] = None,
    ) -> str:
        return bearer(secrets[self.SECRET])


class OAuth2ClientCredentialsAuth(AuthStrategy):
    """
    Client credentials grant.

    The client secret lives in secrets; the token URL, client ID and
    optional scope, audience and auth style live in the environment.
    A fresh token is requested on every call.
    """

    SECRET = "OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET"
    ENV_PREFIX = "OAUTH2_CLIENT_CREDENTIALS_"

    @property
    def kind(self) -> AuthKind:
        return AuthKind.OAUTH2_CLIENT_CREDENTIALS

    def matches(self, environment: Mapping[str, Any], secrets: Mapping[str, Any]) -> bool:
        return bool(secrets.get(self.SECRET))

    def _env(self, environment: Mapping[str, Any], name: str) -> Optional[str]:
        return environment.get(f"{self.ENV_PREFIX}{name}")

    async def authorization_header(
        self,
        environment: Mapping[str, Any],
        secrets: Mapping[str, Any],
        client: Optional[httpx.AsyncClient] = None,
    ) -> str:
        token_url = self._env(environment, "TOKEN_URL")
        client_id = self._env(environment, "CLIENT_ID")

        if not token_url or not client_id:
            raise ConfigurationException(
                "OAuth2 Client Credentials flow requires TOKEN_URL and CLIENT_ID in env"
            )

        token = await get_client_credentials_token(
            token_url=token_url,
            client_id=client_id,
            client_secret=secrets[self.SECRET],
            scope=self._env(environment, "SCOPE"),
            audience=self._env(environment, "AUDIENCE"),
            auth_style=self._env(environment, "AUTH_STYLE"),
            client=client,
        )

        return f"Bearer {token}"
