"""
Authentication module - Pluggable credential strategies (Bearer, Basic, OAuth2).
"""

from common.auth.base import AuthKind, AuthStrategy
from common.auth.strategies import (
    BearerTokenAuth,
    BasicAuth,
    OAuth2AuthorizationCodeAuth,
    OAuth2ClientCredentialsAuth,
)
from common.auth.oauth2 import get_client_credentials_token
from common.auth.resolver import (
    resolve_auth_strategy,
    configured_auth_kinds,
    get_authorization_header,
    to_ssws,
)

__all__ = [
    "AuthKind",
    "AuthStrategy",
    "BearerTokenAuth",
    "BasicAuth",
    "OAuth2AuthorizationCodeAuth",
    "OAuth2ClientCredentialsAuth",
    "get_client_credentials_token",
    "resolve_auth_strategy",
    "configured_auth_kinds",
    "get_authorization_header",
    "to_ssws",
]
