"""
Common library for reusable action infrastructure.

This package provides generic modules that can be used across multiple
job-runner actions:

- actions: Action protocol (ActionContext, ActionHandler)
- auth: Pluggable credential strategies (Bearer, Basic, OAuth2)
- utils: Standard responses, exceptions, base URL resolution
- config: Base settings class
"""

from common.actions import ActionContext, ActionHandler
from common.auth import (
    AuthKind,
    AuthStrategy,
    get_authorization_header,
    resolve_auth_strategy,
    to_ssws,
)
from common.utils import (
    success_response,
    error_response,
    ActionException,
    ValidationException,
    ConfigurationException,
    AuthenticationException,
    OAuth2TokenException,
    RemoteAPIException,
    get_base_url,
)
from common.config import BaseAppSettings

__all__ = [
    # Actions
    "ActionContext",
    "ActionHandler",
    # Auth
    "AuthKind",
    "AuthStrategy",
    "get_authorization_header",
    "resolve_auth_strategy",
    "to_ssws",
    # Utils
    "success_response",
    "error_response",
    "ActionException",
    "ValidationException",
    "ConfigurationException",
    "AuthenticationException",
    "OAuth2TokenException",
    "RemoteAPIException",
    "get_base_url",
    # Config
    "BaseAppSettings",
]
