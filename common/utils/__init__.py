"""
Utilities module - Common helpers for action responses, exceptions, and URLs.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    ActionException,
    ValidationException,
    ConfigurationException,
    AuthenticationException,
    OAuth2TokenException,
    RemoteAPIException,
)
from common.utils.urls import get_base_url

__all__ = [
    "success_response",
    "error_response",
    "ActionException",
    "ValidationException",
    "ConfigurationException",
    "AuthenticationException",
    "OAuth2TokenException",
    "RemoteAPIException",
    "get_base_url",
]
