"""
Configuration module - App-specific constants for the Okta action.
"""

from config.okta_config import (
    USERS_API_PATH,
    OKTA_TOKEN_SCHEME,
    STANDARD_PROFILE_FIELDS,
    USER_RESULT_FIELDS,
    RETRYABLE_STATUS_CODES,
    OKTA_DEFAULTS,
)

__all__ = [
    "USERS_API_PATH",
    "OKTA_TOKEN_SCHEME",
    "STANDARD_PROFILE_FIELDS",
    "USER_RESULT_FIELDS",
    "RETRYABLE_STATUS_CODES",
    "OKTA_DEFAULTS",
]
