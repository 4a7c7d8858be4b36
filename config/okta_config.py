"""
Okta API configuration constants.

These are fixed values that don't change per environment.
Environment-specific values (org URL, credentials) come from the execution context.
"""

# Users API path (userId is appended verbatim)
USERS_API_PATH = "/api/v1/users"

# Okta expects its legacy SSWS scheme instead of Bearer
OKTA_TOKEN_SCHEME = "SSWS"

# Standard profile fields accepted as job parameters, in payload order
STANDARD_PROFILE_FIELDS = (
    "firstName",
    "lastName",
    "email",
    "login",
    "department",
    "employeeNumber",
)

# Fields copied from the Okta user record into the action result
USER_RESULT_FIELDS = (
    "id",
    "status",
    "created",
    "activated",
    "statusChanged",
    "lastLogin",
    "lastUpdated",
    "profile",
)

# Status codes the job runner may retry
RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})

# Default values
OKTA_DEFAULTS = {
    "unknown_user_id": "unknown",
}
