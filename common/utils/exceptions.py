"""
Action exceptions with error codes.

Every failure raised by an action carries a human-readable message and a
machine-readable code so the job runner can report it consistently.
Failures that come from a remote call also carry the HTTP status code.

Example:
    from common.utils import RemoteAPIException

    try:
        result = await action.invoke(params, context)
    except RemoteAPIException as e:
        if e.retryable:
            schedule_retry(e.status_code)
        raise
"""

from typing import Optional, Any, Dict

from common.utils.responses import error_response
from config.okta_config import RETRYABLE_STATUS_CODES


class ActionException(Exception):
    """
    Base action exception with error code support.

    Provides a consistent error format across all actions.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        """
        Create an action exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Serialize into the standard error response shape."""
        return error_response(self.message, code=self.code, details=self.details)


class ValidationException(ActionException):
    """Invalid or missing job parameters."""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)


class ConfigurationException(ActionException):
    """Required environment configuration is missing."""

    def __init__(
        self,
        message: str = "Configuration error",
        code: str = "CONFIGURATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)


class AuthenticationException(ActionException):
    """No usable credentials in the execution context."""

    def __init__(
        self,
        message: str = "No authentication configured",
        code: str = "AUTH_NOT_CONFIGURED",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)


class OAuth2TokenException(ActionException):
    """OAuth2 token exchange failed."""

    def __init__(
        self,
        message: str = "OAuth2 token request failed",
        code: str = "OAUTH2_TOKEN_ERROR",
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)
        self.status_code = status_code


class RemoteAPIException(ActionException):
    """Non-2xx response from the target API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str = "REMOTE_API_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        """True when the job runner may retry this status code."""
        return self.status_code in RETRYABLE_STATUS_CODES

    def to_dict(self) -> Dict[str, Any]:
        return error_response(
            self.message,
            code=self.code,
            details=self.details,
            status_code=self.status_code,
            retryable=self.retryable,
        )
