"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Holds the values every action shares: the target address, logging, and the
credential sets understood by common.auth. Extend this class for
action-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        # Action-specific settings
        OKTA_API_VERSION: str = "v1"

    settings = Settings()
    context = settings.to_context()
"""

from typing import ClassVar, Dict, List, Optional, Tuple
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.actions.base import ActionContext
from common.auth.base import AuthKind
from common.auth.resolver import configured_auth_kinds


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for action-specific settings.
    """

    # ==========================================================================
    # Target Settings
    # ==========================================================================
    ADDRESS: Optional[str] = None

    # ==========================================================================
    # Authentication Secrets
    # ==========================================================================
    BEARER_AUTH_TOKEN: Optional[str] = None

    BASIC_USERNAME: Optional[str] = None
    BASIC_PASSWORD: Optional[str] = None

    OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN: Optional[str] = None

    OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET: Optional[str] = None

    # ==========================================================================
    # OAuth2 Client Credentials Settings
    # ==========================================================================
    OAUTH2_CLIENT_CREDENTIALS_TOKEN_URL: Optional[str] = None
    OAUTH2_CLIENT_CREDENTIALS_CLIENT_ID: Optional[str] = None
    OAUTH2_CLIENT_CREDENTIALS_SCOPE: Optional[str] = None
    OAUTH2_CLIENT_CREDENTIALS_AUDIENCE: Optional[str] = None
    OAUTH2_CLIENT_CREDENTIALS_AUTH_STYLE: Optional[str] = None  # "InHeader" or "InParams"

    # ==========================================================================
    # Runtime Settings
    # ==========================================================================
    LOG_LEVEL: str = "INFO"

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow action-specific settings
        case_sensitive=True,
    )

    SECRET_FIELDS: ClassVar[Tuple[str, ...]] = (
        "BEARER_AUTH_TOKEN",
        "BASIC_USERNAME",
        "BASIC_PASSWORD",
        "OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN",
        "OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET",
    )

    ENVIRONMENT_FIELDS: ClassVar[Tuple[str, ...]] = (
        "ADDRESS",
        "OAUTH2_CLIENT_CREDENTIALS_TOKEN_URL",
        "OAUTH2_CLIENT_CREDENTIALS_CLIENT_ID",
        "OAUTH2_CLIENT_CREDENTIALS_SCOPE",
        "OAUTH2_CLIENT_CREDENTIALS_AUDIENCE",
        "OAUTH2_CLIENT_CREDENTIALS_AUTH_STYLE",
    )

    def get_environment(self) -> Dict[str, str]:
        """Collect the non-secret context values that are set."""
        return self._collect(self.ENVIRONMENT_FIELDS)

    def get_secrets(self) -> Dict[str, str]:
        """Collect the secret context values that are set."""
        return self._collect(self.SECRET_FIELDS)

    def _collect(self, names) -> Dict[str, str]:
        values = {}
        for name in names:
            value = getattr(self, name)
            if value:
                values[name] = value
        return values

    def to_context(self) -> ActionContext:
        """Build an execution context from the loaded settings."""
        return ActionContext(
            environment=self.get_environment(),
            secrets=self.get_secrets(),
        )

    def configured_auth_kinds(self) -> List[AuthKind]:
        """List the credential sets present, in resolution priority order."""
        return configured_auth_kinds(self.get_environment(), self.get_secrets())

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        if not self.configured_auth_kinds():
            errors.append(
                "One of BEARER_AUTH_TOKEN, BASIC_USERNAME/BASIC_PASSWORD, "
                "OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN or "
                "OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET is required"
            )

        if self.OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET and not (
            self.OAUTH2_CLIENT_CREDENTIALS_TOKEN_URL and self.OAUTH2_CLIENT_CREDENTIALS_CLIENT_ID
        ):
            errors.append(
                "OAUTH2_CLIENT_CREDENTIALS_TOKEN_URL and OAUTH2_CLIENT_CREDENTIALS_CLIENT_ID "
                "are required when using OAuth2 client credentials"
            )

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
