"""
Okta action settings.

Extends the base settings with Okta-specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Okta-specific settings."""

    # ==========================================================================
    # Mock Okta Server (mock_okta.py)
    # ==========================================================================
    # API token accepted as "SSWS <token>" by the mock users endpoint
    MOCK_OKTA_API_TOKEN: str = "mock-okta-api-token"

    # Client registered with the mock token endpoint
    MOCK_OKTA_CLIENT_ID: str = "mock-client-id"
    MOCK_OKTA_CLIENT_SECRET: str = "mock-client-secret"

    # Lifetime reported for issued access tokens (seconds)
    MOCK_OKTA_TOKEN_EXPIRES_IN: int = 3600


settings = Settings()
