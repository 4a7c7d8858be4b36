"""
Okta API services.
"""

from app.services.okta_user_service import OktaUserService, build_profile

__all__ = ["OktaUserService", "build_profile"]
