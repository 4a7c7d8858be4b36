"""
Pydantic schemas for Okta action parameters and results.
"""

from app.schemas.user import UpdateUserParams, HaltResult

__all__ = ["UpdateUserParams", "HaltResult"]
