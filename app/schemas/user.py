"""
Okta user action schemas.

Job parameters and handler results for the update-user-by-id action.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


# =============================================================================
# Job Parameters
# =============================================================================

class UpdateUserParams(BaseModel):
    """Parameters for updating a user by Okta userId."""

    model_config = ConfigDict(extra="ignore")

    userId: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    login: Optional[str] = None
    department: Optional[str] = None
    employeeNumber: Optional[str] = None
    additionalProfileAttributes: Optional[str] = None
    """JSON object of extra profile attributes, merged over the standard fields."""
    address: Optional[str] = None
    """Okta org URL, overrides the ADDRESS environment value."""


# =============================================================================
# Handler Results
# =============================================================================

class HaltResult(BaseModel):
    """Acknowledgement returned by the halt handler."""
    userId: str
    reason: Optional[Any] = None
    haltedAt: str
    cleanupCompleted: bool = True
