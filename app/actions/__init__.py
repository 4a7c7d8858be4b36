"""
Okta job-runner actions.
"""

from app.actions.update_user_by_id import UpdateUserByIdAction, script

__all__ = ["UpdateUserByIdAction", "script"]
