"""
Okta Users API client.

Builds sparse profile updates and sends them to
POST /api/v1/users/{userId}, normalizing the response.
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from app.schemas.user import UpdateUserParams
from common.utils.exceptions import RemoteAPIException, ValidationException
from config.okta_config import STANDARD_PROFILE_FIELDS, USER_RESULT_FIELDS, USERS_API_PATH

logger = logging.getLogger(__name__)


def build_profile(params: UpdateUserParams) -> Dict[str, Any]:
    """
    Build the partial profile for an update.

    Standard fields are trimmed and dropped when blank. Additional
    attributes are merged afterwards and win on key collisions.

    Args:
        params: Validated job parameters

    Returns:
        Profile dict with at least one field

    Raises:
        ValidationException: Unparsable or array additional attributes, or nothing to update
    """
    profile: Dict[str, Any] = {}

    for field in STANDARD_PROFILE_FIELDS:
        value = getattr(params, field)
        if value and value.strip():
            profile[field] = value.strip()

    raw_attributes = params.additionalProfileAttributes
    if raw_attributes and raw_attributes.strip():
        try:
            additional = json.loads(raw_attributes)
        except json.JSONDecodeError as e:
            raise ValidationException(f"Invalid additionalProfileAttributes JSON: {e}")

        if isinstance(additional, list):
            raise ValidationException(
                "additionalProfileAttributes must be a JSON object, not an array"
            )

        # null and scalars carry no attributes
        if isinstance(additional, dict):
            profile = {**profile, **additional}

    if not profile:
        raise ValidationException("At least one profile field must be provided to update")

    return profile


class OktaUserService:
    """
    Okta Users API client.
    Sends partial profile updates for a single user.
    """

    def __init__(
        self,
        base_url: str,
        authorization: str,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize OktaUserService.

        Args:
            base_url: Okta org URL without trailing slash
            authorization: Authorization header value (SSWS or Basic)
            client: Optional HTTP client; one is opened per request otherwise
        """
        self._base_url = base_url
        self._authorization = authorization
        self._client = client

    def user_url(self, user_id: str) -> str:
        """URL of a user resource. The userId is used verbatim."""
        return f"{self._base_url}{USERS_API_PATH}/{user_id}"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": self._authorization,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def _post(self, url: str, body: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(url, json=body, headers=self._headers())

        async with httpx.AsyncClient() as client:
            return await client.post(url, json=body, headers=self._headers())

    async def update_user(self, user_id: str, profile: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial profile update.

        Args:
            user_id: Okta user ID
            profile: Fields to update

        Returns:
            dict with id, status, created, activated, statusChanged,
            lastLogin, lastUpdated, profile

        Raises:
            RemoteAPIException: Okta answered with a non-2xx status
            httpx.HTTPError: Transport failure
        """
        response = await self._post(self.user_url(user_id), {"profile": profile})

        if response.is_success:
            user_data = response.json()
            logger.info(f"Successfully updated user {user_data.get('id')} (userId: {user_id})")
            return {field: user_data.get(field) for field in USER_RESULT_FIELDS}

        raise self._update_error(response)

    def _update_error(self, response: httpx.Response) -> RemoteAPIException:
        status_code = response.status_code
        message = f"Failed to update user: HTTP {status_code}"

        try:
            error_body = response.json()
        except ValueError:
            logger.error("Failed to parse error response")
        else:
            logger.error(f"Okta API error response: {error_body}")
            if isinstance(error_body, dict) and error_body.get("errorSummary"):
                message = f"Failed to update user: {error_body['errorSummary']}"

        return RemoteAPIException(message, status_code=status_code)
