"""
Okta Update User By ID action.

Updates an existing user's profile in Okta using their Okta userId as
identifier. Supports optional firstName, lastName, email, login, department,
employeeNumber and additionalProfileAttributes.

The job runner calls the three entry points:
    result = await script.invoke(params, context)
    await script.error({**params, "error": exc}, context)   # always re-raises
    ack = await script.halt({**params, "reason": "timeout"}, context)
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import ValidationError

from app.schemas.user import HaltResult, UpdateUserParams
from app.services.okta_user_service import OktaUserService, build_profile
from common.actions.base import ActionContext, ActionHandler, ContextLike
from common.auth.resolver import get_authorization_header, to_ssws
from common.utils.exceptions import ValidationException
from common.utils.urls import get_base_url
from config.okta_config import OKTA_DEFAULTS, OKTA_TOKEN_SCHEME

logger = logging.getLogger(__name__)


def _parse_params(params: Mapping[str, Any]) -> UpdateUserParams:
    user_id = params.get("userId")
    if not isinstance(user_id, str) or not user_id.strip():
        raise ValidationException("Invalid or missing userId parameter")

    try:
        return UpdateUserParams.model_validate(dict(params))
    except ValidationError as e:
        raise ValidationException(
            "Invalid job parameters",
            details=e.errors(include_url=False, include_input=False),
        )


class UpdateUserByIdAction(ActionHandler):
    """
    Partial profile update for one Okta user.

    Every invocation is linear: validate, resolve URL, build profile,
    resolve auth, send, normalize. Nothing is kept between invocations.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the action.

        Args:
            client: Optional shared HTTP client (used for the token exchange
                and the update request). A client is opened per request otherwise.
        """
        self._client = client

    @property
    def action_name(self) -> str:
        return "okta-update-user-by-id"

    async def invoke(self, params: Mapping[str, Any], context: ContextLike) -> Dict[str, Any]:
        """
        Update a user's profile.

        Args:
            params: Job input parameters (userId plus profile fields)
            context: Execution context with environment and secrets

        Returns:
            dict with id, status, created, activated, statusChanged,
            lastLogin, lastUpdated, profile

        Raises:
            ValidationException: Bad userId, bad JSON, or no profile field
            ConfigurationException: No base URL or incomplete OAuth2 env
            AuthenticationException: No credentials configured
            OAuth2TokenException: Token exchange failed
            RemoteAPIException: Okta returned a non-2xx status
        """
        ctx = ActionContext.coerce(context)
        user_id = params.get("userId")

        logger.info(f"[{self.action_name}] Starting Okta user update for userId: {user_id}")

        job = _parse_params(params)
        base_url = get_base_url(params, ctx.environment)
        profile = build_profile(job)

        authorization = await get_authorization_header(ctx.environment, ctx.secrets, self._client)
        authorization = to_ssws(authorization, OKTA_TOKEN_SCHEME)

        service = OktaUserService(base_url, authorization, client=self._client)
        return await service.update_user(job.userId, profile)

    async def error(self, params: Mapping[str, Any], context: ContextLike) -> Dict[str, Any]:
        """
        Log the failure and hand it back to the job runner.

        The runner decides whether to retry (429, 502, 503, 504),
        so the original exception is always re-raised unchanged.
        """
        error = params.get("error")
        user_id = params.get("userId")
        logger.error(f"[{self.action_name}] User update failed for userId {user_id}: {error}")

        if isinstance(error, BaseException):
            raise error
        raise RuntimeError(str(error))

    async def halt(self, params: Mapping[str, Any], context: ContextLike) -> Dict[str, Any]:
        """
        Acknowledge a halt.

        The update is a single POST that either completed or didn't,
        so there is nothing to clean up.
        """
        reason = params.get("reason")
        user_id = params.get("userId")
        logger.info(f"[{self.action_name}] User update job is being halted ({reason}) for userId: {user_id}")

        return HaltResult(
            userId=str(user_id) if user_id else OKTA_DEFAULTS["unknown_user_id"],
            reason=reason,
            haltedAt=datetime.now(timezone.utc).isoformat(),
            cleanupCompleted=True,
        ).model_dump()


script = UpdateUserByIdAction()


async def invoke(params: Mapping[str, Any], context: ContextLike) -> Dict[str, Any]:
    return await script.invoke(params, context)


async def error(params: Mapping[str, Any], context: ContextLike) -> Dict[str, Any]:
    return await script.error(params, context)


async def halt(params: Mapping[str, Any], context: ContextLike) -> Dict[str, Any]:
    return await script.halt(params, context)
