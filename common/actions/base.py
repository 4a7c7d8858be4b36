"""
Base classes for job-runner actions.

Defines the ActionContext schema and the ActionHandler abstract base class.
The job runner owns invocation, retry scheduling and cancellation; an action
only implements the three entry points of its protocol.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field


class ActionContext(BaseModel):
    """
    Execution context handed to every entry point.

    Lives for one invocation and is never mutated by the action.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    environment: Dict[str, Any] = Field(default_factory=dict)
    """Non-secret configuration (ADDRESS, OAUTH2_CLIENT_CREDENTIALS_*, ...)."""

    secrets: Dict[str, Any] = Field(default_factory=dict)
    """Credential material. Never logged."""

    outputs: Dict[str, Any] = Field(default_factory=dict)
    """Outputs of previous jobs, owned by the runner."""

    @classmethod
    def coerce(cls, context: Union["ActionContext", Mapping[str, Any], None]) -> "ActionContext":
        """Accept either a context instance or the runner's plain mapping."""
        if isinstance(context, cls):
            return context
        # The runner may send null for an empty section
        values = {k: v for k, v in (context or {}).items() if v is not None}
        return cls.model_validate(values)


ContextLike = Union[ActionContext, Mapping[str, Any]]


class ActionHandler(ABC):
    """
    Abstract base class for job-runner actions.

    Each action implements invoke/error/halt. Handlers never retry on
    their own; failures are raised back to the runner.
    """

    @property
    @abstractmethod
    def action_name(self) -> str:
        """
        Unique identifier for this action.

        Returns:
            Name string (e.g., 'okta-update-user-by-id')
        """
        pass

    @abstractmethod
    async def invoke(self, params: Mapping[str, Any], context: ContextLike) -> Dict[str, Any]:
        """
        Run the action.

        Args:
            params: Job input parameters
            context: Execution context with environment and secrets

        Returns:
            Job result mapping
        """
        pass

    @abstractmethod
    async def error(self, params: Mapping[str, Any], context: ContextLike) -> Dict[str, Any]:
        """
        Handle a failure raised by invoke.

        Args:
            params: Original params plus the raised `error`
            context: Execution context

        Returns:
            Recovery result mapping, if the action can recover
        """
        pass

    @abstractmethod
    async def halt(self, params: Mapping[str, Any], context: ContextLike) -> Dict[str, Any]:
        """
        Acknowledge a halt requested by the job runner.

        Args:
            params: Original params plus the halt `reason`
            context: Execution context

        Returns:
            Cleanup result mapping
        """
        pass
