"""
Actions module - Job-runner action protocol (invoke/error/halt).
"""

from common.actions.base import ActionContext, ActionHandler, ContextLike

__all__ = ["ActionContext", "ActionHandler", "ContextLike"]
