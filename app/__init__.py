"""
Okta action-specific code.

This package contains the Okta implementations:
- actions: Job-runner entry points (invoke, error, halt)
- services: Okta Users API client
- schemas: Job parameter and result models
- config: Action settings

Uses generic infrastructure from the common/ package.
"""

from app.config import settings

__all__ = ["settings"]
