"""
Settings loaded from the process environment and .env.
"""

from common.config.base_settings import BaseAppSettings

__all__ = ["BaseAppSettings"]
