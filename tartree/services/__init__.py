"""Service layer for tartree"""

from .config_service import ConfigService

__all__ = ["ConfigService"]
