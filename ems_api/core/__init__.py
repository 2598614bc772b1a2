"""Core app configuration, database, security and error kinds."""

from ems_api.core.config import Settings, get_settings
from ems_api.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]
