"""Core app configuration and database."""

from inputly.core.config import get_settings, settings
from inputly.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
