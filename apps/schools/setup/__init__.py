"""Setup Module."""

from schools.setup.config import Settings, get_settings
from schools.setup.database import build_engine, build_session_factory, get_db_session
from schools.setup.dependencies import get_add_school_command, get_list_schools_query

__all__ = [
    "Settings",
    "get_settings",
    "build_engine",
    "build_session_factory",
    "get_db_session",
    "get_add_school_command",
    "get_list_schools_query",
]
