from .config import settings, get_settings
from .database import Base, create_db_engine, create_session_factory, get_db

__all__ = ["settings", "get_settings", "Base", "create_db_engine", "create_session_factory", "get_db"]
