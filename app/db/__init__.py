"""Database package."""
from app.db.database import (
    Base,
    async_session_maker,
    check_database_health,
    close_all_engines,
    configure_sqlite_engine,
    create_primary_engine,
    engine,
    get_db,
    init_db,
)

__all__ = [
    "Base",
    "async_session_maker",
    "check_database_health",
    "close_all_engines",
    "configure_sqlite_engine",
    "create_primary_engine",
    "engine",
    "get_db",
    "init_db",
]
