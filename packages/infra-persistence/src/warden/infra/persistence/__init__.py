"""Warden Infra Persistence -- SQLAlchemy engine and session factories."""

from warden.infra.persistence.database import (
    DatabaseManager,
    DatabaseSettings,
    dispose_engine,
    get_database_manager,
    get_sync_engine,
    get_sync_session_factory,
)

__all__ = [
    "DatabaseManager",
    "DatabaseSettings",
    "dispose_engine",
    "get_database_manager",
    "get_sync_engine",
    "get_sync_session_factory",
]
