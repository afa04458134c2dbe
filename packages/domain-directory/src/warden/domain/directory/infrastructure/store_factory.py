"""Build record stores from DirectorySettings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from warden.domain.directory.infrastructure.in_memory_store import (
    InMemoryPrincipalStore,
    InMemoryRoleStore,
)
from warden.domain.directory.infrastructure.sql_store import SqlPrincipalStore, SqlRoleStore
from warden.domain.directory.settings import get_directory_settings
from warden.infra.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.orm import Session

    from warden.domain.directory.ports import PrincipalStorePort, RoleStorePort
    from warden.domain.directory.settings import DirectorySettings

logger = get_logger(__name__)


def _default_session_factory() -> Callable[[], Session]:
    from warden.infra.persistence.database import get_sync_session_factory

    return get_sync_session_factory()


def create_principal_store(
    settings: DirectorySettings | None = None,
    session_factory: Callable[[], Session] | None = None,
) -> PrincipalStorePort:
    """Build the principal store selected by ``store_backend``.

    Args:
        settings: Directory settings; loaded from the environment if omitted.
        session_factory: Session factory for the SQL backend; defaults to
            the shared factory from ``warden.infra.persistence``.
    """
    if settings is None:
        settings = get_directory_settings()
    if settings.store_backend == "memory":
        logger.info("principal_store_created", backend="memory")
        return InMemoryPrincipalStore()
    store = SqlPrincipalStore(
        session_factory or _default_session_factory(),
        table_name=settings.principal_table,
    )
    if settings.create_tables:
        store.ensure_table_exists()
    logger.info("principal_store_created", backend="sql", table=settings.principal_table)
    return store


def create_role_store(
    settings: DirectorySettings | None = None,
    session_factory: Callable[[], Session] | None = None,
) -> RoleStorePort:
    """Build the role store selected by ``store_backend``."""
    if settings is None:
        settings = get_directory_settings()
    if settings.store_backend == "memory":
        logger.info("role_store_created", backend="memory")
        return InMemoryRoleStore()
    store = SqlRoleStore(
        session_factory or _default_session_factory(),
        table_name=settings.role_table,
    )
    if settings.create_tables:
        store.ensure_table_exists()
    logger.info("role_store_created", backend="sql", table=settings.role_table)
    return store
