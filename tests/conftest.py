"""Shared fixtures for integration tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from warden.domain.directory import DirectorySettings, PrincipalDirectory, RoleDirectory
from warden.domain.directory.infrastructure import create_principal_store, create_role_store

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.orm import Session


@pytest.fixture()
def session_factory() -> Iterator[sessionmaker[Session]]:
    """Session factory over a private in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield sessionmaker(engine, expire_on_commit=False, autoflush=False)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def directory_settings(request: pytest.FixtureRequest) -> DirectorySettings:
    """Settings for each store backend; the environment is not consulted."""
    return DirectorySettings(_env_file=None, store_backend=request.param)


@pytest.fixture()
def principals(
    directory_settings: DirectorySettings,
    session_factory: sessionmaker[Session],
) -> PrincipalDirectory:
    store = create_principal_store(directory_settings, session_factory=session_factory)
    return PrincipalDirectory(store)


@pytest.fixture()
def roles(
    directory_settings: DirectorySettings,
    session_factory: sessionmaker[Session],
) -> RoleDirectory:
    store = create_role_store(directory_settings, session_factory=session_factory)
    return RoleDirectory(store)
