"""Shared fixtures for domain-directory tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from warden.domain.directory.infrastructure.in_memory_store import (
    InMemoryPrincipalStore,
    InMemoryRoleStore,
)
from warden.domain.directory.infrastructure.sql_store import SqlPrincipalStore, SqlRoleStore
from warden.domain.directory.normalizer import UpperInvariantNormalizer
from warden.domain.directory.principal import Principal

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from warden.domain.directory.ports import PrincipalStorePort, RoleStorePort


@pytest.fixture()
def normalizer() -> UpperInvariantNormalizer:
    return UpperInvariantNormalizer()


@pytest.fixture()
def principal() -> Principal:
    """A freshly registered principal with normalized fields."""
    return Principal.register(
        "alice",
        email="alice@example.com",
        normalizer=UpperInvariantNormalizer(),
        principal_id="principal-alice",
    )


@pytest.fixture()
def session_factory() -> Iterator[Callable[[], Session]]:
    """Session factory over a private in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield sessionmaker(engine, expire_on_commit=False, autoflush=False)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def principal_store(
    request: pytest.FixtureRequest,
    session_factory: Callable[[], Session],
) -> PrincipalStorePort:
    """Every principal store adapter, so store contracts are checked on each."""
    if request.param == "memory":
        return InMemoryPrincipalStore()
    store = SqlPrincipalStore(session_factory)
    store.ensure_table_exists()
    return store


@pytest.fixture(params=["memory", "sql"])
def role_store(
    request: pytest.FixtureRequest,
    session_factory: Callable[[], Session],
) -> RoleStorePort:
    if request.param == "memory":
        return InMemoryRoleStore()
    store = SqlRoleStore(session_factory)
    store.ensure_table_exists()
    return store
