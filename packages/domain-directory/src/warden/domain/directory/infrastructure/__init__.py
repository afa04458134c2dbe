"""Warden Domain Directory infrastructure -- record store adapters."""

from warden.domain.directory.infrastructure.documents import (
    PrincipalDocument,
    RoleDocument,
)
from warden.domain.directory.infrastructure.in_memory_store import (
    InMemoryPrincipalStore,
    InMemoryRoleStore,
)
from warden.domain.directory.infrastructure.sql_store import (
    SqlPrincipalStore,
    SqlRoleStore,
)
from warden.domain.directory.infrastructure.store_factory import (
    create_principal_store,
    create_role_store,
)

__all__ = [
    "InMemoryPrincipalStore",
    "InMemoryRoleStore",
    "PrincipalDocument",
    "RoleDocument",
    "SqlPrincipalStore",
    "SqlRoleStore",
    "create_principal_store",
    "create_role_store",
]
