"""Record store ports specialised to directory records."""

from __future__ import annotations

from typing import TypeAlias

from warden.domain.directory.principal import Principal
from warden.domain.directory.role import Role
from warden.foundation.domain.ports import RecordStorePort

PrincipalStorePort: TypeAlias = RecordStorePort[Principal]
RoleStorePort: TypeAlias = RecordStorePort[Role]

__all__ = ["PrincipalStorePort", "RoleStorePort"]
