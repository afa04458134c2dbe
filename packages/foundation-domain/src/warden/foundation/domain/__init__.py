"""Warden Foundation Domain -- pure Python domain primitives.

This package provides the foundational building blocks for the user
directory: exceptions, validated value objects, and port interfaces.
"""

from warden.foundation.domain.directory_value_objects import (
    Claim,
    LoginInfo,
    PrincipalId,
    RoleName,
)
from warden.foundation.domain.exceptions import (
    ConflictError,
    DomainError,
    DuplicateLoginError,
    NotFoundError,
    ValidationError,
)
from warden.foundation.domain.ports import RecordStorePort

__all__ = [
    "Claim",
    "ConflictError",
    "DomainError",
    "DuplicateLoginError",
    "LoginInfo",
    "NotFoundError",
    "PrincipalId",
    "RecordStorePort",
    "RoleName",
    "ValidationError",
]
