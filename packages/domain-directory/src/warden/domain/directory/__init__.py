"""Warden Domain Directory -- principal and role directory query core."""

from warden.domain.directory.normalizer import LookupNormalizer, UpperInvariantNormalizer
from warden.domain.directory.predicates import (
    by_claim,
    by_login,
    by_normalized_email,
    by_normalized_user_name,
    by_role,
)
from warden.domain.directory.principal import Principal
from warden.domain.directory.principal_directory import PrincipalDirectory
from warden.domain.directory.query import QueryExecutor
from warden.domain.directory.role import Role
from warden.domain.directory.role_directory import RoleDirectory
from warden.domain.directory.settings import DirectorySettings, get_directory_settings

__all__ = [
    "DirectorySettings",
    "LookupNormalizer",
    "Principal",
    "PrincipalDirectory",
    "QueryExecutor",
    "Role",
    "RoleDirectory",
    "UpperInvariantNormalizer",
    "by_claim",
    "by_login",
    "by_normalized_email",
    "by_normalized_user_name",
    "by_role",
    "get_directory_settings",
]
