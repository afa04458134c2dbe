"""Predicate builders, one per lookup kind.

Each builder returns a pure predicate over a single record. Predicates
read the record and never change it. Composition is not offered: every
directory lookup is a single-predicate lookup.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from warden.domain.directory.principal import Principal
    from warden.domain.directory.role import Role

PrincipalPredicate = Callable[["Principal"], bool]
RolePredicate = Callable[["Role"], bool]


def by_normalized_user_name(value: str) -> PrincipalPredicate:
    """Exact match on ``normalized_user_name``."""

    def predicate(principal: Principal) -> bool:
        return principal.normalized_user_name == value

    return predicate


def by_normalized_email(value: str) -> PrincipalPredicate:
    """Exact match on ``normalized_email``."""

    def predicate(principal: Principal) -> bool:
        return principal.normalized_email == value

    return predicate


def by_login(login_provider: str, provider_key: str) -> PrincipalPredicate:
    """Principal has a login with this (provider, key) pair."""

    def predicate(principal: Principal) -> bool:
        return principal.has_login(login_provider, provider_key)

    return predicate


def by_claim(claim_type: str, claim_value: str) -> PrincipalPredicate:
    """Principal holds a claim with this (type, value)."""

    def predicate(principal: Principal) -> bool:
        return any(claim.matches(claim_type, claim_value) for claim in principal.claims)

    return predicate


def by_role(role_key: str) -> PrincipalPredicate:
    """Principal's role set contains ``role_key``."""

    def predicate(principal: Principal) -> bool:
        return role_key in principal.roles

    return predicate


def by_normalized_role_name(value: str) -> RolePredicate:
    """Exact match on a role's ``normalized_name``."""

    def predicate(role: Role) -> bool:
        return role.normalized_name == value

    return predicate


def by_role_key(role_key: str) -> RolePredicate:
    """Exact match on a role's membership key."""

    def predicate(role: Role) -> bool:
        return role.key == role_key

    return predicate
