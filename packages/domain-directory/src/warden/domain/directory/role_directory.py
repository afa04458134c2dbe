"""Role directory service.

Creates, renames and removes roles, and resolves role names to the
membership keys stored on principals. Normalized names and keys are unique
across roles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from warden.domain.directory.normalizer import UpperInvariantNormalizer
from warden.domain.directory.predicates import by_normalized_role_name, by_role_key
from warden.domain.directory.query import QueryExecutor
from warden.domain.directory.role import Role
from warden.foundation.domain.exceptions import ConflictError, NotFoundError
from warden.infra.observability import get_logger

if TYPE_CHECKING:
    from warden.domain.directory.normalizer import LookupNormalizer
    from warden.domain.directory.ports import RoleStorePort

logger = get_logger(__name__)


class RoleDirectory:
    """Manages roles through a record store."""

    def __init__(
        self,
        store: RoleStorePort,
        normalizer: LookupNormalizer | None = None,
    ) -> None:
        self._store = store
        self._normalizer: LookupNormalizer = normalizer or UpperInvariantNormalizer()

    def _snapshot(self) -> QueryExecutor[Role]:
        return QueryExecutor(self._store.load_all())

    def create(self, name: str, *, role_id: str | None = None) -> Role:
        """Create and persist a role.

        Raises:
            ValidationError: If the name is empty.
            ConflictError: If the normalized name or key is already used,
                or the id is taken.
        """
        role = Role.create(name, self._normalizer, role_id=role_id)
        if self._store.load(role.id) is not None:
            raise ConflictError(f"Role '{role.id}' already exists", role_id=role.id)
        self._ensure_name_unclaimed(role)
        self._store.save(role)
        logger.info("role_created", role_id=role.id, role_key=role.key)
        return role

    def rename(self, role_id: str, name: str) -> Role:
        """Rename a role; its membership key does not change.

        Raises:
            NotFoundError: If no role has this id.
            ConflictError: If another role already uses the new name, or
                holds it as its membership key.
        """
        role = self._store.load(role_id)
        if role is None:
            raise NotFoundError("Role", role_id)
        previous = role.normalized_name
        role.rename(name, self._normalizer)
        self._ensure_name_unclaimed(role)
        self._store.save(role)
        logger.info(
            "role_renamed",
            role_id=role.id,
            previous_name=previous,
            normalized_name=role.normalized_name,
        )
        return role

    def delete(self, role_id: str) -> None:
        """Hard delete a role.

        Memberships held by principals are left untouched; removing them is
        the caller's decision.

        Raises:
            NotFoundError: If no role has this id.
        """
        if self._store.load(role_id) is None:
            raise NotFoundError("Role", role_id)
        self._store.delete(role_id)
        logger.info("role_deleted", role_id=role_id)

    def find_by_id(self, role_id: str) -> Role | None:
        return self._store.load(role_id)

    def find_by_name(self, name: str) -> Role | None:
        """Find by role name; the argument is normalized first."""
        normalized = self._normalizer(name)
        if not normalized:
            return None
        return self._snapshot().find(by_normalized_role_name(normalized))

    def resolve_key(self, name: str) -> str | None:
        """Membership key for a role name, or None for unknown roles."""
        role = self.find_by_name(name)
        return role.key if role is not None else None

    def all_roles(self) -> list[Role]:
        """Every role in creation order."""
        return self._store.load_all()

    def _ensure_name_unclaimed(self, role: Role) -> None:
        """Reject a role whose normalized name or key another role already holds."""
        name_taken = by_normalized_role_name(role.normalized_name)
        key_taken = by_role_key(role.normalized_name)
        own_key_taken = by_role_key(role.key)
        clash = self._snapshot().find(
            lambda other: other.id != role.id
            and (name_taken(other) or key_taken(other) or own_key_taken(other))
        )
        if clash is not None:
            logger.warning(
                "role_name_rejected",
                role_id=role.id,
                normalized_name=role.normalized_name,
                clashing_role_id=clash.id,
            )
            raise ConflictError(
                f"Role '{role.name}' already exists",
                normalized_name=role.normalized_name,
                clashing_role_id=clash.id,
            )
