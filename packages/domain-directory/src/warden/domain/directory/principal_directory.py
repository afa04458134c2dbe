"""Principal directory service.

Entry point for account-management callers: registration, sign-in
bookkeeping, claim and role administration. Lookups run the query executor
over a fresh ``load_all`` snapshot. Commands that take a Principal commit it
through the store; in-memory mutations (``warden.domain.directory.mutations``)
are applied by callers before ``update``.

Cross-principal invariants enforced here:
1. Login pairs are unique across the directory (DuplicateLoginError)
2. Principal ids are unique (ConflictError on create)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from warden.domain.directory import mutations
from warden.domain.directory.normalizer import UpperInvariantNormalizer
from warden.domain.directory.predicates import (
    by_claim,
    by_login,
    by_normalized_email,
    by_normalized_user_name,
    by_role,
)
from warden.domain.directory.query import QueryExecutor
from warden.foundation.domain.exceptions import (
    ConflictError,
    DuplicateLoginError,
    NotFoundError,
)
from warden.infra.observability import get_logger

if TYPE_CHECKING:
    from warden.domain.directory.normalizer import LookupNormalizer
    from warden.domain.directory.ports import PrincipalStorePort
    from warden.domain.directory.principal import Principal
    from warden.foundation.domain.directory_value_objects import LoginInfo

logger = get_logger(__name__)


class PrincipalDirectory:
    """Looks up and commits principals through a record store.

    Attributes:
        _store: Persistence collaborator for principals.
        _normalizer: Normalizer applied to name and email lookups.
    """

    def __init__(
        self,
        store: PrincipalStorePort,
        normalizer: LookupNormalizer | None = None,
    ) -> None:
        self._store = store
        self._normalizer: LookupNormalizer = normalizer or UpperInvariantNormalizer()

    @property
    def normalizer(self) -> LookupNormalizer:
        return self._normalizer

    def _snapshot(self) -> QueryExecutor[Principal]:
        return QueryExecutor(self._store.load_all())

    # -- Commands --

    def create(self, principal: Principal) -> Principal:
        """Persist a newly registered principal.

        Raises:
            ConflictError: If a principal with the same id exists.
            DuplicateLoginError: If one of its logins belongs to another principal.
        """
        if self._store.load(principal.id) is not None:
            raise ConflictError(
                f"Principal '{principal.id}' already exists",
                principal_id=principal.id,
            )
        self._ensure_logins_unclaimed(principal)
        self._store.save(principal)
        logger.info("principal_created", principal_id=principal.id)
        return principal

    def update(self, principal: Principal) -> Principal:
        """Commit in-memory changes of an existing principal.

        Raises:
            NotFoundError: If the principal was never created or was deleted.
            DuplicateLoginError: If one of its logins belongs to another principal.
        """
        self._ensure_updatable(principal)
        self._store.save(principal)
        logger.debug("principal_updated", principal_id=principal.id)
        return principal

    def delete(self, principal_id: str) -> None:
        """Hard delete a principal.

        Raises:
            NotFoundError: If no principal has this id.
        """
        if self._store.load(principal_id) is None:
            raise NotFoundError("Principal", principal_id)
        self._store.delete(principal_id)
        logger.info("principal_deleted", principal_id=principal_id)

    def add_login(self, principal: Principal, login: LoginInfo) -> None:
        """Link an external login in memory after a directory-wide check.

        The change is committed by a later ``update``.

        Raises:
            DuplicateLoginError: If any principal already owns the pair.
        """
        owner = self.find_by_login(login.login_provider, login.provider_key)
        if owner is not None and owner.id != principal.id:
            raise DuplicateLoginError(
                login.login_provider,
                login.provider_key,
                principal_id=principal.id,
                owner_id=owner.id,
            )
        mutations.add_login(principal, login)
        logger.info(
            "login_linked",
            principal_id=principal.id,
            login_provider=login.login_provider,
        )

    def record_failed_sign_in(self, principal: Principal) -> int:
        """Increment the access-failed counter and commit it.

        The principal is checked before the counter changes; a rejected
        commit leaves it untouched.

        Returns:
            The new count.

        Raises:
            NotFoundError: If the principal was never created or was deleted.
            DuplicateLoginError: If one of its logins belongs to another principal.
        """
        self._ensure_updatable(principal)
        count = mutations.increment_access_failed_count(principal)
        self._store.save(principal)
        logger.info("access_failed_recorded", principal_id=principal.id, count=count)
        return count

    def record_successful_sign_in(self, principal: Principal) -> None:
        """Reset the access-failed counter and commit it.

        Raises the same errors as ``record_failed_sign_in``, before any change.
        """
        self._ensure_updatable(principal)
        mutations.reset_access_failed_count(principal)
        self._store.save(principal)

    # -- Queries --

    def find_by_id(self, principal_id: str) -> Principal | None:
        return self._store.load(principal_id)

    def find_by_name(self, user_name: str) -> Principal | None:
        """Find by user name; the argument is normalized first."""
        normalized = self._normalizer(user_name)
        if normalized is None:
            return None
        return self._snapshot().find(by_normalized_user_name(normalized))

    def find_by_email(self, email: str) -> Principal | None:
        """Find by email; the argument is normalized first."""
        normalized = self._normalizer(email)
        if normalized is None:
            return None
        return self._snapshot().find(by_normalized_email(normalized))

    def find_by_login(self, login_provider: str, provider_key: str) -> Principal | None:
        return self._snapshot().find(by_login(login_provider, provider_key))

    def users_for_claim(self, claim_type: str, claim_value: str) -> list[Principal]:
        """All principals holding the claim, in creation order."""
        return self._snapshot().find_all(by_claim(claim_type, claim_value))

    def users_in_role(self, role_key: str) -> list[Principal]:
        """All members of the role, in creation order."""
        return self._snapshot().find_all(by_role(role_key))

    # -- Internals --

    def _ensure_updatable(self, principal: Principal) -> None:
        if self._store.load(principal.id) is None:
            raise NotFoundError("Principal", principal.id)
        self._ensure_logins_unclaimed(principal)

    def _ensure_logins_unclaimed(self, principal: Principal) -> None:
        if not principal.logins:
            return
        snapshot = self._snapshot()
        for login in principal.logins:
            owner = snapshot.find(by_login(login.login_provider, login.provider_key))
            if owner is not None and owner.id != principal.id:
                logger.warning(
                    "duplicate_login_rejected",
                    principal_id=principal.id,
                    owner_id=owner.id,
                    login_provider=login.login_provider,
                )
                raise DuplicateLoginError(
                    login.login_provider,
                    login.provider_key,
                    principal_id=principal.id,
                    owner_id=owner.id,
                )
