"""Integration tests: directory services over settings-built stores."""

from __future__ import annotations

import pytest

from warden.domain.directory import PrincipalDirectory, RoleDirectory, mutations
from warden.domain.directory.principal import Principal
from warden.foundation.domain.directory_value_objects import LoginInfo
from warden.foundation.domain.exceptions import DuplicateLoginError


def _register(principals: PrincipalDirectory, name: str, email: str | None = None) -> Principal:
    principal = Principal.register(
        name,
        email=email,
        normalizer=principals.normalizer,
        principal_id=f"id-{name}",
    )
    return principals.create(principal)


@pytest.mark.integration
class TestAccountLifecycle:
    """Registration through deletion, as an account-management caller sees it."""

    def test_sign_in_bookkeeping(self, principals: PrincipalDirectory) -> None:
        alice = _register(principals, "alice", "alice@example.com")

        for _ in range(3):
            principals.record_failed_sign_in(alice)
        stored = principals.find_by_email("ALICE@example.com")
        assert stored is not None
        assert stored.access_failed_count == 3

        principals.record_successful_sign_in(stored)
        stored = principals.find_by_name("Alice")
        assert stored is not None
        assert stored.access_failed_count == 0

    def test_external_login_flow(self, principals: PrincipalDirectory) -> None:
        alice = _register(principals, "alice")
        bob = _register(principals, "bob")
        principals.add_login(alice, LoginInfo("github", "gh-42", "GitHub"))
        principals.update(alice)

        with pytest.raises(DuplicateLoginError):
            principals.add_login(bob, LoginInfo("github", "gh-42"))

        owner = principals.find_by_login("github", "gh-42")
        assert owner is not None
        assert owner.id == alice.id

    def test_delete_removes_from_every_lookup(self, principals: PrincipalDirectory) -> None:
        alice = _register(principals, "alice", "alice@example.com")
        mutations.add_claim(alice, "dept", "ops")
        mutations.add_role(alice, "ADMIN")
        principals.update(alice)

        principals.delete(alice.id)

        assert principals.find_by_id(alice.id) is None
        assert principals.find_by_email("alice@example.com") is None
        assert principals.users_for_claim("dept", "ops") == []
        assert principals.users_in_role("ADMIN") == []


@pytest.mark.integration
class TestRoleMembership:
    def test_membership_survives_role_rename(
        self, principals: PrincipalDirectory, roles: RoleDirectory
    ) -> None:
        admin = roles.create("Admin")
        for name in ["carol", "dave", "erin"]:
            principal = _register(principals, name)
            if name != "dave":
                mutations.add_role(principal, admin.key)
            principals.update(principal)

        roles.rename(admin.id, "Administrators")
        key = roles.resolve_key("administrators")

        assert key is not None
        members = principals.users_in_role(key)
        assert [p.id for p in members] == ["id-carol", "id-erin"]

    def test_claim_lookup_keeps_creation_order(self, principals: PrincipalDirectory) -> None:
        names = ["n0", "n1", "n2", "n3", "n4", "n5", "n6"]
        for index, name in enumerate(names):
            principal = _register(principals, name)
            if index in (0, 1, 6):
                mutations.add_claim(principal, "role", "admin-51b7")
            principals.update(principal)

        result = principals.users_for_claim("role", "admin-51b7")

        assert [p.id for p in result] == ["id-n0", "id-n1", "id-n6"]
