"""Tests for directory value objects."""

from __future__ import annotations

import dataclasses

import pytest

from warden.foundation.domain.directory_value_objects import (
    Claim,
    LoginInfo,
    PrincipalId,
    RoleName,
)
from warden.foundation.domain.exceptions import ValidationError


@pytest.mark.unit
class TestPrincipalId:
    def test_valid_id(self) -> None:
        assert PrincipalId("550e8400-e29b-41d4-a716-446655440000").value == (
            "550e8400-e29b-41d4-a716-446655440000"
        )

    def test_str(self) -> None:
        assert str(PrincipalId("p-1")) == "p-1"

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValidationError, match="cannot be empty"):
            PrincipalId("")

    def test_rejects_whitespace(self) -> None:
        with pytest.raises(ValidationError, match="cannot be empty"):
            PrincipalId("   ")

    def test_rejects_too_long(self) -> None:
        with pytest.raises(ValidationError, match="too long"):
            PrincipalId("a" * 256)


@pytest.mark.unit
class TestClaim:
    def test_valid_claim(self) -> None:
        claim = Claim("role", "admin")
        assert claim.type == "role"
        assert claim.value == "admin"

    def test_equality_by_type_and_value(self) -> None:
        assert Claim("role", "admin") == Claim("role", "admin")
        assert Claim("role", "admin") != Claim("role", "user")

    def test_matches(self) -> None:
        claim = Claim("role", "admin")
        assert claim.matches("role", "admin")
        assert not claim.matches("Role", "admin")

    def test_rejects_empty_type(self) -> None:
        with pytest.raises(ValidationError, match="Claim type"):
            Claim("", "admin")

    def test_rejects_empty_value(self) -> None:
        with pytest.raises(ValidationError, match="Claim value"):
            Claim("role", "")

    def test_frozen(self) -> None:
        claim = Claim("role", "admin")
        with pytest.raises(dataclasses.FrozenInstanceError):
            claim.value = "other"  # type: ignore[misc]


@pytest.mark.unit
class TestLoginInfo:
    def test_pair(self) -> None:
        login = LoginInfo("github", "gh-1", "GitHub")
        assert login.pair == ("github", "gh-1")

    def test_display_name_optional(self) -> None:
        assert LoginInfo("github", "gh-1").display_name is None

    def test_matches_ignores_display_name(self) -> None:
        login = LoginInfo("github", "gh-1", "GitHub")
        assert login.matches("github", "gh-1")
        assert not login.matches("github", "gh-2")

    def test_rejects_empty_provider(self) -> None:
        with pytest.raises(ValidationError, match="Login provider"):
            LoginInfo("", "gh-1")

    def test_rejects_empty_key(self) -> None:
        with pytest.raises(ValidationError, match="Provider key"):
            LoginInfo("github", "")


@pytest.mark.unit
class TestRoleName:
    def test_strips_whitespace(self) -> None:
        assert RoleName("  Admin  ").value == "Admin"

    def test_rejects_blank(self) -> None:
        with pytest.raises(ValidationError, match="cannot be empty"):
            RoleName("   ")

    def test_rejects_too_long(self) -> None:
        with pytest.raises(ValidationError, match="too long"):
            RoleName("r" * 256)
