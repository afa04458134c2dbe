"""Principal record: one user account in the directory.

A Principal exclusively owns its claims and logins. Roles are referenced
by role key only (see ``Role.key``), never embedded by value.

The record performs no normalization: ``normalized_user_name`` and
``normalized_email`` hold whatever the caller assigns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from warden.foundation.domain.directory_value_objects import Claim, LoginInfo, PrincipalId
from warden.foundation.domain.exceptions import ValidationError

if TYPE_CHECKING:
    from datetime import datetime

    from warden.domain.directory.normalizer import LookupNormalizer


def require_aware(field_name: str, value: datetime | None, reason: str, **context: Any) -> None:
    """Reject a naive datetime; None passes.

    Raises:
        ValidationError: If ``value`` has no tzinfo.
    """
    if value is not None and value.tzinfo is None:
        raise ValidationError(field_name, reason, **context)


@dataclass
class Principal:
    """A directory entry representing one user account.

    Attributes:
        id: Opaque unique identifier (immutable once assigned).
        user_name: Display login handle.
        normalized_user_name: Canonical login handle, the lookup key.
        email: Display email address.
        normalized_email: Canonical email, the lookup key.
        email_confirmed: Whether the email address has been confirmed.
        access_failed_count: Consecutive failed sign-ins since the last success.
        lockout_enabled: Whether lockout applies to this principal.
        lockout_end: End of the current lockout (timezone-aware), or None.
        claims: Ordered claims; duplicates permitted.
        logins: Ordered external logins; (provider, key) unique.
        roles: Role keys this principal belongs to.

    Raises:
        ValidationError: On empty id, negative counter, or malformed entries.
    """

    id: str
    user_name: str | None = None
    normalized_user_name: str | None = None
    email: str | None = None
    normalized_email: str | None = None
    email_confirmed: bool = False
    access_failed_count: int = 0
    lockout_enabled: bool = True
    lockout_end: datetime | None = None
    claims: list[Claim] = field(default_factory=list)
    logins: list[LoginInfo] = field(default_factory=list)
    roles: set[str] = field(default_factory=set)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id":
            if "id" in self.__dict__:
                raise ValidationError("id", "Principal id cannot be changed", principal_id=self.id)
            value = PrincipalId(value).value
        elif name == "lockout_end":
            require_aware(
                "lockout_end",
                value,
                "Lockout end must be timezone-aware",
                principal_id=self.__dict__.get("id"),
            )
        super().__setattr__(name, value)

    def __post_init__(self) -> None:
        if self.access_failed_count < 0:
            raise ValidationError(
                "access_failed_count",
                "Access failed count cannot be negative",
                principal_id=self.id,
            )
        self.claims = list(self.claims)
        self.logins = list(self.logins)
        self.roles = set(self.roles)
        for claim in self.claims:
            if not isinstance(claim, Claim):
                raise ValidationError("claims", f"Not a claim: {claim!r}", principal_id=self.id)
        seen: set[tuple[str, str]] = set()
        for login in self.logins:
            if not isinstance(login, LoginInfo):
                raise ValidationError("logins", "Not a login entry", principal_id=self.id)
            if login.pair in seen:
                raise ValidationError(
                    "logins",
                    f"Login '{login.login_provider}' appears more than once",
                    principal_id=self.id,
                )
            seen.add(login.pair)
        for role_key in self.roles:
            if not role_key:
                raise ValidationError("roles", "Role key cannot be empty", principal_id=self.id)

    @classmethod
    def register(
        cls,
        user_name: str,
        *,
        email: str | None = None,
        normalizer: LookupNormalizer | None = None,
        principal_id: str | None = None,
    ) -> Principal:
        """Create a fresh principal for a new account.

        The principal starts with no claims, logins or roles and a zero
        access-failed count. Normalized fields are filled only when a
        normalizer is passed.

        Args:
            user_name: Display login handle.
            email: Optional email address.
            normalizer: Optional normalizer for the lookup fields.
            principal_id: Optional id; a UUID4 string is minted otherwise.

        Returns:
            The new, unsaved Principal.
        """
        return cls(
            id=principal_id if principal_id is not None else str(uuid4()),
            user_name=user_name,
            normalized_user_name=normalizer(user_name) if normalizer else None,
            email=email,
            normalized_email=normalizer(email) if normalizer and email else None,
        )

    def has_login(self, login_provider: str, provider_key: str) -> bool:
        return any(login.matches(login_provider, provider_key) for login in self.logins)
