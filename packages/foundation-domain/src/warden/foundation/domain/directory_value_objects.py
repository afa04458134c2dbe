"""Value objects for directory principals and roles.

Immutable, validated domain primitives. All validation occurs at construction
and fails with ``ValidationError``.
"""

from __future__ import annotations

from dataclasses import dataclass

from warden.foundation.domain.exceptions import ValidationError

_MAX_ID_LENGTH = 255


@dataclass(frozen=True, slots=True)
class PrincipalId:
    """Validated opaque principal identifier.

    Format: Non-empty string, max 255 characters. No other format
    constraints so ids minted by any store can be carried.

    Attributes:
        value: The validated identifier string.

    Raises:
        ValidationError: If the id is empty, whitespace-only or too long.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("id", "Principal id cannot be empty")
        if len(self.value) > _MAX_ID_LENGTH:
            raise ValidationError(
                "id",
                f"Principal id too long: {len(self.value)} chars (max {_MAX_ID_LENGTH})",
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Claim:
    """A typed key-value assertion attached to a principal.

    Equality is by (type, value), which is also the match rule for claim
    lookups and removals.

    Attributes:
        type: Claim type URI or short name (non-empty).
        value: Claim value (non-empty).

    Raises:
        ValidationError: If type or value is empty.
    """

    type: str
    value: str

    def __post_init__(self) -> None:
        if not self.type:
            raise ValidationError("claims.type", "Claim type cannot be empty")
        if not self.value:
            raise ValidationError("claims.value", "Claim value cannot be empty", claim_type=self.type)

    def matches(self, claim_type: str, claim_value: str) -> bool:
        return self.type == claim_type and self.value == claim_value


@dataclass(frozen=True, slots=True)
class LoginInfo:
    """A linked external-authentication credential reference.

    Identity is the (login_provider, provider_key) pair; ``display_name``
    is informational and does not take part in matching.

    Attributes:
        login_provider: External provider name, e.g. "github" (non-empty).
        provider_key: Provider-specific user key (non-empty).
        display_name: Optional human-readable provider label.

    Raises:
        ValidationError: If login_provider or provider_key is empty.
    """

    login_provider: str
    provider_key: str
    display_name: str | None = None

    def __post_init__(self) -> None:
        if not self.login_provider:
            raise ValidationError("logins.login_provider", "Login provider cannot be empty")
        if not self.provider_key:
            raise ValidationError(
                "logins.provider_key",
                "Provider key cannot be empty",
                login_provider=self.login_provider,
            )

    @property
    def pair(self) -> tuple[str, str]:
        """The (login_provider, provider_key) identity of this login."""
        return (self.login_provider, self.provider_key)

    def matches(self, login_provider: str, provider_key: str) -> bool:
        return self.pair == (login_provider, provider_key)


@dataclass(frozen=True, slots=True)
class RoleName:
    """Validated role display name.

    Format: Non-empty after whitespace stripping, max 255 characters.
    Leading and trailing whitespace is removed.

    Raises:
        ValidationError: If the name is empty/whitespace-only or too long.
    """

    value: str

    def __post_init__(self) -> None:
        stripped = self.value.strip() if isinstance(self.value, str) else ""
        if not stripped:
            raise ValidationError("name", "Role name cannot be empty")
        if len(stripped) > _MAX_ID_LENGTH:
            raise ValidationError(
                "name",
                f"Role name too long: {len(stripped)} chars (max {_MAX_ID_LENGTH})",
            )
        object.__setattr__(self, "value", stripped)
