"""Mutation operations on a single principal.

Every operation changes the given Principal in memory and nothing else:
no storage is touched. Committing the change is a separate ``save`` on the
record store, decided by the caller.

Callers must not mutate the same Principal from several threads at once.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from warden.domain.directory.principal import require_aware
from warden.foundation.domain.directory_value_objects import Claim
from warden.foundation.domain.exceptions import DuplicateLoginError, ValidationError

if TYPE_CHECKING:
    from warden.domain.directory.principal import Principal
    from warden.foundation.domain.directory_value_objects import LoginInfo

# -- Names and email --


def set_user_name(principal: Principal, value: str | None) -> None:
    principal.user_name = value


def set_normalized_user_name(principal: Principal, value: str | None) -> None:
    """Assign the normalized user name verbatim."""
    principal.normalized_user_name = value


def set_email(principal: Principal, value: str | None) -> None:
    principal.email = value


def set_normalized_email(principal: Principal, value: str | None) -> None:
    """Assign the normalized email verbatim."""
    principal.normalized_email = value


def set_email_confirmed(principal: Principal, confirmed: bool) -> None:
    principal.email_confirmed = confirmed


# -- Access-failed counter and lockout --


def increment_access_failed_count(principal: Principal) -> int:
    """Record a failed sign-in.

    No upper bound is enforced here; lockout thresholds are policy of the
    caller.

    Returns:
        The new count.
    """
    principal.access_failed_count += 1
    return principal.access_failed_count


def reset_access_failed_count(principal: Principal) -> None:
    """Set the counter back to zero, whatever its current value."""
    principal.access_failed_count = 0


def set_lockout_enabled(principal: Principal, enabled: bool) -> None:
    principal.lockout_enabled = enabled


def set_lockout_end(principal: Principal, end: datetime | None) -> None:
    """Set or clear the end of the current lockout.

    Raises:
        ValidationError: If ``end`` is a naive datetime.
    """
    principal.lockout_end = end


def is_locked_out(principal: Principal, now: datetime | None = None) -> bool:
    """True while lockout is enabled and its end lies in the future.

    Raises:
        ValidationError: If ``now`` is a naive datetime.
    """
    require_aware("now", now, "Current time must be timezone-aware", principal_id=principal.id)
    if not principal.lockout_enabled or principal.lockout_end is None:
        return False
    return principal.lockout_end > (now or datetime.now(UTC))


# -- Claims --


def add_claim(principal: Principal, claim_type: str, claim_value: str) -> Claim:
    """Append a claim. Duplicates are allowed.

    Returns:
        The validated claim that was appended.

    Raises:
        ValidationError: If type or value is empty.
    """
    claim = Claim(claim_type, claim_value)
    principal.claims.append(claim)
    return claim


def remove_claim(principal: Principal, claim_type: str, claim_value: str) -> int:
    """Remove every claim matching (type, value).

    Returns:
        Number of claims removed; 0 when nothing matched.
    """
    kept = [claim for claim in principal.claims if not claim.matches(claim_type, claim_value)]
    removed = len(principal.claims) - len(kept)
    principal.claims = kept
    return removed


def replace_claim(principal: Principal, claim: Claim, new_claim: Claim) -> int:
    """Replace every claim equal to ``claim`` with ``new_claim`` in place.

    Returns:
        Number of claims replaced.
    """
    replaced = 0
    for index, existing in enumerate(principal.claims):
        if existing == claim:
            principal.claims[index] = new_claim
            replaced += 1
    return replaced


# -- Roles --


def add_role(principal: Principal, role_key: str) -> None:
    """Add a role membership. Adding an existing key changes nothing.

    Raises:
        ValidationError: If ``role_key`` is empty.
    """
    if not role_key:
        raise ValidationError("roles", "Role key cannot be empty", principal_id=principal.id)
    principal.roles.add(role_key)


def remove_role(principal: Principal, role_key: str) -> None:
    principal.roles.discard(role_key)


def is_in_role(principal: Principal, role_key: str) -> bool:
    return role_key in principal.roles


# -- External logins --


def add_login(principal: Principal, login: LoginInfo) -> None:
    """Link an external login to the principal.

    Raises:
        DuplicateLoginError: If the principal already has this
            (login_provider, provider_key) pair.
    """
    if principal.has_login(login.login_provider, login.provider_key):
        raise DuplicateLoginError(
            login.login_provider,
            login.provider_key,
            principal_id=principal.id,
        )
    principal.logins.append(login)


def remove_login(principal: Principal, login_provider: str, provider_key: str) -> None:
    """Unlink the login with this pair. Unknown pairs are ignored."""
    principal.logins = [
        login for login in principal.logins if not login.matches(login_provider, provider_key)
    ]
