"""Role record.

Principals refer to a role through its ``key``: the normalized role name
captured when the role is created. Renaming a role updates ``name`` and
``normalized_name`` but never the key, so memberships survive a rename.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from warden.foundation.domain.directory_value_objects import RoleName
from warden.foundation.domain.exceptions import ValidationError

if TYPE_CHECKING:
    from warden.domain.directory.normalizer import LookupNormalizer


@dataclass
class Role:
    """A named role that principals can be members of.

    Attributes:
        id: Opaque unique identifier (immutable once assigned).
        name: Display name (whitespace stripped).
        normalized_name: Canonical name, unique across roles.
        key: Membership key stored on principals. Defaults to
            ``normalized_name`` and is immutable afterwards.
    """

    id: str
    name: str
    normalized_name: str
    key: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id":
            if "id" in self.__dict__:
                raise ValidationError("id", "Role id cannot be changed", role_id=self.id)
            if not value:
                raise ValidationError("id", "Role id cannot be empty")
        super().__setattr__(name, value)

    def __post_init__(self) -> None:
        self.name = RoleName(self.name).value
        if not self.normalized_name:
            raise ValidationError("normalized_name", "Normalized role name cannot be empty")
        if not self.key:
            self.key = self.normalized_name

    @classmethod
    def create(
        cls,
        name: str,
        normalizer: LookupNormalizer,
        *,
        role_id: str | None = None,
    ) -> Role:
        """Create a role and fix its membership key.

        Args:
            name: Display name.
            normalizer: Normalizer producing the canonical name.
            role_id: Optional id; a UUID4 string is minted otherwise.
        """
        display = RoleName(name).value
        normalized = normalizer(display) or ""
        return cls(
            id=role_id if role_id is not None else str(uuid4()),
            name=display,
            normalized_name=normalized,
        )

    def rename(self, name: str, normalizer: LookupNormalizer) -> None:
        """Change the display and normalized names, keeping the key."""
        display = RoleName(name).value
        normalized = normalizer(display)
        if not normalized:
            raise ValidationError("normalized_name", "Normalized role name cannot be empty")
        self.name = display
        self.normalized_name = normalized
