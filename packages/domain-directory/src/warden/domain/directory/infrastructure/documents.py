"""Document schemas for persisting directory records.

Stores keep each record as one JSON document. These pydantic models are the
only place that knows the document shape; adapters dump and validate
through them so every backend reads and writes identical documents.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from warden.domain.directory.principal import Principal
from warden.domain.directory.role import Role
from warden.foundation.domain.directory_value_objects import Claim, LoginInfo


class RecordDocument(BaseModel):
    """Base class for record documents."""

    model_config = ConfigDict(extra="ignore")

    record_type: ClassVar[str] = "Record"

    id: str

    @classmethod
    @abstractmethod
    def from_record(cls, record: Any) -> RecordDocument:
        """Build the document for a record."""

    @abstractmethod
    def to_record(self) -> Any:
        """Rebuild a fresh record from the document."""

    @classmethod
    def dump(cls, record: Any) -> dict[str, Any]:
        """Record -> JSON-compatible dict."""
        return cls.from_record(record).model_dump(mode="json")

    @classmethod
    def load(cls, data: dict[str, Any]) -> Any:
        """JSON-compatible dict -> fresh record."""
        return cls.model_validate(data).to_record()


class ClaimDocument(BaseModel):
    type: str
    value: str


class LoginDocument(BaseModel):
    login_provider: str
    provider_key: str
    display_name: str | None = None


class PrincipalDocument(RecordDocument):
    """Document shape of a Principal.

    Roles are written sorted so identical records dump identically.
    """

    record_type: ClassVar[str] = "Principal"

    user_name: str | None = None
    normalized_user_name: str | None = None
    email: str | None = None
    normalized_email: str | None = None
    email_confirmed: bool = False
    access_failed_count: int = 0
    lockout_enabled: bool = True
    lockout_end: AwareDatetime | None = None
    claims: list[ClaimDocument] = Field(default_factory=list)
    logins: list[LoginDocument] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: Principal) -> PrincipalDocument:
        return cls(
            id=record.id,
            user_name=record.user_name,
            normalized_user_name=record.normalized_user_name,
            email=record.email,
            normalized_email=record.normalized_email,
            email_confirmed=record.email_confirmed,
            access_failed_count=record.access_failed_count,
            lockout_enabled=record.lockout_enabled,
            lockout_end=record.lockout_end,
            claims=[ClaimDocument(type=c.type, value=c.value) for c in record.claims],
            logins=[
                LoginDocument(
                    login_provider=login.login_provider,
                    provider_key=login.provider_key,
                    display_name=login.display_name,
                )
                for login in record.logins
            ],
            roles=sorted(record.roles),
        )

    def to_record(self) -> Principal:
        return Principal(
            id=self.id,
            user_name=self.user_name,
            normalized_user_name=self.normalized_user_name,
            email=self.email,
            normalized_email=self.normalized_email,
            email_confirmed=self.email_confirmed,
            access_failed_count=self.access_failed_count,
            lockout_enabled=self.lockout_enabled,
            lockout_end=self.lockout_end,
            claims=[Claim(c.type, c.value) for c in self.claims],
            logins=[
                LoginInfo(login.login_provider, login.provider_key, login.display_name)
                for login in self.logins
            ],
            roles=set(self.roles),
        )


class RoleDocument(RecordDocument):
    """Document shape of a Role."""

    record_type: ClassVar[str] = "Role"

    name: str
    normalized_name: str
    key: str

    @classmethod
    def from_record(cls, record: Role) -> RoleDocument:
        return cls(
            id=record.id,
            name=record.name,
            normalized_name=record.normalized_name,
            key=record.key,
        )

    def to_record(self) -> Role:
        return Role(
            id=self.id,
            name=self.name,
            normalized_name=self.normalized_name,
            key=self.key,
        )
