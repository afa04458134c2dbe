"""In-memory record stores.

Documents are kept in an insertion-ordered dict keyed by record id, so
``load_all`` returns creation order and re-saving a record keeps its place.
Records are stored as dumped documents: loads hand out fresh copies and
in-memory changes reach the store only through ``save``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from warden.domain.directory.infrastructure.documents import (
    PrincipalDocument,
    RecordDocument,
    RoleDocument,
)
from warden.infra.observability import get_logger

if TYPE_CHECKING:
    from warden.domain.directory.principal import Principal
    from warden.domain.directory.role import Role

logger = get_logger(__name__)


class InMemoryDocumentStore:
    """Record store backed by an insertion-ordered dict of documents.

    Subclasses pick the document schema via ``document_type``.
    """

    document_type: ClassVar[type[RecordDocument]]

    def __init__(self) -> None:
        self._documents: dict[str, dict[str, Any]] = {}

    def load(self, record_id: str) -> Any:
        document = self._documents.get(record_id)
        if document is None:
            return None
        return self.document_type.load(document)

    def load_all(self) -> list[Any]:
        return [self.document_type.load(document) for document in self._documents.values()]

    def save(self, record: Any) -> None:
        # Assigning an existing key keeps its original position.
        self._documents[record.id] = self.document_type.dump(record)
        logger.debug(
            "record_saved",
            record_type=self.document_type.record_type,
            record_id=record.id,
        )

    def delete(self, record_id: str) -> None:
        if self._documents.pop(record_id, None) is not None:
            logger.debug(
                "record_deleted",
                record_type=self.document_type.record_type,
                record_id=record_id,
            )


class InMemoryPrincipalStore(InMemoryDocumentStore):
    """Principal store for tests and single-process hosts."""

    document_type: ClassVar[type[RecordDocument]] = PrincipalDocument

    def load(self, record_id: str) -> Principal | None:
        principal: Principal | None = super().load(record_id)
        return principal

    def load_all(self) -> list[Principal]:
        return super().load_all()


class InMemoryRoleStore(InMemoryDocumentStore):
    """Role store for tests and single-process hosts."""

    document_type: ClassVar[type[RecordDocument]] = RoleDocument

    def load(self, record_id: str) -> Role | None:
        role: Role | None = super().load(record_id)
        return role

    def load_all(self) -> list[Role]:
        return super().load_all()
