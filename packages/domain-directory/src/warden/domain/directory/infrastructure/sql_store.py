"""SQL record stores: one JSON document per row.

Each table holds an autoincrement ``seq`` column (creation order), the
record ``id`` (unique) and the JSON ``document``. ``load_all`` orders by
``seq``; updates rewrite the document in place and keep ``seq``, so
creation order survives re-saves.

Lookups by claim, role or login are answered by the query executor over a
``load_all`` snapshot, not pushed down into SQL.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from sqlalchemy import JSON, Column, Integer, MetaData, String, Table, delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from warden.domain.directory.infrastructure.documents import (
    PrincipalDocument,
    RecordDocument,
    RoleDocument,
)
from warden.foundation.domain.exceptions import ConflictError
from warden.infra.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.orm import Session

    from warden.domain.directory.principal import Principal
    from warden.domain.directory.role import Role

logger = get_logger(__name__)


def build_document_table(name: str, metadata: MetaData | None = None) -> Table:
    """Describe a document table.

    Args:
        name: Table name.
        metadata: MetaData to attach to; a private one is created otherwise.
    """
    return Table(
        name,
        metadata if metadata is not None else MetaData(),
        Column("seq", Integer, primary_key=True, autoincrement=True),
        Column("id", String(255), nullable=False, unique=True),
        Column("document", JSON, nullable=False),
    )


class SqlDocumentStore:
    """Record store persisting documents through a SQLAlchemy session factory.

    Args:
        session_factory: Callable returning a SQLAlchemy Session context manager.
        table_name: Name of the document table.
    """

    document_type: ClassVar[type[RecordDocument]]

    def __init__(self, session_factory: Callable[[], Session], table_name: str) -> None:
        self._session_factory = session_factory
        self._table = build_document_table(table_name)

    def ensure_table_exists(self) -> None:
        """Create the document table if it does not exist (idempotent)."""
        with self._session_factory() as session:
            self._table.create(bind=session.get_bind(), checkfirst=True)
        logger.info("document_table_ensured", table=self._table.name)

    def load(self, record_id: str) -> Any:
        with self._session_factory() as session:
            row = session.execute(
                select(self._table.c.document).where(self._table.c.id == record_id)
            ).first()
        if row is None:
            return None
        return self.document_type.load(row[0])

    def load_all(self) -> list[Any]:
        with self._session_factory() as session:
            rows = session.execute(
                select(self._table.c.document).order_by(self._table.c.seq)
            ).all()
        return [self.document_type.load(row[0]) for row in rows]

    def save(self, record: Any) -> None:
        """Insert the record, or rewrite its document if the id exists.

        Raises:
            ConflictError: If a concurrent writer inserted the same id first.
        """
        document = self.document_type.dump(record)
        table = self._table
        try:
            with self._session_factory() as session:
                existing = session.execute(
                    select(table.c.seq).where(table.c.id == record.id)
                ).first()
                if existing is None:
                    session.execute(insert(table).values(id=record.id, document=document))
                else:
                    session.execute(
                        update(table).where(table.c.id == record.id).values(document=document)
                    )
                session.commit()
        except IntegrityError as err:
            raise ConflictError(
                f"{self.document_type.record_type} '{record.id}' was written concurrently",
                record_id=record.id,
            ) from err
        logger.debug(
            "record_saved",
            record_type=self.document_type.record_type,
            record_id=record.id,
            table=table.name,
        )

    def delete(self, record_id: str) -> None:
        with self._session_factory() as session:
            session.execute(delete(self._table).where(self._table.c.id == record_id))
            session.commit()
        logger.debug(
            "record_deleted",
            record_type=self.document_type.record_type,
            record_id=record_id,
            table=self._table.name,
        )


class SqlPrincipalStore(SqlDocumentStore):
    """Principal store over a SQL document table."""

    document_type: ClassVar[type[RecordDocument]] = PrincipalDocument

    def __init__(
        self,
        session_factory: Callable[[], Session],
        table_name: str = "directory_principals",
    ) -> None:
        super().__init__(session_factory, table_name)

    def load(self, record_id: str) -> Principal | None:
        principal: Principal | None = super().load(record_id)
        return principal

    def load_all(self) -> list[Principal]:
        return super().load_all()


class SqlRoleStore(SqlDocumentStore):
    """Role store over a SQL document table."""

    document_type: ClassVar[type[RecordDocument]] = RoleDocument

    def __init__(
        self,
        session_factory: Callable[[], Session],
        table_name: str = "directory_roles",
    ) -> None:
        super().__init__(session_factory, table_name)

    def load(self, record_id: str) -> Role | None:
        role: Role | None = super().load(record_id)
        return role

    def load_all(self) -> list[Role]:
        return super().load_all()
