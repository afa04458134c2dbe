"""Port interface for directory record persistence.

This module defines the RecordStorePort protocol: the persistence
collaborator that supplies snapshots of directory records and commits
changes made to them in memory. The query executor and the mutation
operations never talk to storage; they work on what ``load``/``load_all``
return, and callers decide when to ``save``.

Example:
    >>> from warden.foundation.domain.ports import RecordStorePort
    >>> def rename(store: RecordStorePort, record_id: str, name: str) -> None:
    ...     record = store.load(record_id)
    ...     if record is not None:
    ...         record.user_name = name
    ...         store.save(record)
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable


class Identified(Protocol):
    """Anything carrying an opaque string ``id``."""

    @property
    def id(self) -> str: ...


RecordT = TypeVar("RecordT", bound=Identified)


@runtime_checkable
class RecordStorePort(Protocol[RecordT]):
    """Port for loading and committing directory records.

    Implementations MUST return ``load_all`` results in creation order.
    Re-saving an existing record replaces it in place and does not move it
    to the end of that order.

    The protocol is runtime_checkable to enable isinstance() verification
    in tests and when wiring adapters.
    """

    def load(self, record_id: str) -> RecordT | None:
        """Load one record by id.

        Args:
            record_id: Opaque record identifier.

        Returns:
            A detached copy of the record, or None when no record has the id.
        """
        ...

    def load_all(self) -> list[RecordT]:
        """Load every record, oldest first.

        Returns:
            Detached copies of all records in creation order.
        """
        ...

    def save(self, record: RecordT) -> None:
        """Insert or replace a record.

        Args:
            record: Record to commit. Its current in-memory state is persisted.
        """
        ...

    def delete(self, record_id: str) -> None:
        """Hard delete a record. Idempotent: an unknown id is a no-op.

        Args:
            record_id: Identifier of the record to remove.
        """
        ...
