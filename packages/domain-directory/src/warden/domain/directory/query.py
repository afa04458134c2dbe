"""Query executor over an ordered snapshot of records.

The executor is given a snapshot (typically ``store.load_all()``) and
answers lookups against it. Results follow the snapshot's order, which for
every store adapter is creation order. No match is an absent result.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

RecordT = TypeVar("RecordT")


class QueryExecutor(Generic[RecordT]):
    """Applies predicates to an ordered record snapshot.

    The snapshot is captured once at construction; later changes to the
    source iterable are not seen. Records are returned as-is, never copied
    or modified.

    Example:
        >>> executor = QueryExecutor(store.load_all())
        >>> admins = executor.find_all(by_role("ADMIN"))
    """

    def __init__(self, records: Iterable[RecordT]) -> None:
        self._records: tuple[RecordT, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def find(self, predicate: Callable[[RecordT], bool]) -> RecordT | None:
        """Return the first matching record, or None."""
        for record in self._records:
            if predicate(record):
                return record
        return None

    def find_all(self, predicate: Callable[[RecordT], bool]) -> list[RecordT]:
        """Return every matching record in snapshot order."""
        return [record for record in self._records if predicate(record)]

    def count(self, predicate: Callable[[RecordT], bool]) -> int:
        return sum(1 for record in self._records if predicate(record))
