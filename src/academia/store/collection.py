"""
Insertion-ordered in-memory collection of records keyed by generated id.
"""

from collections.abc import Callable
from typing import Generic, TypeVar
from uuid import uuid4

from .models import Record

R = TypeVar("R", bound=Record)


class Collection(Generic[R]):
    """
    Ordered mapping from identifier to record.

    Lookups are linear scans; list results always come back in insertion
    order. Identifiers are generated on insert and never reused, including
    after a removal.
    """

    def __init__(self, name: str):
        self.name = name
        self._records: dict[str, R] = {}
        self._issued: set[str] = set()

    def __len__(self) -> int:
        return len(self._records)

    def _new_id(self) -> str:
        new_id = str(uuid4())
        while new_id in self._issued:
            new_id = str(uuid4())
        self._issued.add(new_id)
        return new_id

    def insert(self, record: R) -> R:
        """
        Store a record under a freshly generated identifier.

        Args:
            record: Record to store; any id it carries is ignored

        Returns:
            The stored copy, carrying its new id
        """
        stored = record.model_copy(update={"id": self._new_id()})
        self._records[stored.id] = stored
        return stored

    def find_by_id(self, record_id: str) -> R | None:
        return self._records.get(record_id)

    def find_all_where(self, predicate: Callable[[R], bool]) -> list[R]:
        return [record for record in self._records.values() if predicate(record)]

    def all(self) -> list[R]:
        return list(self._records.values())

    def replace(self, record: R) -> R:
        """
        Overwrite an existing record in place, keeping its position.

        Raises:
            KeyError: If no record with that id is stored
        """
        if record.id not in self._records:
            raise KeyError(f"{self.name}: {record.id}")
        self._records[record.id] = record
        return record

    def remove_by_id(self, record_id: str) -> bool:
        """
        Remove a record by id.

        Returns:
            True if a record was found and removed, False otherwise
        """
        return self._records.pop(record_id, None) is not None
