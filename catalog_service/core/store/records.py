"""In-memory ordered record store.

Records keep the order in which they were created. Ids come from an
:class:`IdSequence` owned by the store (or injected into it), so insertion
order and id order always agree. Removing a record never renumbers or
reorders the survivors.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

logger = logging.getLogger(__name__)


class IdSequence:
    """Thread-safe monotonically increasing id generator.

    Example:
        sequence = IdSequence()
        sequence.next_id()  # 1
        sequence.next_id()  # 2
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        """Last id handed out (``start`` if none yet)."""
        with self._lock:
            return self._value

    def next_id(self) -> int:
        with self._lock:
            self._value += 1
            return self._value


class Record(BaseModel, Generic[T]):
    """A stored payload tagged with its store-assigned id."""

    id: int = Field(description="Unique, monotonically assigned identifier")
    payload: T = Field(description="Opaque record payload")

    model_config = ConfigDict(frozen=True)


class RecordStore(Generic[T]):
    """Ordered, append-mostly collection of records.

    All mutation and every read of the ordered list happen under a
    re-entrant lock. Readers get tuple snapshots, never the live list.

    Example:
        store: RecordStore[str] = RecordStore()
        store.add("first")
        store.add("second")
        [record.id for record in store.snapshot()]  # [1, 2]
    """

    def __init__(self, sequence: IdSequence | None = None) -> None:
        self._sequence = sequence or IdSequence()
        self._records: list[Record[T]] = []
        self._by_id: dict[int, Record[T]] = {}
        self._lock = threading.RLock()

    @property
    def sequence(self) -> IdSequence:
        return self._sequence

    def add(self, payload: T) -> Record[T]:
        """Append a payload under the next id from the sequence."""
        return self.add_with_id(lambda _record_id: payload)

    def add_with_id(self, factory: Callable[[int], T]) -> Record[T]:
        """Reserve the next id and build the payload from it.

        Useful for payload types that carry their own id field.

        Args:
            factory: Called with the reserved id; returns the payload.

        Returns:
            The stored record.
        """
        with self._lock:
            record_id = self._sequence.next_id()
            record = Record(id=record_id, payload=factory(record_id))
            self._records.append(record)
            self._by_id[record_id] = record
        logger.debug("Stored record", extra={"record_id": record_id})
        return record

    def get(self, record_id: int) -> Record[T] | None:
        with self._lock:
            return self._by_id.get(record_id)

    def remove(self, record_id: int) -> bool:
        """Remove a record by id.

        Returns:
            True if a record was removed, False if the id was unknown.
        """
        with self._lock:
            record = self._by_id.pop(record_id, None)
            if record is None:
                return False
            self._records = [r for r in self._records if r.id != record_id]
        logger.debug("Removed record", extra={"record_id": record_id})
        return True

    def snapshot(self) -> tuple[Record[T], ...]:
        """Return an immutable copy of all records in insertion order."""
        with self._lock:
            return tuple(self._records)

    def payloads(self) -> tuple[T, ...]:
        """Return an immutable copy of all payloads in insertion order."""
        return tuple(record.payload for record in self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._by_id

    def __iter__(self) -> Iterator[Record[T]]:
        return iter(self.snapshot())


__all__ = ["IdSequence", "Record", "RecordStore"]
