"""Record store service for record business logic."""

import threading

from data_api.core.errors import NoChangeError, NotFoundError, RecordAlreadyExistsError
from data_api.models import Record


class RecordStore:
    """In-process, thread-safe collection of records keyed by ID.

    Every operation runs as a single critical section under one
    collection-wide lock, so check-then-act sequences cannot interleave.
    """

    def __init__(self) -> None:
        self._records: dict[str, Record] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    def create(self, candidate: Record) -> Record:
        """Insert a new record.

        Raises:
            RecordAlreadyExistsError: If a record with the same ID is stored
        """
        with self._lock:
            if candidate.id in self._records:
                raise RecordAlreadyExistsError(candidate.id)
            self._records[candidate.id] = candidate
            return candidate

    def get(self, record_id: str) -> Record:
        """Get record by ID.

        Raises:
            NotFoundError: If no record is stored under the ID
        """
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                raise NotFoundError(record_id)
            return record

    def get_all(self) -> list[Record]:
        """Snapshot of every stored record, in insertion order."""
        with self._lock:
            return list(self._records.values())

    def update(self, candidate: Record) -> Record:
        """Replace a stored record.

        Args:
            candidate: The new value, keyed by its ID

        Returns:
            The previously stored record

        Raises:
            NotFoundError: If no record is stored under the ID
            NoChangeError: If the stored record already equals the candidate
        """
        with self._lock:
            previous = self._records.get(candidate.id)
            if previous is None:
                raise NotFoundError(candidate.id)
            if previous == candidate:
                raise NoChangeError(candidate.id)
            self._records[candidate.id] = candidate
            return previous

    def delete(self, record_id: str) -> None:
        """Remove a record.

        Raises:
            NotFoundError: If no record is stored under the ID
        """
        with self._lock:
            if record_id not in self._records:
                raise NotFoundError(record_id)
            del self._records[record_id]
