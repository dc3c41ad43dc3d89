"""In-memory record store."""

import copy
import threading
from typing import Dict, Optional, Tuple

from form_store.models.record import Record, RecordData, format_timestamp, generate_record_id


class RecordStore:
    """Authoritative, in-process collection of records.

    Records keep insertion order. Mutations hold a single writer lock; reads
    hand out deep copies so callers never observe or alter the canonical
    collection mid-mutation.
    """

    def __init__(self) -> None:
        self._records: Dict[str, Record] = {}
        self._lock = threading.RLock()
        self._last_timestamp: Optional[str] = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    def _next_timestamp(self) -> str:
        """Creation timestamp that never precedes the previous one."""
        timestamp = format_timestamp()
        if self._last_timestamp is not None and timestamp < self._last_timestamp:
            timestamp = self._last_timestamp
        self._last_timestamp = timestamp
        return timestamp

    def _next_id(self) -> str:
        record_id = generate_record_id()
        while record_id in self._records:
            record_id = generate_record_id()
        return record_id

    def append(self, data: RecordData) -> Record:
        """Store a payload as a new record with a fresh id and creation timestamp.

        Args:
            data: Submitted values keyed by field id

        Returns:
            Record: Copy of the stored record
        """
        with self._lock:
            record = Record(id=self._next_id(), created_at=self._next_timestamp(), data=copy.deepcopy(data))
            self._records[record.id] = record
            return record.model_copy(deep=True)

    def get(self, record_id: str) -> Optional[Record]:
        """Get a copy of a record, or None if no record has this id."""
        with self._lock:
            record = self._records.get(record_id)
            return record.model_copy(deep=True) if record is not None else None

    def update(self, record_id: str, data: RecordData) -> Optional[Record]:
        """Shallow-merge values into a record's data; keys not given are left untouched.

        Returns:
            Copy of the updated record, or None if no record has this id
        """
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return None
            updated = record.model_copy(update={"data": {**record.data, **copy.deepcopy(data)}}, deep=True)
            self._records[record_id] = updated
            return updated.model_copy(deep=True)

    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns True if something was removed."""
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def snapshot(self) -> Tuple[Record, ...]:
        """Point-in-time copy of all records in insertion order."""
        with self._lock:
            return tuple(record.model_copy(deep=True) for record in self._records.values())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._last_timestamp = None
