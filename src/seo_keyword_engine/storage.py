"""
In-memory storage for analysis records.

Records are bookkeeping only; no analysis depends on stored state.
"""

import threading
from typing import Optional

from .models import AnalysisRecord


class InMemoryAnalysisStore:
    """Analysis records keyed by an auto-incrementing integer id."""

    def __init__(self):
        self._records: dict[int, AnalysisRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, content: str) -> AnalysisRecord:
        """Store the request content with empty analysis fields."""
        with self._lock:
            record = AnalysisRecord(id=self._next_id, content=content)
            self._records[record.id] = record
            self._next_id += 1
        return record

    def get(self, record_id: int) -> Optional[AnalysisRecord]:
        return self._records.get(record_id)

    def list_all(self) -> list[AnalysisRecord]:
        return list(self._records.values())
