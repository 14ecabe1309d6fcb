import threading
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AnalysisRecord:
    analysis: str
    form_data: Dict[str, Any]
    timestamp: datetime = field(default_factory=datetime.now)


class ResultStore:
    """
    Process-local map of session id -> AnalysisRecord.

    - Handlers and background tasks run on a thread pool, so every access is locked.
    - Entries expire ttl_seconds after they were written (0 keeps them forever).
    - Expired entries read as absent; sweep_expired() removes them and runs on every put.
    """

    def __init__(self, ttl_seconds: int = 0) -> None:
        self.ttl_seconds = ttl_seconds
        self._lock = threading.Lock()
        # session_id -> (record, expires_at or None)
        self._items: Dict[str, tuple] = {}

    def put(self, session_id: str, record: AnalysisRecord) -> None:
        expires_at = time.time() + self.ttl_seconds if self.ttl_seconds > 0 else None
        self.sweep_expired()
        with self._lock:
            self._items[str(session_id)] = (record, expires_at)

    def get(self, session_id: str) -> Optional[AnalysisRecord]:
        with self._lock:
            item = self._items.get(str(session_id))
        if item is None:
            return None
        record, expires_at = item
        if expires_at is not None and expires_at <= time.time():
            return None
        return record

    def sweep_expired(self) -> int:
        """Drop expired entries and return how many were removed."""
        now = time.time()
        removed = 0
        with self._lock:
            expired = [k for k, (_, exp) in self._items.items() if exp is not None and exp <= now]
            for k in expired:
                del self._items[k]
                removed += 1
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
