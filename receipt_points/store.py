import threading
import uuid
from typing import Dict, Optional

from receipt_points.models import ScoreRecord


def is_valid_id(receipt_id: str) -> bool:
    """True only for the canonical lowercase form that ``insert`` hands out."""
    try:
        return str(uuid.UUID(receipt_id)) == receipt_id
    except (ValueError, AttributeError, TypeError):
        return False


class ReceiptStore:
    """In-memory receipt id -> points mapping, safe for concurrent request handlers.

    Records are never updated or deleted; they live as long as the store does.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._points: Dict[str, int] = {}

    def insert(self, total_points: int) -> str:
        receipt_id = str(uuid.uuid4())
        with self._lock:
            self._points[receipt_id] = total_points
        return receipt_id

    def lookup(self, receipt_id: str) -> Optional[int]:
        """Return stored points, or None if the id is unknown or malformed."""
        if not is_valid_id(receipt_id):
            return None
        with self._lock:
            return self._points.get(receipt_id)

    def record(self, receipt_id: str) -> Optional[ScoreRecord]:
        points = self.lookup(receipt_id)
        if points is None:
            return None
        return ScoreRecord(id=receipt_id, total_points=points)

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
