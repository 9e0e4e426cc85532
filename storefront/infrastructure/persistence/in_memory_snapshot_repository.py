"""
In-memory snapshot repository for development and tests
"""

import threading
from typing import Dict, Optional

from storefront.domain.repositories.snapshot_repository import SnapshotRepository


class InMemorySnapshotRepository(SnapshotRepository):
    """Keeps payloads in a dict; survives nothing but the process"""

    def __init__(self):
        self._payloads: Dict[str, str] = {}
        self._lock = threading.Lock()

    def load(self, namespace: str) -> Optional[str]:
        with self._lock:
            return self._payloads.get(namespace)

    def save(self, namespace: str, payload: str) -> None:
        with self._lock:
            self._payloads[namespace] = payload

    def delete(self, namespace: str) -> bool:
        with self._lock:
            return self._payloads.pop(namespace, None) is not None
