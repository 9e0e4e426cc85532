"""
Snapshot repository interface

Durable client storage for serialized store snapshots, one payload per
namespace.
"""

from abc import ABC, abstractmethod
from typing import Optional


class SnapshotRepository(ABC):
    """Repository interface for snapshot payloads"""

    @abstractmethod
    def load(self, namespace: str) -> Optional[str]:
        """Stored payload for ``namespace``, or None"""

    @abstractmethod
    def save(self, namespace: str, payload: str) -> None:
        """Store ``payload`` under ``namespace``, replacing any previous one"""

    @abstractmethod
    def delete(self, namespace: str) -> bool:
        """Remove the payload; False when nothing was stored"""
