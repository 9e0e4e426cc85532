"""
Persistence Infrastructure

Snapshot storage backends and the adapter that connects them to the store.
"""

from .in_memory_snapshot_repository import InMemorySnapshotRepository
from .persistence_adapter import PersistenceAdapter
from .sqlalchemy_snapshot_repository import SQLAlchemySnapshotRepository, create_snapshot_engine

__all__ = [
    "InMemorySnapshotRepository",
    "PersistenceAdapter",
    "SQLAlchemySnapshotRepository",
    "create_snapshot_engine",
]
