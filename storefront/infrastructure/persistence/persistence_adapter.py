"""
Persistence adapter

Moves store snapshots in and out of a SnapshotRepository. Rehydration runs
once at start-up; after ``bind`` every state change is saved.
"""

import logging
from typing import Callable, Optional

from pydantic import ValidationError as PydanticValidationError

from storefront.application.dtos.snapshot_dtos import StoreSnapshot
from storefront.application.store import Store
from storefront.domain.repositories.snapshot_repository import SnapshotRepository
from storefront.infrastructure.utilities.constants import StorageSettings
from storefront.infrastructure.utilities.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class PersistenceAdapter:
    """Snapshot import/export for one storage namespace"""

    def __init__(
        self,
        repository: SnapshotRepository,
        namespace: str = StorageSettings.DEFAULT_NAMESPACE,
    ):
        if not namespace:
            raise ValueError("Storage namespace cannot be empty")
        self._repository = repository
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    def load(self) -> Optional[StoreSnapshot]:
        """Stored snapshot, None if nothing is stored; PersistenceError if unreadable"""
        payload = self._repository.load(self._namespace)
        if payload is None:
            return None
        try:
            return StoreSnapshot.from_json(payload)
        except (PydanticValidationError, ValueError) as e:
            raise PersistenceError(
                f"Stored snapshot for {self._namespace} is unreadable: {e}", "load"
            ) from e

    def persist(self, snapshot: StoreSnapshot) -> None:
        self._repository.save(self._namespace, snapshot.to_json())

    def rehydrate(self, store: Store) -> bool:
        """Restore ``store`` from storage; False when starting fresh"""
        try:
            snapshot = self.load()
        except PersistenceError as e:
            logger.warning("Discarding stored snapshot, starting fresh: %s", e)
            return False
        if snapshot is None:
            logger.info("No stored snapshot under %s, starting fresh", self._namespace)
            return False
        store.restore(snapshot)
        logger.info("Store rehydrated from %s", self._namespace)
        return True

    def bind(self, store: Store) -> Callable[[], None]:
        """Save after every store change; returns the unsubscribe callable"""
        return store.subscribe(self.persist)

    def clear(self) -> bool:
        return self._repository.delete(self._namespace)
