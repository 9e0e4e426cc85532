"""
SQLAlchemy Snapshot Repository

Concrete implementation of SnapshotRepository using SQLAlchemy ORM.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.domain.repositories.snapshot_repository import SnapshotRepository
from storefront.infrastructure.persistence.models import Base, StoredSnapshot
from storefront.infrastructure.utilities.exceptions import PersistenceError


def create_snapshot_engine(database_url: str) -> Engine:
    """Create an engine, preparing SQLite files and in-memory databases"""
    url = make_url(database_url)
    engine_kwargs = {}
    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every session sees a fresh database
            engine_kwargs.update(
                poolclass=StaticPool, connect_args={"check_same_thread": False}
            )
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, **engine_kwargs)


class SQLAlchemySnapshotRepository(SnapshotRepository):
    """SQLAlchemy implementation of snapshot storage"""

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        if engine is None and database_url is None:
            raise ValueError("Either database_url or engine is required")
        self._engine = engine or create_snapshot_engine(database_url)
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        self._logger = logging.getLogger(self.__class__.__name__)
        self.create_tables()

    def create_tables(self) -> None:
        try:
            Base.metadata.create_all(self._engine)
        except SQLAlchemyError as e:
            self._logger.error("Failed to create snapshot tables: %s", e)
            raise PersistenceError(f"Failed to create tables: {e}", "create_tables") from e

    @contextmanager
    def _session(self, operation: str) -> Generator[Session, None, None]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            self._logger.error("Snapshot %s failed: %s", operation, e)
            raise PersistenceError(f"Snapshot {operation} failed: {e}", operation) from e
        finally:
            session.close()

    def load(self, namespace: str) -> Optional[str]:
        with self._session("load") as session:
            row = session.get(StoredSnapshot, namespace)
            if row is None:
                self._logger.debug("No snapshot stored under %s", namespace)
                return None
            return row.payload

    def save(self, namespace: str, payload: str) -> None:
        with self._session("save") as session:
            row = session.get(StoredSnapshot, namespace)
            if row is None:
                session.add(StoredSnapshot(namespace=namespace, payload=payload))
            else:
                row.payload = payload
        self._logger.debug("Saved snapshot %s (%d bytes)", namespace, len(payload))

    def delete(self, namespace: str) -> bool:
        with self._session("delete") as session:
            row = session.get(StoredSnapshot, namespace)
            if row is None:
                return False
            session.delete(row)
            return True

    def dispose(self) -> None:
        self._engine.dispose()
