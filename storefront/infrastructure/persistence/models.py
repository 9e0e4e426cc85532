# pylint: disable=too-few-public-methods
"""
SQLAlchemy models for snapshot storage
"""

from datetime import datetime
from typing import Optional, Type

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeMeta, Mapped, declarative_base, mapped_column
from sqlalchemy.sql import func

from storefront.infrastructure.utilities.constants import StorageSettings

_Base = declarative_base()

# Type alias for mypy
Base: Type[DeclarativeMeta] = _Base


class StoredSnapshot(Base):
    """Serialized store snapshot, one row per namespace"""

    __tablename__ = "store_snapshots"

    namespace: Mapped[str] = mapped_column(
        String(StorageSettings.MAX_NAMESPACE_LENGTH), primary_key=True
    )
    payload: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )

    def __str__(self) -> str:
        return f"<StoredSnapshot(namespace='{self.namespace}', size={len(self.payload or '')})>"
