"""
lists_backend.db.models

Persistence schema for the document store.

Responsibilities:
- Define the single `documents` table holding JSON documents per collection.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from lists_backend.db.base import Base


def _utcnow() -> datetime:
    # Persist naive UTC timestamps for simplicity.
    return datetime.now(tz=UTC).replace(tzinfo=None)


class DocumentRecord(Base):
    __tablename__ = "documents"

    collection: Mapped[str] = mapped_column(String(64), primary_key=True)
    id: Mapped[str] = mapped_column(String(32), primary_key=True)

    # Everything except the identifier; `_id` lives in the `id` column.
    body: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (Index("ix_documents_collection_created", "collection", "created_at"),)


# --- Module Notes -----------------------------------------------------------
# No unique constraint on body fields: user-name uniqueness is checked in code
# (read-then-write), see `services.users_service`.
