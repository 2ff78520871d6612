"""
lists_backend.db.init_db

DB initialization helper (dev/test convenience).

Responsibilities:
- Create the documents table for local development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from lists_backend.db import models  # noqa: F401  # registers DocumentRecord on Base.metadata
from lists_backend.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
