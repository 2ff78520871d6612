"""
lists_backend.db.store

Document store over the `documents` table.

Responsibilities:
- Expose named collections with insert/find/find_one/update/remove.
- Apply equality filters and include/exclude projections.
- Report "nothing matched" as a typed error, distinct from driver failures.
- Generate and format-check document identifiers.
"""

from __future__ import annotations

import re
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lists_backend.db.models import DocumentRecord

ID_FIELD = "_id"

_ID_PATTERN = re.compile(r"[0-9a-f]{32}")

Filter = dict[str, Any]
Projection = dict[str, int]


class DocumentNotFoundError(Exception):
    pass


def new_identifier() -> str:
    return uuid.uuid4().hex


def is_valid_identifier(id: str) -> bool:
    return isinstance(id, str) and _ID_PATTERN.fullmatch(id) is not None


class DocumentCollection:
    """
    One named collection. Every write commits on its own; there are no
    multi-document transactions.

    Driver failures surface as `SQLAlchemyError` after the session has been
    rolled back.
    """

    def __init__(self, session: AsyncSession, name: str) -> None:
        self._session = session
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def insert(self, doc: dict[str, Any]) -> None:
        body = dict(doc)
        id = body.pop(ID_FIELD)
        async with self._guard():
            self._session.add(DocumentRecord(collection=self._name, id=id, body=body))
            await self._session.commit()

    async def find(self, filter: Filter, projection: Projection | None = None) -> list[dict[str, Any]]:
        async with self._guard():
            rows = (await self._session.execute(self._select(filter))).scalars().all()
        return [_project(_to_document(r), projection) for r in rows]

    async def find_one(self, filter: Filter, projection: Projection | None = None) -> dict[str, Any]:
        async with self._guard():
            row = await self._first(filter)
        return _project(_to_document(row), projection)

    async def update(self, filter: Filter, doc: dict[str, Any]) -> None:
        body = dict(doc)
        body.pop(ID_FIELD, None)
        async with self._guard():
            row = await self._first(filter)
            row.body = body
            await self._session.commit()

    async def remove(self, filter: Filter) -> None:
        async with self._guard():
            row = await self._first(filter)
            await self._session.delete(row)
            await self._session.commit()

    async def _first(self, filter: Filter) -> DocumentRecord:
        row = (await self._session.execute(self._select(filter).limit(1))).scalars().first()
        if row is None:
            raise DocumentNotFoundError(f"no document in {self._name!r} matches {filter!r}")
        return row

    def _select(self, filter: Filter) -> Select[tuple[DocumentRecord]]:
        clauses = [DocumentRecord.collection == self._name]
        clauses.extend(_match(key, value) for key, value in filter.items())
        return (
            select(DocumentRecord)
            .where(*clauses)
            .order_by(DocumentRecord.created_at, DocumentRecord.id)
        )

    @asynccontextmanager
    async def _guard(self) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError:
            await self._session.rollback()
            raise


def _match(key: str, value: Any) -> ColumnElement[bool]:
    if key == ID_FIELD:
        return DocumentRecord.id == value
    field = DocumentRecord.body[key]
    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return field.as_boolean() == value
    if isinstance(value, str):
        return field.as_string() == value
    if isinstance(value, int):
        return field.as_integer() == value
    if isinstance(value, float):
        return field.as_float() == value
    raise TypeError(f"unsupported filter value for {key!r}: {type(value).__name__}")


def _to_document(row: DocumentRecord) -> dict[str, Any]:
    return {ID_FIELD: row.id, **(row.body or {})}


def _project(doc: dict[str, Any], projection: Projection | None) -> dict[str, Any]:
    if not projection:
        return doc
    included = {k for k, v in projection.items() if k != ID_FIELD and v}
    if included:
        if projection.get(ID_FIELD, 1):
            included.add(ID_FIELD)
        return {k: v for k, v in doc.items() if k in included}
    excluded = {k for k, v in projection.items() if not v}
    if not excluded:
        # {"_id": 1} alone selects just the identifier.
        return {ID_FIELD: doc[ID_FIELD]}
    return {k: v for k, v in doc.items() if k not in excluded}


# --- Module Notes -----------------------------------------------------------
# Filters are equality-only on top-level fields; that is all the services need.
