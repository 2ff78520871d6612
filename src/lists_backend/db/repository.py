"""
lists_backend.db.repository

Generic CRUD repository over one document collection.

Responsibilities:
- Assign identifiers to new documents and insert them.
- Read/update/remove by arbitrary filters, with optional projections.
- Translate store outcomes into the application error taxonomy:
  no match -> NotFoundError, anything else -> UnexpectedError.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from lists_backend.db.store import (
    ID_FIELD,
    DocumentCollection,
    DocumentNotFoundError,
    Filter,
    Projection,
    is_valid_identifier,
    new_identifier,
)
from lists_backend.errors import NotFoundError, UnexpectedError
from lists_backend.observability.logging import get_logger

log = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class Storable(Protocol):
    def set_identifier(self, id: str) -> None: ...

    def to_document(self) -> dict[str, Any]: ...


class Repository:
    def __init__(self, collection: DocumentCollection) -> None:
        self._collection = collection

    @property
    def name(self) -> str:
        return self._collection.name

    def is_valid_identifier(self, id: str) -> bool:
        # Pure format check; never touches the store.
        return is_valid_identifier(id)

    async def add(self, doc: Storable) -> str:
        id = new_identifier()
        doc.set_identifier(id)
        try:
            await self._collection.insert(doc.to_document())
        except SQLAlchemyError as e:
            raise self._unexpected("add", "Error inserting in the database", e) from e
        return id

    async def get(
        self, model: type[M], filter: Filter, projection: Projection | None = None
    ) -> list[M]:
        try:
            docs = await self._collection.find(filter, projection)
            return [model.model_validate(d) for d in docs]
        except (SQLAlchemyError, ValidationError) as e:
            raise self._unexpected("get", "Error retrieving from the database", e) from e

    async def get_one(
        self, model: type[M], filter: Filter, projection: Projection | None = None
    ) -> M:
        try:
            doc = await self._collection.find_one(filter, projection)
            return model.model_validate(doc)
        except DocumentNotFoundError as e:
            raise self._not_found(filter) from e
        except (SQLAlchemyError, ValidationError) as e:
            raise self._unexpected("get_one", "Error retrieving from the database", e) from e

    async def update(self, filter: Filter, doc: Storable) -> None:
        try:
            await self._collection.update(filter, doc.to_document())
        except DocumentNotFoundError as e:
            raise self._not_found(filter) from e
        except SQLAlchemyError as e:
            raise self._unexpected("update", "Error updating the database", e) from e

    async def remove(self, filter: Filter) -> None:
        try:
            await self._collection.remove(filter)
        except DocumentNotFoundError as e:
            raise self._not_found(filter) from e
        except SQLAlchemyError as e:
            raise self._unexpected("remove", "Error removing from the database", e) from e

    def _not_found(self, filter: Filter) -> NotFoundError:
        return NotFoundError(id=str(filter.get(ID_FIELD, "")), model=self.name)

    def _unexpected(self, operation: str, msg: str, cause: Exception) -> UnexpectedError:
        log.error(
            "store_operation_failed",
            collection=self.name,
            operation=operation,
            error=repr(cause),
        )
        return UnexpectedError(msg, cause)


# --- Module Notes -----------------------------------------------------------
# Callers validate identifier format (and raise BadRequestError) before calling
# any method here; the repository never rewrites an identifier it is given.
