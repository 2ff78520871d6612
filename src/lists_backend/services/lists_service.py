"""
lists_backend.services.lists_service

Lists domain service.

Responsibilities:
- CRUD over a user's own lists. Every store call is filtered by
  `(id, userId)`, so one user can never read or touch another user's list.
"""

from __future__ import annotations

from lists_backend.db.repository import Repository
from lists_backend.documents import ItemList, ListSummary
from lists_backend.errors import invalid_id_error

LISTS_COLLECTION = "lists"


class ListsService:
    def __init__(self, *, repository: Repository) -> None:
        self._lists = repository

    async def add_user_list(self, user_id: str, item_list: ItemList) -> str:
        item_list.user_id = user_id
        return await self._lists.add(item_list)

    async def remove_user_list(self, id: str, user_id: str) -> None:
        self._check_id(id)
        await self._lists.remove(_owned(id, user_id))

    async def update_user_list(self, id: str, user_id: str, item_list: ItemList) -> ItemList:
        self._check_id(id)
        item_list.set_identifier(id)
        item_list.user_id = user_id
        await self._lists.update(_owned(id, user_id), item_list)
        return item_list

    async def get_single_user_list(self, id: str, user_id: str) -> ItemList:
        self._check_id(id)
        return await self._lists.get_one(ItemList, _owned(id, user_id))

    async def get_user_lists(self, user_id: str) -> list[ListSummary]:
        return await self._lists.get(ListSummary, {"userId": user_id}, {"name": 1})

    def _check_id(self, id: str) -> None:
        if not self._lists.is_valid_identifier(id):
            raise invalid_id_error(id)


def _owned(id: str, user_id: str) -> dict[str, str]:
    return {"_id": id, "userId": user_id}
