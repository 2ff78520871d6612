from __future__ import annotations

import pytest

from lists_backend.documents import Item, ItemList, ListSummary
from lists_backend.errors import BadRequestError, NotFoundError
from lists_backend.services.lists_service import ListsService

pytestmark = pytest.mark.asyncio

OWNER = "a" * 32
OTHER = "b" * 32


def _list(name: str = "groceries") -> ItemList:
    return ItemList(name=name, items=[Item(title="milk", description="2l")])


async def test_add_and_get_single_list(lists_service: ListsService) -> None:
    id = await lists_service.add_user_list(OWNER, _list())

    found = await lists_service.get_single_user_list(id, OWNER)

    assert found.id == id
    assert found.user_id == OWNER
    assert found.name == "groceries"
    assert found.items == [Item(title="milk", description="2l")]


async def test_add_ignores_caller_supplied_owner(lists_service: ListsService) -> None:
    doc = _list()
    doc.user_id = OTHER

    id = await lists_service.add_user_list(OWNER, doc)

    assert (await lists_service.get_single_user_list(id, OWNER)).user_id == OWNER
    with pytest.raises(NotFoundError):
        await lists_service.get_single_user_list(id, OTHER)


async def test_get_user_lists_returns_only_own_summaries(lists_service: ListsService) -> None:
    mine = await lists_service.add_user_list(OWNER, _list("mine"))
    await lists_service.add_user_list(OTHER, _list("theirs"))

    assert await lists_service.get_user_lists(OWNER) == [ListSummary(id=mine, name="mine")]
    assert await lists_service.get_user_lists("c" * 32) == []


async def test_update_user_list(lists_service: ListsService) -> None:
    id = await lists_service.add_user_list(OWNER, _list())

    updated = await lists_service.update_user_list(
        id, OWNER, ItemList(name="renamed", items=[Item(title="eggs")])
    )

    assert updated.id == id
    assert updated.user_id == OWNER
    assert await lists_service.get_single_user_list(id, OWNER) == updated


async def test_other_user_cannot_touch_list(lists_service: ListsService) -> None:
    id = await lists_service.add_user_list(OWNER, _list())

    with pytest.raises(NotFoundError) as exc_info:
        await lists_service.get_single_user_list(id, OTHER)
    assert exc_info.value.msg == f'lists with id "{id}" not found'

    with pytest.raises(NotFoundError):
        await lists_service.update_user_list(id, OTHER, _list("stolen"))
    with pytest.raises(NotFoundError):
        await lists_service.remove_user_list(id, OTHER)

    assert (await lists_service.get_single_user_list(id, OWNER)).name == "groceries"


async def test_remove_user_list(lists_service: ListsService) -> None:
    id = await lists_service.add_user_list(OWNER, _list())

    await lists_service.remove_user_list(id, OWNER)

    assert await lists_service.get_user_lists(OWNER) == []
    with pytest.raises(NotFoundError):
        await lists_service.remove_user_list(id, OWNER)


@pytest.mark.parametrize("bad_id", ["nope", "A" * 32, "a" * 31])
async def test_invalid_list_id_is_bad_request(lists_service: ListsService, bad_id: str) -> None:
    with pytest.raises(BadRequestError, match="is not a valid id"):
        await lists_service.get_single_user_list(bad_id, OWNER)
    with pytest.raises(BadRequestError):
        await lists_service.update_user_list(bad_id, OWNER, _list())
    with pytest.raises(BadRequestError):
        await lists_service.remove_user_list(bad_id, OWNER)
