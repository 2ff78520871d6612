"""
lists_backend.api.routers.lists

Endpoints for the caller's own lists.

Responsibilities:
- Resolve the caller from the access token and pass its subject id to the
  lists service on every call.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from lists_backend.api.deps import get_claims, lists_service_dep
from lists_backend.auth.models import AccessClaims
from lists_backend.documents import ItemList, ListSummary
from lists_backend.schemas import ListDto
from lists_backend.services.lists_service import ListsService

router = APIRouter(prefix="/lists", tags=["lists"])


@router.get("", response_model=list[ListSummary])
async def get_user_lists(
    claims: AccessClaims = Depends(get_claims),
    lists: ListsService = Depends(lists_service_dep),
) -> list[ListSummary]:
    return await lists.get_user_lists(claims.user_id)


@router.get("/{list_id}", response_model=ItemList)
async def get_single_user_list(
    list_id: str,
    claims: AccessClaims = Depends(get_claims),
    lists: ListsService = Depends(lists_service_dep),
) -> ItemList:
    return await lists.get_single_user_list(list_id, claims.user_id)


@router.post("", status_code=HTTP_201_CREATED)
async def add_user_list(
    body: ListDto,
    claims: AccessClaims = Depends(get_claims),
    lists: ListsService = Depends(lists_service_dep),
) -> str:
    return await lists.add_user_list(claims.user_id, body.to_list())


@router.put("/{list_id}", response_model=ItemList)
async def update_user_list(
    list_id: str,
    body: ListDto,
    claims: AccessClaims = Depends(get_claims),
    lists: ListsService = Depends(lists_service_dep),
) -> ItemList:
    return await lists.update_user_list(list_id, claims.user_id, body.to_list())


@router.delete("/{list_id}", status_code=HTTP_204_NO_CONTENT)
async def remove_user_list(
    list_id: str,
    claims: AccessClaims = Depends(get_claims),
    lists: ListsService = Depends(lists_service_dep),
) -> Response:
    await lists.remove_user_list(list_id, claims.user_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
