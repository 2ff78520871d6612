"""
lists_backend.documents

Storable document models.

Responsibilities:
- Define the User and List documents (plus embedded Items).
- Define the projection shapes returned by summary queries.
- Implement the `Storable` contract used by `db.repository.Repository`.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Document(BaseModel):
    """
    Base for everything stored through the repository.

    Stored under `_id`; rendered to API clients as `id`.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        default="",
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="id",
    )

    def set_identifier(self, id: str) -> None:
        self.id = id

    def to_document(self) -> dict[str, Any]:
        body = self.model_dump(by_alias=True, exclude={"id"})
        return {"_id": self.id, **body}


class User(Document):
    user_name: str = Field(alias="userName")
    password_hash: str = Field(default="", alias="passwordHash")
    is_admin: bool = Field(default=False, alias="isAdmin")


class Item(BaseModel):
    title: str = ""
    description: str = ""


class ItemList(Document):
    user_id: str = Field(default="", alias="userId")
    name: str = ""
    items: list[Item] = Field(default_factory=list)


class ListSummary(Document):
    name: str = ""


class UserSummary(Document):
    user_name: str = Field(default="", alias="userName")
    is_admin: bool = Field(default=False, alias="isAdmin")


# --- Module Notes -----------------------------------------------------------
# Field aliases are the stored/wire names (camelCase), matching existing data.
