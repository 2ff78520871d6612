"""
lists_backend.schemas

Request/response bodies exchanged with HTTP clients.

Responsibilities:
- Parse inbound JSON (camelCase) into typed DTOs.
- Convert DTOs into storable documents.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from lists_backend.auth.models import TokenPair
from lists_backend.documents import Item, ItemList, User


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserDto(_CamelModel):
    user_name: str = Field(default="", alias="userName", max_length=255)
    new_password: str = Field(default="", alias="newPassword")
    confirm_new_password: str = Field(default="", alias="confirmNewPassword")
    is_admin: bool = Field(default=False, alias="isAdmin")

    def to_user(self) -> User:
        return User(user_name=self.user_name, is_admin=self.is_admin)


class ListDto(_CamelModel):
    name: str = ""
    items: list[Item] = Field(default_factory=list)

    def to_list(self) -> ItemList:
        return ItemList(name=self.name, items=list(self.items))


class Login(_CamelModel):
    user_name: str = Field(default="", alias="userName")
    password: str = ""


class RefreshTokenRequest(_CamelModel):
    refresh_token: str = Field(default="", alias="refreshToken")


class TokenPairResponse(_CamelModel):
    token: str
    refresh_token: str = Field(alias="refreshToken")

    @classmethod
    def from_pair(cls, pair: TokenPair) -> TokenPairResponse:
        return cls(token=pair.token, refresh_token=pair.refresh_token)
