"""Pydantic models for Gogs API payloads, plus their JSON codecs."""

from __future__ import annotations

import json
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

DEFAULT_SCOPES = ["all"]


class _GogsModel(BaseModel):
    """Base model that ignores extra fields from the API."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class User(_GogsModel):
    """A Gogs account.

    Also used as the authenticating identity for a request: ``token`` and
    ``password`` are client-side credentials and are left out of
    ``model_dump()``.
    """

    id: int | None = None
    username: str | None = Field(
        default=None, validation_alias=AliasChoices("username", "login")
    )
    full_name: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    password: str | None = Field(default=None, exclude=True, repr=False)
    token: str | None = Field(default=None, exclude=True, repr=False)

    def to_json(self) -> dict[str, Any]:
        """Profile fields for an edit request."""
        payload = self.model_dump(
            include={"username", "full_name", "email"}, exclude_none=True
        )
        if self.password:
            payload["password"] = self.password
        return payload


class RepoPermissions(_GogsModel):
    admin: bool = False
    push: bool = False
    pull: bool = False

    @field_validator("admin", "push", "pull", mode="before")
    @classmethod
    def _coerce_bools(cls, v):
        return v if v is not None else False


class Repository(_GogsModel):
    id: int | None = None
    owner: User | None = None
    name: str | None = None
    full_name: str | None = None
    description: str = ""
    private: bool = False
    fork: bool = False
    html_url: str | None = None
    clone_url: str | None = None
    ssh_url: str | None = None
    website: str | None = None
    stars_count: int = 0
    forks_count: int = 0
    watchers_count: int = 0
    open_issues_count: int = 0
    default_branch: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    permissions: RepoPermissions | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, v):
        return v if v is not None else ""

    @field_validator("private", "fork", mode="before")
    @classmethod
    def _coerce_bools(cls, v):
        return v if v is not None else False

    @model_validator(mode="after")
    def _fill_full_name(self) -> Repository:
        owner = self.owner.username if self.owner is not None else None
        if self.full_name is None and self.name and owner:
            self.full_name = f"{owner}/{self.name}"
        return self

    @property
    def owner_name(self) -> str | None:
        if self.owner is not None and self.owner.username:
            return self.owner.username
        if self.full_name and "/" in self.full_name:
            return self.full_name.split("/", 1)[0]
        return None

    @property
    def path(self) -> str | None:
        """``owner/name`` as used in repository URLs."""
        return self.full_name


class Token(_GogsModel):
    """An application access token. ``str(token)`` is the token value."""

    name: str | None = None
    sha1: str | None = None
    scopes: list[str] = Field(default_factory=lambda: list(DEFAULT_SCOPES))

    @field_validator("scopes", mode="before")
    @classmethod
    def _coerce_scopes(cls, v):
        return v if v is not None else list(DEFAULT_SCOPES)

    def __str__(self) -> str:
        return self.sha1 or ""


class PublicKey(_GogsModel):
    id: int | None = None
    key: str | None = None
    url: str | None = None
    title: str | None = None
    created_at: str | None = None


def dump_json(payload: dict[str, Any]) -> str:
    """Serialize a request body the way the API expects it."""
    return json.dumps(payload, separators=(",", ":"))


_user_list = TypeAdapter(list[User])
_repo_list = TypeAdapter(list[Repository])
_token_list = TypeAdapter(list[Token])
_key_list = TypeAdapter(list[PublicKey])


def decode_user(text: str) -> User:
    return User.model_validate_json(text)


def decode_users(text: str) -> list[User]:
    return _user_list.validate_json(text)


def decode_repo(text: str) -> Repository:
    return Repository.model_validate_json(text)


def decode_repos(text: str) -> list[Repository]:
    return _repo_list.validate_json(text)


def decode_token(text: str) -> Token:
    return Token.model_validate_json(text)


def decode_tokens(text: str) -> list[Token]:
    return _token_list.validate_json(text)


def decode_key(text: str) -> PublicKey:
    return PublicKey.model_validate_json(text)


def decode_keys(text: str) -> list[PublicKey]:
    return _key_list.validate_json(text)


class _Envelope(_GogsModel):
    ok: bool = False
    data: Any = None


def _envelope_data(text: str) -> Any:
    """Unwrap a search result of the form ``{"ok": true, "data": [...]}``.

    A missing or false ``ok`` flag is an empty result, not an error.
    """
    envelope = _Envelope.model_validate_json(text)
    if not envelope.ok:
        return []
    return envelope.data


def decode_user_search(text: str) -> list[User]:
    return _user_list.validate_python(_envelope_data(text))


def decode_repo_search(text: str) -> list[Repository]:
    return _repo_list.validate_python(_envelope_data(text))
