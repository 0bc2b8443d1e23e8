"""User API endpoints."""

from __future__ import annotations

from typing import Any

from gogsclient.api.client import GogsClient
from gogsclient.api.endpoints._decode import decode_many, decode_one
from gogsclient.api.models import User, decode_user, decode_user_search, dump_json


class UsersAPI:
    def __init__(self, client: GogsClient) -> None:
        self._client = client

    def create(
        self, user: User | None, auth_user: User | None, notify: bool = False
    ) -> User | None:
        """Create an account. Requires username, email and password."""
        if user is None:
            return None
        payload: dict[str, Any] = {
            "username": user.username,
            "email": user.email,
            "password": user.password,
            "send_notify": notify,
        }
        if user.full_name is not None:
            payload["full_name"] = user.full_name
        response = self._client.post("/admin/users", dump_json(payload), auth_user)
        return decode_one(response, 201, decode_user)

    def edit(self, user: User | None, auth_user: User | None) -> User | None:
        """Update an account's profile. The username itself cannot change."""
        if user is None or not user.username:
            return None
        response = self._client.patch(
            f"/admin/users/{user.username}", dump_json(user.to_json()), auth_user
        )
        return decode_one(response, 200, decode_user)

    def delete(self, user: User | None, auth_user: User | None) -> bool:
        """Delete an account. An account cannot delete itself."""
        if user is None or auth_user is None or not user.username:
            return False
        if user.username == auth_user.username:
            return False
        response = self._client.delete(f"/admin/users/{user.username}", auth_user)
        return response.code == 204

    def search(
        self, query: str | None, limit: int, auth_user: User | None = None
    ) -> list[User]:
        """Search accounts. Emails are blank unless the request is authenticated."""
        if query is None or not query.strip():
            return []
        response = self._client.get(
            f"/users/search?q={query}&limit={limit}", auth_user
        )
        return decode_many(response, 200, decode_user_search)

    def get(self, user: User | None, auth_user: User | None = None) -> User | None:
        if user is None or not user.username:
            return None
        response = self._client.get(f"/users/{user.username}", auth_user)
        return decode_one(response, 200, decode_user)
