"""Access token API endpoints."""

from __future__ import annotations

from gogsclient.api.client import GogsClient
from gogsclient.api.endpoints._decode import decode_many, decode_one
from gogsclient.api.models import Token, User, decode_token, decode_tokens, dump_json


class TokensAPI:
    def __init__(self, client: GogsClient) -> None:
        self._client = client

    def create(self, token: Token | None, user: User | None) -> Token | None:
        """Create a token. Gogs only accepts basic auth on this endpoint."""
        if token is None or user is None:
            return None
        payload = {"name": token.name, "scopes": token.scopes}
        response = self._client.post(
            f"/users/{user.username}/tokens", dump_json(payload), user
        )
        return decode_one(response, 201, decode_token)

    def list(self, user: User | None) -> list[Token]:
        if user is None:
            return []
        response = self._client.get(f"/users/{user.username}/tokens", user)
        return decode_many(response, 200, decode_tokens)
