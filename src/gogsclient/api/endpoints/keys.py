"""SSH public key API endpoints."""

from __future__ import annotations

from gogsclient.api.client import GogsClient
from gogsclient.api.endpoints._decode import decode_many, decode_one
from gogsclient.api.models import PublicKey, User, decode_key, decode_keys, dump_json


class PublicKeysAPI:
    def __init__(self, client: GogsClient) -> None:
        self._client = client

    def create(self, key: PublicKey | None, user: User | None) -> PublicKey | None:
        if key is None or user is None:
            return None
        payload = {"title": key.title, "key": key.key}
        response = self._client.post("/user/keys", dump_json(payload), user)
        return decode_one(response, 201, decode_key)

    def list(self, user: User | None) -> list[PublicKey]:
        if user is None:
            return []
        response = self._client.get(f"/users/{user.username}/keys", user)
        return decode_many(response, 200, decode_keys)

    def get(self, key: PublicKey | None, user: User | None) -> PublicKey | None:
        if key is None or user is None or key.id is None:
            return None
        response = self._client.get(f"/user/keys/{key.id}", user)
        return decode_one(response, 200, decode_key)

    def delete(self, key: PublicKey | None, user: User | None) -> bool:
        if key is None or user is None or key.id is None:
            return False
        response = self._client.delete(f"/user/keys/{key.id}", user)
        return response.code == 204
