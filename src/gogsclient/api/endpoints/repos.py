"""Repository API endpoints."""

from __future__ import annotations

from gogsclient.api.client import GogsClient
from gogsclient.api.endpoints._decode import decode_many, decode_one
from gogsclient.api.models import (
    Repository,
    User,
    decode_repo,
    decode_repo_search,
    decode_repos,
    dump_json,
)


class ReposAPI:
    def __init__(self, client: GogsClient) -> None:
        self._client = client

    def search(self, query: str | None, uid: int = 0, limit: int = 10) -> list[Repository]:
        """Search public repositories. A ``uid`` of 0 searches every owner."""
        if query is None or not query.strip():
            return []
        response = self._client.get(
            f"/repos/search?q={query.strip()}&uid={uid}&limit={limit}"
        )
        return decode_many(response, 200, decode_repo_search)

    def create(self, repo: Repository | None, user: User | None) -> Repository | None:
        if repo is None or user is None:
            return None
        payload = {
            "name": repo.name,
            "description": repo.description,
            "private": repo.private,
        }
        response = self._client.post("/user/repos", dump_json(payload), user)
        return decode_one(response, 201, decode_repo)

    def get(self, repo: Repository | None, auth_user: User | None = None) -> Repository | None:
        if repo is None or repo.path is None:
            return None
        response = self._client.get(f"/repos/{repo.path}", auth_user)
        return decode_one(response, 200, decode_repo)

    def list(self, user: User | None) -> list[Repository]:
        """Repositories the user can access."""
        if user is None:
            return []
        response = self._client.get("/user/repos", user)
        return decode_many(response, 200, decode_repos)

    def delete(self, repo: Repository | None, user: User | None) -> bool:
        """Delete one of ``user``'s own repositories."""
        if repo is None or user is None:
            return False
        response = self._client.delete(f"/repos/{user.username}/{repo.name}", user)
        return response.code == 204
