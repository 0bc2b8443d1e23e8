"""High level entry point: one method per Gogs API operation.

Every method performs at most one request and reports failure through its
return value (None, an empty list or False). Inspect ``last_response`` after
a call to find out why it failed.
"""

from __future__ import annotations

import httpx

from gogsclient.api.client import DEFAULT_TIMEOUT, GogsClient
from gogsclient.api.endpoints.keys import PublicKeysAPI
from gogsclient.api.endpoints.repos import ReposAPI
from gogsclient.api.endpoints.tokens import TokensAPI
from gogsclient.api.endpoints.users import UsersAPI
from gogsclient.api.models import PublicKey, Repository, Token, User
from gogsclient.api.response import Response
from gogsclient.config import GogsConfig


class GogsAPI:
    """Client for a Gogs server's API, e.g. ``GogsAPI("https://try.gogs.io/api/v1")``."""

    def __init__(
        self,
        api_url: str,
        *,
        read_timeout: int = DEFAULT_TIMEOUT,
        connection_timeout: int = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.client = GogsClient(
            api_url,
            read_timeout=read_timeout,
            connection_timeout=connection_timeout,
            transport=transport,
        )
        self.users = UsersAPI(self.client)
        self.repos = ReposAPI(self.client)
        self.tokens = TokensAPI(self.client)
        self.keys = PublicKeysAPI(self.client)

    @classmethod
    def from_config(
        cls, config: GogsConfig, transport: httpx.BaseTransport | None = None
    ) -> GogsAPI:
        return cls(
            config.server.api_url,
            read_timeout=config.server.read_timeout,
            connection_timeout=config.server.connection_timeout,
            transport=transport,
        )

    @property
    def last_response(self) -> Response | None:
        return self.client.last_response

    @property
    def read_timeout(self) -> int:
        return self.client.read_timeout

    @read_timeout.setter
    def read_timeout(self, timeout: int) -> None:
        self.client.read_timeout = timeout

    @property
    def connection_timeout(self) -> int:
        return self.client.connection_timeout

    @connection_timeout.setter
    def connection_timeout(self, timeout: int) -> None:
        self.client.connection_timeout = timeout

    # users

    def create_user(self, user: User, auth_user: User, notify: bool = False) -> User | None:
        return self.users.create(user, auth_user, notify)

    def edit_user(self, user: User, auth_user: User) -> User | None:
        return self.users.edit(user, auth_user)

    def delete_user(self, user: User, auth_user: User) -> bool:
        return self.users.delete(user, auth_user)

    def search_users(self, query: str, limit: int, auth_user: User | None = None) -> list[User]:
        return self.users.search(query, limit, auth_user)

    def get_user(self, user: User, auth_user: User | None = None) -> User | None:
        return self.users.get(user, auth_user)

    # repositories

    def search_repos(self, query: str, uid: int = 0, limit: int = 10) -> list[Repository]:
        return self.repos.search(query, uid, limit)

    def create_repo(self, repo: Repository, user: User) -> Repository | None:
        return self.repos.create(repo, user)

    def get_repo(self, repo: Repository, auth_user: User | None = None) -> Repository | None:
        return self.repos.get(repo, auth_user)

    def list_repos(self, user: User) -> list[Repository]:
        return self.repos.list(user)

    def delete_repo(self, repo: Repository, user: User) -> bool:
        return self.repos.delete(repo, user)

    # tokens

    def create_token(self, token: Token, user: User) -> Token | None:
        return self.tokens.create(token, user)

    def list_tokens(self, user: User) -> list[Token]:
        return self.tokens.list(user)

    # public keys

    def create_public_key(self, key: PublicKey, user: User) -> PublicKey | None:
        return self.keys.create(key, user)

    def list_public_keys(self, user: User) -> list[PublicKey]:
        return self.keys.list(user)

    def get_public_key(self, key: PublicKey, user: User) -> PublicKey | None:
        return self.keys.get(key, user)

    def delete_public_key(self, key: PublicKey, user: User) -> bool:
        return self.keys.delete(key, user)
