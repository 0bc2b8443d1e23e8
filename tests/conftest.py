"""Shared test fixtures for gogsclient."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import httpx
import pytest

from gogsclient.api.client import GogsClient
from gogsclient.api.models import User
from gogsclient.api.response import Response

API_URL = "https://git.example.com/api/v1"


@pytest.fixture
def mock_client():
    """A GogsClient with mocked request helpers."""
    client = MagicMock(spec=GogsClient)
    client.get.return_value = Response()
    client.post.return_value = Response()
    client.patch.return_value = Response()
    client.delete.return_value = Response()
    return client


@pytest.fixture
def admin():
    return User(username="admin", token="admin-token")


@pytest.fixture
def sample_user_data():
    """Raw user API response data."""
    return {
        "id": 2,
        "username": "alice",
        "login": "alice",
        "full_name": "Alice Liddell",
        "email": "a@x.com",
        "avatar_url": "https://git.example.com/avatars/2",
    }


@pytest.fixture
def sample_repo_data(sample_user_data):
    """Raw repository API response data."""
    return {
        "id": 7,
        "owner": sample_user_data,
        "name": "r1",
        "full_name": "alice/r1",
        "description": "first repo",
        "private": False,
        "fork": False,
        "html_url": "https://git.example.com/alice/r1",
        "clone_url": "https://git.example.com/alice/r1.git",
        "ssh_url": "git@git.example.com:alice/r1.git",
        "stars_count": 3,
        "forks_count": 0,
        "watchers_count": 1,
        "open_issues_count": 0,
        "default_branch": "master",
        "created_at": "2016-03-29T10:00:00Z",
        "updated_at": "2016-03-30T10:00:00Z",
        "permissions": {"admin": True, "push": True, "pull": True},
    }


@pytest.fixture
def sample_key_data():
    return {
        "id": 9,
        "key": "ssh-rsa AAAAB3NzaC1yc2E alice@laptop",
        "url": "https://git.example.com/api/v1/user/keys/9",
        "title": "laptop",
        "created_at": "2016-03-29T10:00:00Z",
    }


class RecordingServer:
    """Canned responses for an httpx.MockTransport, recording every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: str | bytes = ""
        self.error: Exception | None = None

    def reply(self, status_code: int, body: object = "") -> None:
        self.status_code = status_code
        self.body = body if isinstance(body, (str, bytes)) else json.dumps(body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        content = self.body.encode("utf-8") if isinstance(self.body, str) else self.body
        return httpx.Response(self.status_code, content=content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def server():
    return RecordingServer()


@pytest.fixture
def transport(server):
    return httpx.MockTransport(server)


@pytest.fixture
def client(transport):
    return GogsClient(API_URL, transport=transport)
