"""Configuration management for gogsclient.

Reads and writes TOML config at ~/.config/gogsclient/config.toml. Passwords
are never written to disk; only a token and username are persisted.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from gogsclient.api.client import DEFAULT_TIMEOUT
from gogsclient.api.models import User

CONFIG_DIR = Path.home() / ".config" / "gogsclient"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_API_URL = "https://try.gogs.io/api/v1"


@dataclass
class ServerConfig:
    api_url: str = DEFAULT_API_URL
    read_timeout: int = DEFAULT_TIMEOUT
    connection_timeout: int = DEFAULT_TIMEOUT


@dataclass
class AuthConfig:
    token: str = ""
    username: str = ""

    def to_user(self) -> User | None:
        """The identity to authenticate with, or None if nothing is set."""
        if not self.token and not self.username:
            return None
        return User(username=self.username or None, token=self.token or None)


@dataclass
class GogsConfig:
    server: ServerConfig = field(default_factory=ServerConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)


def load_config(path: Path | None = None) -> GogsConfig:
    """Load config from TOML file, returning defaults if missing or corrupt."""
    path = path or CONFIG_PATH
    if not path.exists():
        return GogsConfig()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return GogsConfig()

    server_data = data.get("server", {})
    auth_data = data.get("auth", {})

    return GogsConfig(
        server=ServerConfig(
            api_url=server_data.get("api_url", DEFAULT_API_URL),
            read_timeout=server_data.get("read_timeout", DEFAULT_TIMEOUT),
            connection_timeout=server_data.get("connection_timeout", DEFAULT_TIMEOUT),
        ),
        auth=AuthConfig(
            token=auth_data.get("token", ""),
            username=auth_data.get("username", ""),
        ),
    )


def save_config(config: GogsConfig, path: Path | None = None) -> None:
    """Write config to TOML file, readable by the owner only."""
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    os.chmod(path.parent, 0o700)

    data = {
        "server": {
            "api_url": config.server.api_url,
            "read_timeout": config.server.read_timeout,
            "connection_timeout": config.server.connection_timeout,
        },
        "auth": {
            "token": config.auth.token,
            "username": config.auth.username,
        },
    }

    with open(path, "wb") as f:
        tomli_w.dump(data, f)
    os.chmod(path, 0o600)


def has_token(path: Path | None = None) -> bool:
    """Quick check if an access token is configured."""
    config = load_config(path)
    return bool(config.auth.token)
