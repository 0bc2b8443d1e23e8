"""Authorization header encoding for Gogs API requests."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gogsclient.api.models import User


def encode_user_auth(user: User | None) -> str | None:
    """Return the ``Authorization`` header value for ``user``.

    A token always wins over username/password. Basic credentials are only
    produced when both the username and the password are non-empty. Returns
    None when the user carries nothing usable, in which case the request goes
    out unauthenticated.
    """
    if user is None:
        return None
    if user.token is not None:
        return f"token {user.token}"
    if user.username and user.password:
        credentials = f"{user.username}:{user.password}".encode("utf-8")
        return "Basic " + base64.b64encode(credentials).decode("ascii")
    return None
