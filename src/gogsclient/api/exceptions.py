"""Custom exceptions for the Gogs API client.

Nothing in the client raises these on its own. They exist so a caller can
turn a captured :class:`~gogsclient.api.response.Response` into an exception
with ``Response.raise_for_failure()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gogsclient.api.response import Response


class GogsAPIError(Exception):
    """Base exception for Gogs API errors."""

    def __init__(self, message: str, response: Response | None = None) -> None:
        self.response = response
        super().__init__(message)


class GogsTransportError(GogsAPIError):
    """The request never completed (DNS, connect, TLS, read or write)."""


class GogsStatusError(GogsAPIError):
    """The server answered with a status other than the expected one."""

    def __init__(self, response: Response, expected: int) -> None:
        self.expected = expected
        super().__init__(
            f"API error {response.code}: expected {expected}", response
        )
