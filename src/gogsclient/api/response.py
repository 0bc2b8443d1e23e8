"""Outcome of a single round trip against the Gogs API."""

from __future__ import annotations

from dataclasses import dataclass

from gogsclient.api.exceptions import GogsStatusError, GogsTransportError

# Methods whose response body is never fetched.
NON_READABLE_METHODS = frozenset({"DELETE", "PUT"})


def is_readable_method(method: str) -> bool:
    """Whether a response body should be read for ``method``."""
    return method.upper() not in NON_READABLE_METHODS


@dataclass(frozen=True)
class Response:
    """Immutable record of one request attempt.

    ``code`` is -1 when the server was never reached. ``data`` holds the raw
    UTF-8 body and is only set for readable methods that completed.
    ``exception`` holds whatever was raised along the way; when it is set the
    body is not usable.
    """

    code: int = -1
    data: str | None = None
    exception: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.exception is None and self.code != -1

    def raise_for_failure(self, expected: int | None = None) -> None:
        """Raise if the request failed, or if the status is not ``expected``."""
        if self.exception is not None:
            raise GogsTransportError(
                f"Request failed: {self.exception!r}", self
            ) from self.exception
        if self.code == -1:
            raise GogsTransportError("Request was never sent", self)
        if expected is not None and self.code != expected:
            raise GogsStatusError(self, expected)
