"""Synchronous HTTP client for the Gogs API."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

import httpx

from gogsclient.api.auth import encode_user_auth
from gogsclient.api.response import Response, is_readable_method

if TYPE_CHECKING:
    from gogsclient.api.models import User

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5000

_TRAILING_SLASHES = re.compile(r"/+$")
_LEADING_SLASHES = re.compile(r"^/+")


def normalize_base_url(api_url: str) -> str:
    """Collapse any trailing slashes on ``api_url`` into exactly one."""
    return _TRAILING_SLASHES.sub("", api_url) + "/"


class GogsClient:
    """Request executor for the Gogs API.

    Every call is a single blocking round trip on a fresh connection; nothing
    is pooled or retried. Failures never propagate: they are captured on the
    returned :class:`Response`, which is also kept as ``last_response``.

    Timeouts are in milliseconds and are read at the start of every call, so
    changing them affects subsequent requests only. An instance holds mutable
    state and must not be shared between threads.
    """

    def __init__(
        self,
        api_url: str,
        *,
        read_timeout: int = DEFAULT_TIMEOUT,
        connection_timeout: int = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = normalize_base_url(api_url)
        self.read_timeout = read_timeout
        self.connection_timeout = connection_timeout
        self._transport = transport
        self._last_response: Response | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def last_response(self) -> Response | None:
        """The outcome of the most recent request, if any."""
        return self._last_response

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            self.read_timeout / 1000, connect=self.connection_timeout / 1000
        )

    def _headers(self, user: User | None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if user is not None:
            auth = encode_user_auth(user)
            if auth is not None:
                headers["Authorization"] = auth
        return headers

    def request(
        self,
        partial_url: str,
        user: User | None = None,
        post_data: str | None = None,
        method: str | None = None,
    ) -> Response:
        """Perform one request against the API.

        ``post_data`` turns the request into a write (POST unless ``method``
        says otherwise). ``method`` overrides the default verb. DELETE and PUT
        responses are never read. For other methods ``data`` holds the body
        whatever the status, so an error response carries the server's
        message.
        """
        code = -1
        data: str | None = None
        exception: Exception | None = None
        if method is not None:
            method = method.upper()
        elif post_data is not None:
            method = "POST"
        else:
            method = "GET"
        try:
            url = self._base_url + _LEADING_SLASHES.sub("", partial_url)
            content = post_data.encode("utf-8") if post_data is not None else None
            with httpx.Client(
                timeout=self._timeout(), transport=self._transport
            ) as http:
                with http.stream(
                    method, url, headers=self._headers(user), content=content
                ) as response:
                    code = response.status_code
                    logger.debug("%s %s -> %d", method, url, code)
                    if is_readable_method(method):
                        data = response.read().decode("utf-8")
        except Exception as e:
            logger.warning("%s %s failed: %r", method, partial_url, e)
            exception = e
        self._last_response = Response(code, data, exception)
        return self._last_response

    def get(self, path: str, user: User | None = None) -> Response:
        return self.request(path, user)

    def post(self, path: str, body: str, user: User | None = None) -> Response:
        return self.request(path, user, body)

    def patch(self, path: str, body: str, user: User | None = None) -> Response:
        return self.request(path, user, body, "PATCH")

    def delete(self, path: str, user: User | None = None) -> Response:
        return self.request(path, user, None, "DELETE")
