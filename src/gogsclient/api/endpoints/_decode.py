"""Shared outcome interpretation for endpoint classes."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from gogsclient.api.response import Response

T = TypeVar("T")

logger = logging.getLogger(__name__)


def decode_one(
    response: Response, expected: int, decoder: Callable[[str], T]
) -> T | None:
    """Decode a single entity, or None if the call did not succeed."""
    if response.code != expected or response.data is None:
        return None
    try:
        return decoder(response.data)
    except ValueError as e:
        logger.warning("Could not decode response body: %s", e)
        return None


def decode_many(
    response: Response, expected: int, decoder: Callable[[str], list[T]]
) -> list[T]:
    """Decode a list of entities, or an empty list if the call did not succeed."""
    if response.code != expected or response.data is None:
        return []
    try:
        return decoder(response.data)
    except ValueError as e:
        logger.warning("Could not decode response body: %s", e)
        return []
