"""Shared GraphQL-over-HTTP plumbing for both ownership sources."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

import httpx

from ..errors import GraphQLResponseError, ResponseShapeError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = httpx.Timeout(30.0, connect=10.0)


@asynccontextmanager
async def client_scope(client: Optional[httpx.AsyncClient] = None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the caller's client, or a short-lived one closed on exit."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as owned:
        yield owned


async def post_graphql(
    client: httpx.AsyncClient,
    url: str,
    payload: dict[str, Any],
) -> dict[str, Any]:
    """POST a GraphQL payload and return its ``data`` object.

    Raises:
        httpx.HTTPError: On transport failure or a non-2xx status.
        GraphQLResponseError: If the body carries an ``errors`` array.
        ResponseShapeError: If the body is not JSON or has no ``data`` object.
    """
    try:
        response = await client.post(url, json=payload, headers={"Content-Type": "application/json"})
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.error("GraphQL request to %s failed: %s", url, e)
        raise

    try:
        body = response.json()
    except ValueError as e:
        logger.error("Non-JSON response from %s", url)
        raise ResponseShapeError(url, "body is not valid JSON", e) from e

    if not isinstance(body, dict):
        raise ResponseShapeError(url, f"expected a JSON object, got {type(body).__name__}")

    if body.get("errors"):
        logger.error("GraphQL errors from %s: %s", url, body["errors"])
        raise GraphQLResponseError(url, body["errors"])

    data = body.get("data")
    if not isinstance(data, dict):
        raise ResponseShapeError(url, "missing 'data' object")
    return data
