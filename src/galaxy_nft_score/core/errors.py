"""Exception types raised by the scoring strategy.

Transport failures are not wrapped: ``httpx.HTTPError`` propagates as-is.
"""

from __future__ import annotations

from typing import Any, Optional


class GalaxyScoreError(Exception):
    """Base class for every error raised by this package."""


class StrategyConfigError(GalaxyScoreError, ValueError):
    """Invalid strategy params or snapshot."""


class UnknownNetworkError(StrategyConfigError, KeyError):
    """Network id has no configured profile."""

    def __init__(self, network_id: str):
        self.network_id = network_id
        super().__init__(f"Unknown network id: {network_id!r}")

    def __str__(self) -> str:
        return self.args[0]


class GraphQLResponseError(GalaxyScoreError):
    """The endpoint answered with a GraphQL ``errors`` array."""

    def __init__(self, endpoint: str, errors: list[Any]):
        self.endpoint = endpoint
        self.errors = errors
        super().__init__(f"GraphQL errors from {endpoint}: {errors}")


class ResponseShapeError(GalaxyScoreError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, endpoint: str, detail: str, cause: Optional[Exception] = None):
        self.endpoint = endpoint
        self.detail = detail
        self.cause = cause
        super().__init__(f"Unexpected response from {endpoint}: {detail}")
