"""Galaxy NFT score strategy.

Voting power from NFT holdings, cross-checked between the Galaxy API and an
ownership subgraph.
"""

__version__ = "0.3.0"
__author__ = "alberthaotan"

from .core.errors import (
    GalaxyScoreError,
    GraphQLResponseError,
    ResponseShapeError,
    StrategyConfigError,
    UnknownNetworkError,
)
from .core.models import ScoringRule, StrategyParams, TokenKey
from .core.networks import NETWORKS, get_network
from .strategy import strategy

__all__ = [
    "GalaxyScoreError",
    "GraphQLResponseError",
    "NETWORKS",
    "ResponseShapeError",
    "ScoringRule",
    "StrategyConfigError",
    "StrategyParams",
    "TokenKey",
    "UnknownNetworkError",
    "get_network",
    "strategy",
]
