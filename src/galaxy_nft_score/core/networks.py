"""Static per-chain configuration.

Galaxy serves every chain from one GraphQL endpoint; ownership is indexed by
a separate subgraph per chain.
"""

from __future__ import annotations

from typing import Optional, Union

from .errors import UnknownNetworkError
from .models import NetworkProfile

GALAXY_GRAPHQL_URL = "https://graphigo.prd.galaxy.eco/query"

NETWORKS: dict[str, NetworkProfile] = {
    "1": NetworkProfile(
        network_id="1",
        name="ETHEREUM",
        graphql=GALAXY_GRAPHQL_URL,
        subgraph="https://api.thegraph.com/subgraphs/name/alberthaotan/nft-eth",
    ),
    "56": NetworkProfile(
        network_id="56",
        name="BSC",
        graphql=GALAXY_GRAPHQL_URL,
        subgraph="https://api.thegraph.com/subgraphs/name/alberthaotan/nft-bsc",
    ),
    "137": NetworkProfile(
        network_id="137",
        name="MATIC",
        graphql=GALAXY_GRAPHQL_URL,
        subgraph="https://api.thegraph.com/subgraphs/name/alberthaotan/nft-matic",
    ),
}


def get_network(network_id: Union[str, int]) -> NetworkProfile:
    """Look up a network profile, failing fast on unknown ids."""
    key = str(network_id).strip()
    profile = NETWORKS.get(key)
    if profile is None:
        raise UnknownNetworkError(key)
    return profile


def resolve_subgraph_url(profile: NetworkProfile, override: Optional[str] = None) -> str:
    """Return the space's subgraph override if set, else the chain default."""
    if override and override.strip():
        return override.strip()
    return profile.subgraph
