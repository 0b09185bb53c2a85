"""Snapshot strategy entry point: NFT holdings to voting power.

Fetches ownership from the subgraph and collection names from Galaxy in
parallel, keeps only tokens both sources agree on, then applies the space's
scoring rules.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Optional, Sequence, Union

import httpx

from .core.clients import galaxy, subgraph
from .core.clients.graphql import client_scope
from .core.models import StrategyParams, parse_snapshot
from .core.networks import get_network, resolve_subgraph_url
from .core.reconcile import galaxy_ownership_map, reconcile, subgraph_ownership_map
from .core.scoring import count_holdings, score_holdings

logger = logging.getLogger(__name__)


async def _gather_all_or_nothing(*coros: Awaitable[Any]) -> list[Any]:
    """Await every coroutine; on the first failure cancel and reap the rest."""
    tasks = [asyncio.ensure_future(c) for c in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def strategy(
    space: Any,
    network: Union[str, int],
    provider: Any,
    addresses: Sequence[str],
    options: Optional[dict],
    snapshot: Union[str, int] = "latest",
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> dict[str, float]:
    """Compute the voting score of each address from its NFT holdings.

    Args:
        space: Snapshot space id (unused).
        network: Chain id, one of the configured networks.
        provider: Host's chain provider (unused; both sources are HTTP APIs).
        addresses: Voter addresses; output keys keep this casing.
        options: Strategy options with a ``params`` object holding
            ``NFTCoreAddress``, ``configs`` and an optional ``subgraph`` URL.
        snapshot: ``"latest"`` or a block number for the ownership query.
        client: Optional shared HTTP client used for both requests.

    Returns:
        Mapping of every input address to its score (0 without holdings).

    Raises:
        StrategyConfigError: Unknown network, bad params, or bad snapshot.
        GraphQLResponseError: Either source answered with GraphQL errors.
        ResponseShapeError: Either source answered with an unexpected body.
        httpx.HTTPError: Either request failed in transport.
    """
    profile = get_network(network)
    params = StrategyParams.from_options(options)
    block = parse_snapshot(snapshot)
    addresses = list(addresses)

    if not addresses:
        return {}

    logger.info(
        "Scoring %d addresses on %s at %s with %d rules",
        len(addresses),
        profile.name,
        block,
        len(params.configs),
    )

    subgraph_url = resolve_subgraph_url(profile, params.subgraph)
    async with client_scope(client) as http:
        galaxy_records, ownerships = await _gather_all_or_nothing(
            galaxy.fetch_owner_nfts(profile, params.nft_core_addresses, addresses, client=http),
            subgraph.fetch_ownerships(subgraph_url, addresses, block, client=http),
        )

    reconciled = reconcile(
        subgraph_ownership_map(ownerships),
        galaxy_ownership_map(galaxy_records),
    )
    counts = count_holdings(addresses, reconciled)
    scores = score_holdings(addresses, counts, params.configs)

    logger.debug("Scored %d addresses, %d non-zero", len(scores), sum(1 for s in scores.values() if s))
    return scores
