"""Join ownership records from the two sources.

The subgraph decides *who owns what* (and can be pinned to a block); Galaxy
decides *what a token is called*. A token is only resolved when both sources
report it for the same owner.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .models import (
    GalaxyOwnerNfts,
    OwnershipMap,
    SubgraphOwnership,
    normalize_address,
)

logger = logging.getLogger(__name__)


def galaxy_ownership_map(records: Iterable[GalaxyOwnerNfts]) -> OwnershipMap:
    """Map each owner to the collection name of every token Galaxy lists."""
    ownership: OwnershipMap = {}
    for record in records:
        tokens = ownership.setdefault(normalize_address(record.owner), {})
        for nft in record.nfts:
            tokens[nft.token_key] = nft.name or ""
    return ownership


def subgraph_ownership_map(records: Iterable[SubgraphOwnership]) -> OwnershipMap:
    """Map each owner to the tokens the subgraph reports, names unresolved."""
    ownership: OwnershipMap = {}
    for record in records:
        ownership.setdefault(normalize_address(record.owner), {})[record.token_key] = ""
    return ownership


def reconcile(subgraph_map: OwnershipMap, galaxy_map: OwnershipMap) -> OwnershipMap:
    """Resolve names for subgraph-owned tokens that Galaxy also reports.

    The result has exactly the owners and tokens of ``subgraph_map``; tokens
    Galaxy does not confirm for that owner keep an empty name.
    """
    reconciled: OwnershipMap = {}
    matched = 0
    for owner, tokens in subgraph_map.items():
        named = galaxy_map.get(owner, {})
        resolved = {key: named.get(key, "") for key in tokens}
        matched += sum(1 for name in resolved.values() if name)
        reconciled[owner] = resolved

    logger.info(
        "Reconciled %d of %d subgraph tokens against Galaxy",
        matched,
        sum(len(tokens) for tokens in subgraph_map.values()),
    )
    return reconciled
