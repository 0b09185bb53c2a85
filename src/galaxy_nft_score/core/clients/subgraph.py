"""NFT ownership subgraph client.

The subgraph is the source of truth for who owns which token, and can be
queried as of a historical block.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..errors import ResponseShapeError
from ..models import LATEST, Snapshot, SubgraphOwnership, normalize_address
from .graphql import client_scope, post_graphql

logger = logging.getLogger(__name__)

_OWNERSHIPS_ADAPTER = TypeAdapter(list[SubgraphOwnership])


def build_ownerships_query(owners: list[str], snapshot: Snapshot = LATEST) -> str:
    """Build the ``ownerships`` query for ``owners`` at ``snapshot``.

    Owners are lowercased, matching how the subgraph stores them. A block
    constraint is only added for a historical snapshot.
    """
    owner_list = json.dumps([normalize_address(o) for o in owners])
    args = [f"where: {{owner_in: {owner_list}}}"]
    if snapshot != LATEST:
        args.append(f"block: {{number: {int(snapshot)}}}")

    return f"""
    query {{
      ownerships({', '.join(args)}) {{
        owner
        nft {{
          tokenID
          contract {{
            id
          }}
        }}
      }}
    }}
    """


async def fetch_ownerships(
    url: str,
    owners: list[str],
    snapshot: Snapshot = LATEST,
    client: Optional[httpx.AsyncClient] = None,
) -> list[SubgraphOwnership]:
    """Fetch ownership edges for ``owners`` as of ``snapshot``."""
    query = build_ownerships_query(owners, snapshot)
    async with client_scope(client) as http:
        data = await post_graphql(http, url, {"query": query})

    if "ownerships" not in data:
        raise ResponseShapeError(url, "missing 'ownerships'")
    try:
        records = _OWNERSHIPS_ADAPTER.validate_python(data["ownerships"])
    except ValidationError as e:
        logger.error("Malformed subgraph response from %s: %s", url, e)
        raise ResponseShapeError(url, str(e), e) from e

    logger.info("Subgraph returned %d ownerships (block=%s)", len(records), snapshot)
    return records
