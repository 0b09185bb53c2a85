"""Galaxy GraphQL API client.

Resolves which NFTs of the configured collections each owner holds, along
with each token's collection name. The API only reports current state, so
this query is never scoped to a block.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..errors import ResponseShapeError
from ..models import GalaxyOwnerNfts, NetworkProfile
from .graphql import client_scope, post_graphql

logger = logging.getLogger(__name__)

OPERATION_NAME = "allNFTsByOwnersCoresAndChain"

QUERY = """
query allNFTsByOwnersCoresAndChain($option: NFTsOptions!) {
  allNFTsByOwnersCoresAndChain(option: $option) {
    owner
    nfts {
      id
      name
      nftCore {
        contractAddress
      }
    }
  }
}
"""

_OWNERS_ADAPTER = TypeAdapter(list[GalaxyOwnerNfts])


def build_payload(profile: NetworkProfile, nft_core_addresses: list[str], owners: list[str]) -> dict:
    """Build the request body for ``allNFTsByOwnersCoresAndChain``."""
    return {
        "operationName": OPERATION_NAME,
        "query": QUERY,
        "variables": {
            "option": {
                "nftCoreAddresses": list(nft_core_addresses),
                "chain": profile.name,
                "owners": list(owners),
            }
        },
    }


async def fetch_owner_nfts(
    profile: NetworkProfile,
    nft_core_addresses: list[str],
    owners: list[str],
    client: Optional[httpx.AsyncClient] = None,
) -> list[GalaxyOwnerNfts]:
    """Fetch the named NFTs held by ``owners`` within the given collections.

    Args:
        profile: Network whose Galaxy chain name scopes the query.
        nft_core_addresses: Allow-list of collection contract addresses.
        owners: Owner addresses, sent with their original casing.
        client: Optional shared HTTP client.

    Returns:
        One entry per owner the API knows about.
    """
    payload = build_payload(profile, nft_core_addresses, owners)
    async with client_scope(client) as http:
        data = await post_graphql(http, profile.graphql, payload)

    if OPERATION_NAME not in data:
        raise ResponseShapeError(profile.graphql, f"missing '{OPERATION_NAME}'")
    try:
        records = _OWNERS_ADAPTER.validate_python(data[OPERATION_NAME])
    except ValidationError as e:
        logger.error("Malformed Galaxy response from %s: %s", profile.graphql, e)
        raise ResponseShapeError(profile.graphql, str(e), e) from e

    logger.info(
        "Galaxy returned %d owners with %d NFTs on %s",
        len(records),
        sum(len(r.nfts) for r in records),
        profile.name,
    )
    return records
