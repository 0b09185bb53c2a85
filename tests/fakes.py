from __future__ import annotations

import json
from typing import Any, Callable, Optional

import httpx

from galaxy_nft_score.core.networks import GALAXY_GRAPHQL_URL

ETH_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/alberthaotan/nft-eth"

FOO_CORE = "0xF00F00F00F00F00F00F00F00F00F00F00F00F00F"
BAR_CORE = "0xBA7BA7BA7BA7BA7BA7BA7BA7BA7BA7BA7BA7BA7B"


def galaxy_owner(owner: str, nfts: list[tuple[str, str, Optional[str]]]) -> dict:
    """Build one ``allNFTsByOwnersCoresAndChain`` entry from (contract, id, name)."""
    return {
        "owner": owner,
        "nfts": [
            {"id": token_id, "name": name, "nftCore": {"contractAddress": contract}}
            for contract, token_id, name in nfts
        ],
    }


def ownership(owner: str, contract: str, token_id: str) -> dict:
    return {"owner": owner, "nft": {"tokenID": token_id, "contract": {"id": contract}}}


class FakeSources:
    """Serves canned Galaxy and subgraph responses and records request bodies."""

    def __init__(
        self,
        galaxy_owners: Optional[list[dict]] = None,
        ownerships: Optional[list[dict]] = None,
        subgraph_url: str = ETH_SUBGRAPH_URL,
    ):
        self.galaxy_body: Any = {"data": {"allNFTsByOwnersCoresAndChain": galaxy_owners or []}}
        self.subgraph_body: Any = {"data": {"ownerships": ownerships or []}}
        self.galaxy_status = 200
        self.subgraph_status = 200
        self.subgraph_url = subgraph_url
        self.requests: dict[str, list[dict]] = {"galaxy": [], "subgraph": []}

    def _respond(self, status: int, body: Any) -> httpx.Response:
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        url = str(request.url)
        if url == GALAXY_GRAPHQL_URL:
            self.requests["galaxy"].append(payload)
            return self._respond(self.galaxy_status, self.galaxy_body)
        if url == self.subgraph_url:
            self.requests["subgraph"].append(payload)
            return self._respond(self.subgraph_status, self.subgraph_body)
        return httpx.Response(404, json={"error": f"unexpected url {url}"})

    def client(self, handler: Optional[Callable[[httpx.Request], httpx.Response]] = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler or self.handler))
