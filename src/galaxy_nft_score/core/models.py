"""Pydantic data models shared by the clients, reconciler and scorer.

Covers the strategy params handed over by the snapshot framework, the
decoded responses of both ownership sources, and the token identity used to
join them.
"""

from __future__ import annotations

from typing import Literal, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import StrategyConfigError

LATEST = "latest"

Snapshot = Union[Literal["latest"], int]


def normalize_address(value: Optional[str]) -> str:
    """Normalize an on-chain address for use as an internal map key."""
    return str(value or "").strip().lower()


class TokenKey(NamedTuple):
    """Identity of one NFT within a single network: contract plus token id."""

    contract: str
    token_id: str

    @classmethod
    def of(cls, contract: str, token_id: Union[str, int]) -> "TokenKey":
        return cls(normalize_address(contract), str(token_id).strip())

    def __str__(self) -> str:
        return f"{self.contract}-{self.token_id}"


# owner (lowercase) -> token -> collection name ("" when unresolved)
OwnershipMap = dict[str, dict[TokenKey, str]]

# owner (lowercase) -> collection name -> number of tokens held
HoldingCounts = dict[str, dict[str, int]]


class NetworkProfile(BaseModel):
    """Endpoints and display name for one supported chain."""

    model_config = ConfigDict(frozen=True)

    network_id: str
    name: str = Field(description="Chain name as the Galaxy API spells it")
    graphql: str = Field(description="Galaxy GraphQL endpoint")
    subgraph: str = Field(description="Default ownership subgraph endpoint")


class ScoringRule(BaseModel):
    """Voting power granted for holding tokens of one collection."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Collection name as resolved by the Galaxy API")
    voting_power: float = Field(alias="votingPower")
    cumulative: bool = Field(False, description="Multiply power by the number of tokens held")

    def contribution(self, count: int) -> float:
        if count <= 0:
            return 0.0
        if self.cumulative:
            return self.voting_power * count
        return self.voting_power


class StrategyParams(BaseModel):
    """The ``options.params`` object of a space's strategy configuration."""

    model_config = ConfigDict(populate_by_name=True)

    nft_core_addresses: list[str] = Field(alias="NFTCoreAddress")
    subgraph: Optional[str] = None
    configs: list[ScoringRule]

    @classmethod
    def from_options(cls, options: Optional[dict]) -> "StrategyParams":
        params = (options or {}).get("params")
        if params is None:
            raise StrategyConfigError("Strategy options are missing 'params'")
        try:
            return cls.model_validate(params)
        except ValidationError as exc:
            raise StrategyConfigError(f"Invalid strategy params: {exc}") from exc


def parse_snapshot(snapshot: Union[str, int, None]) -> Snapshot:
    """Normalize a snapshot argument to ``"latest"`` or a block number."""
    if snapshot is None or snapshot == LATEST:
        return LATEST
    if isinstance(snapshot, bool):
        raise StrategyConfigError(f"Invalid snapshot: {snapshot!r}")
    if isinstance(snapshot, int):
        block = snapshot
    elif isinstance(snapshot, str) and snapshot.strip().isdecimal():
        block = int(snapshot.strip())
    else:
        raise StrategyConfigError(f"Invalid snapshot: {snapshot!r}")
    if block < 0:
        raise StrategyConfigError(f"Block number must be non-negative, got {block}")
    return block


# ── Galaxy API response ────────────────────────────────────────────────


class GalaxyNftCore(BaseModel):
    contract_address: str = Field(alias="contractAddress")


class GalaxyNft(BaseModel):
    """One NFT as listed by ``allNFTsByOwnersCoresAndChain``."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: Optional[str] = None
    nft_core: GalaxyNftCore = Field(alias="nftCore")

    @property
    def token_key(self) -> TokenKey:
        return TokenKey.of(self.nft_core.contract_address, self.id)


class GalaxyOwnerNfts(BaseModel):
    owner: str
    nfts: list[GalaxyNft] = Field(default_factory=list)


# ── Subgraph response ──────────────────────────────────────────────────


class SubgraphContract(BaseModel):
    id: str


class SubgraphNft(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    token_id: str = Field(alias="tokenID")
    contract: SubgraphContract


class SubgraphOwnership(BaseModel):
    """One owner → NFT edge from the ``ownerships`` entity."""

    owner: str
    nft: SubgraphNft

    @property
    def token_key(self) -> TokenKey:
        return TokenKey.of(self.nft.contract.id, self.nft.token_id)
