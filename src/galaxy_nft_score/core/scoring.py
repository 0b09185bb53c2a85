"""Holding counts and voting score computation."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .models import HoldingCounts, OwnershipMap, ScoringRule, normalize_address

logger = logging.getLogger(__name__)


def count_holdings(addresses: Iterable[str], reconciled: OwnershipMap) -> HoldingCounts:
    """Count resolved tokens per owner per collection name.

    Every input address gets an entry, even with no holdings. Unresolved
    tokens (empty name) and owners outside ``addresses`` are ignored.
    """
    counts: HoldingCounts = {normalize_address(a): {} for a in addresses}

    for owner, tokens in reconciled.items():
        owner_counts = counts.get(owner)
        if owner_counts is None:
            logger.debug("Ignoring holdings of unrequested owner %s", owner)
            continue
        for name in tokens.values():
            if not name:
                continue
            owner_counts[name] = owner_counts.get(name, 0) + 1
    return counts


def score_owner(holdings: dict[str, int], rules: Sequence[ScoringRule]) -> float:
    """Sum the contribution of every rule whose collection the owner holds."""
    score = 0.0
    for rule in rules:
        if rule.name in holdings:
            score += rule.contribution(holdings[rule.name])
    return score


def score_holdings(
    addresses: Sequence[str],
    counts: HoldingCounts,
    rules: Sequence[ScoringRule],
) -> dict[str, float]:
    """Score every input address, keyed by its original casing.

    Addresses that differ only by case share one set of holdings, and each
    spelling is reported with the same score.
    """
    scores: dict[str, float] = {}
    for address in addresses:
        holdings = counts.get(normalize_address(address), {})
        scores[address] = score_owner(holdings, rules)
    return scores
