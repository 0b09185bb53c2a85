from __future__ import annotations

import unittest

from galaxy_nft_score.core.models import ScoringRule, TokenKey
from galaxy_nft_score.core.scoring import count_holdings, score_holdings, score_owner


def _rule(name: str, power: float, cumulative: bool) -> ScoringRule:
    return ScoringRule(name=name, voting_power=power, cumulative=cumulative)


class CountHoldingsTests(unittest.TestCase):
    def test_every_address_gets_an_entry(self) -> None:
        counts = count_holdings(["0xAbC", "0xDEF"], {})
        self.assertEqual(counts, {"0xabc": {}, "0xdef": {}})

    def test_counts_named_tokens_and_skips_unresolved(self) -> None:
        reconciled = {
            "0xabc": {
                TokenKey("0xf00", "1"): "Foo",
                TokenKey("0xf00", "2"): "Foo",
                TokenKey("0xba7", "3"): "Bar",
                TokenKey("0xdea", "4"): "",
            }
        }
        counts = count_holdings(["0xABC"], reconciled)
        self.assertEqual(counts, {"0xabc": {"Foo": 2, "Bar": 1}})

    def test_unrequested_owner_is_ignored(self) -> None:
        counts = count_holdings(["0xabc"], {"0xstranger": {TokenKey("0xf00", "1"): "Foo"}})
        self.assertEqual(counts, {"0xabc": {}})


class ScoreTests(unittest.TestCase):
    def test_cumulative_and_presence_rules_sum(self) -> None:
        rules = [_rule("Foo", 2, True), _rule("Bar", 5, False)]
        self.assertEqual(score_owner({"Foo": 3, "Bar": 1}, rules), 11)

    def test_non_cumulative_rule_counts_once(self) -> None:
        self.assertEqual(score_owner({"Foo": 10}, [_rule("Foo", 5, False)]), 5)

    def test_cumulative_rule_scales_with_count(self) -> None:
        self.assertEqual(score_owner({"Foo": 10}, [_rule("Foo", 5, True)]), 50)

    def test_every_matching_rule_applies(self) -> None:
        rules = [_rule("Foo", 1, False), _rule("Foo", 2, True), _rule("Baz", 100, True)]
        self.assertEqual(score_owner({"Foo": 3}, rules), 1 + 6)

    def test_scores_keep_caller_casing_and_default_to_zero(self) -> None:
        counts = {"0xabc": {"Foo": 1}, "0xdef": {}}
        scores = score_holdings(["0xAbC", "0xDeF"], counts, [_rule("Foo", 4, True)])
        self.assertEqual(scores, {"0xAbC": 4, "0xDeF": 0})

    def test_scores_are_floats_even_without_matches(self) -> None:
        scores = score_holdings(["0xAbC"], {"0xabc": {}}, [_rule("Foo", 4, True)])
        self.assertIsInstance(scores["0xAbC"], float)
        self.assertIsInstance(score_owner({"Foo": 1}, [_rule("Bar", 1, False)]), float)

    def test_case_variants_of_one_address_share_a_score(self) -> None:
        counts = count_holdings(["0xAbC", "0xabc"], {"0xabc": {TokenKey("0xf00", "1"): "Foo"}})
        scores = score_holdings(["0xAbC", "0xabc"], counts, [_rule("Foo", 3, False)])
        self.assertEqual(scores, {"0xAbC": 3, "0xabc": 3})


if __name__ == "__main__":
    unittest.main()
