import unittest
from itertools import permutations

import pytest

from farkle.scoring.scoring import (
    FiveOfAKind,
    FourOfAKind,
    ScoringRules,
    SingleValue,
    SixOfAKind,
    Straight6,
    ThreeOfAKind,
    ThreePairs,
    create_default_rules,
    score,
)
from farkle.scoring.validation import RollMode


class WholeRollPatternTests(unittest.TestCase):
    def test_straight(self):
        result = score([1, 2, 3, 4, 5, 6])
        self.assertEqual(result.total, 1500)
        self.assertEqual(result.combinations, ["Straight"])
        self.assertEqual(result.used, (True,) * 6)
        self.assertFalse(result.is_farkle)

    def test_three_pairs(self):
        result = score([2, 4, 2, 6, 4, 6])
        self.assertEqual(result.total, 1500)
        self.assertEqual(result.combinations, ["Three Pairs"])
        self.assertEqual(result.used, (True,) * 6)

    def test_three_pairs_with_scoring_faces_is_not_split(self):
        # Pairs of 1s and 5s would be worth less as singles; the pattern wins outright
        result = score([1, 1, 5, 5, 3, 3])
        self.assertEqual(result.total, 1500)
        self.assertEqual(len(result.parts), 1)

    def test_four_and_a_pair_is_not_three_pairs(self):
        result = score([1, 1, 1, 1, 2, 2])
        self.assertEqual(result.total, 2000)
        self.assertEqual(result.combinations, ["Four of 1s"])
        self.assertEqual(result.used, (True, True, True, True, False, False))


class OfAKindTests(unittest.TestCase):
    def test_six_ones(self):
        result = score([1, 1, 1, 1, 1, 1])
        self.assertEqual(result.total, 3000)
        self.assertEqual(result.combinations, ["Six of 1s"])
        self.assertEqual(result.used, (True,) * 6)

    def test_six_twos_uses_flat_payout(self):
        result = score([2, 2, 2, 2, 2, 2])
        self.assertEqual(result.total, 3000)
        self.assertEqual(result.combinations, ["Six of 2s"])

    def test_three_ones_and_three_fives(self):
        result = score([1, 1, 1, 5, 5, 5])
        self.assertEqual(result.total, 1500)
        self.assertEqual(result.combinations, ["Three of 1s", "Three of 5s"])
        self.assertEqual(result.used, (True,) * 6)

    def test_three_sixes_with_junk(self):
        result = score([2, 3, 4, 6, 6, 6])
        self.assertEqual(result.total, 600)
        self.assertEqual(result.combinations, ["Three of 6s"])
        self.assertEqual(result.used, (False, False, False, True, True, True))
        self.assertFalse(result.is_farkle)

    def test_two_triples(self):
        result = score([3, 2, 3, 2, 3, 2])
        self.assertEqual(result.total, 500)
        self.assertEqual(result.combinations, ["Three of 2s", "Three of 3s"])

    def test_four_threes_with_single_one_and_five(self):
        result = score([3, 3, 1, 3, 5, 3])
        self.assertEqual(result.total, 600 + 100 + 50)
        self.assertEqual(result.combinations, ["Four of 3s", "1 single 1", "1 single 5"])
        self.assertEqual(result.used, (True,) * 6)

    def test_five_fives_with_junk(self):
        result = score([5, 5, 5, 5, 5, 2])
        self.assertEqual(result.total, 1000)
        self.assertEqual(result.combinations, ["Five of 5s"])
        self.assertEqual(result.used, (True, True, True, True, True, False))


class LeftoverSinglesTests(unittest.TestCase):
    """Four or five of a 1 or 5 consumes every die of that face; no single is left to score."""

    def test_four_ones_plus_two_fives(self):
        result = score([1, 1, 1, 1, 5, 5])
        self.assertEqual(result.total, 2100)
        self.assertEqual(result.combinations, ["Four of 1s", "2 single 5s"])

    def test_five_ones_plus_single_five(self):
        result = score([1, 1, 5, 1, 1, 1])
        self.assertEqual(result.total, 2050)
        self.assertEqual(result.combinations, ["Five of 1s", "1 single 5"])
        self.assertIsNone(result.part_by_rule("SingleValue:1"))

    def test_four_fives_leave_no_single_five(self):
        result = score([5, 5, 5, 5, 2, 3])
        self.assertEqual(result.total, 1000)
        self.assertIsNone(result.part_by_rule("SingleValue:5"))

    def test_pair_of_ones_scores_as_singles(self):
        result = score([1, 2, 3, 1, 4, 6])
        self.assertEqual(result.total, 200)
        self.assertEqual(result.combinations, ["2 single 1s"])
        self.assertEqual(result.used, (True, False, False, True, False, False))


class FarkleTests(unittest.TestCase):
    def test_no_scoring_dice(self):
        result = score([2, 3, 4, 6, 6, 2])
        self.assertEqual(result.total, 0)
        self.assertTrue(result.is_farkle)
        self.assertEqual(result.combinations, ["Farkle (no scoring dice)"])
        self.assertEqual(result.used, (False,) * 6)
        self.assertEqual(result.parts, ())


class AttributionTests(unittest.TestCase):
    def test_first_unused_positions_are_claimed(self):
        result = score([5, 1, 5, 1, 1, 3])
        triple = result.part_by_rule("ThreeOfAKind:1")
        singles = result.part_by_rule("SingleValue:5")
        self.assertEqual(triple.indices, (1, 3, 4))
        self.assertEqual(singles.indices, (0, 2))
        self.assertEqual(result.combinations, ["Three of 1s", "2 single 5s"])
        self.assertEqual(result.total, 1100)

    def test_four_of_a_kind_claims_leftmost(self):
        result = score([4, 2, 4, 4, 6, 4])
        self.assertEqual(result.part_by_rule("FourOfAKind:4").indices, (0, 2, 3, 5))

    def test_idempotent(self):
        dice = [1, 5, 5, 3, 3, 3]
        self.assertEqual(score(dice), score(dice))
        self.assertEqual(dice, [1, 5, 5, 3, 3, 3])


class SelectionModeTests(unittest.TestCase):
    def test_single_one_and_five(self):
        result = score([1, 5], RollMode.SELECTION)
        self.assertEqual(result.total, 150)
        self.assertEqual(result.combinations, ["1 single 1", "1 single 5"])
        self.assertEqual(result.used, (True, True))

    def test_triple_selection(self):
        result = score([4, 4, 4], RollMode.SELECTION)
        self.assertEqual(result.total, 400)

    def test_non_scoring_selection_is_farkle(self):
        result = score([2, 3], RollMode.SELECTION)
        self.assertTrue(result.is_farkle)
        self.assertEqual(result.used, (False, False))

    def test_two_pairs_are_not_three_pairs(self):
        result = score([1, 1, 5, 5], RollMode.SELECTION)
        self.assertEqual(result.total, 300)
        self.assertEqual(result.combinations, ["2 single 1s", "2 single 5s"])

    def test_full_straight_selected(self):
        self.assertEqual(score([6, 5, 4, 3, 2, 1], RollMode.SELECTION).total, 1500)


@pytest.mark.parametrize("roll", list(permutations([1, 2, 3, 4, 5, 6])))
def test_every_straight_permutation(roll):
    result = score(list(roll))
    assert result.total == 1500
    assert result.combinations == ["Straight"]
    assert all(result.used)


@pytest.mark.parametrize("value,three_pts", [(1, 1000), (2, 200), (3, 300), (4, 400), (5, 500), (6, 600)])
def test_three_of_a_kind_base_table(value, three_pts):
    result = score([value] * 3, RollMode.SELECTION)
    assert result.total == three_pts
    assert result.combinations == [f"Three of {value}s"]


@pytest.mark.parametrize("count,mult", [(4, 2), (5, 2)])
def test_four_and_five_double_the_base(count, mult):
    # Threes with neutral filler (no 1s or 5s) so only the n-of-a-kind scores
    dice = [3] * count + [2, 4, 6][: 6 - count]
    assert score(dice).total == 300 * mult


def test_rule_keys():
    assert Straight6(1500).rule_key == "Straight6"
    assert ThreePairs(1500).rule_key == "ThreePairs"
    assert ThreeOfAKind(4, 400).rule_key == "ThreeOfAKind:4"
    assert FourOfAKind(4, 400).rule_key == "FourOfAKind:4"
    assert FiveOfAKind(4, 400).rule_key == "FiveOfAKind:4"
    assert SixOfAKind(4).rule_key == "SixOfAKind:4"
    assert SingleValue(5, 50).rule_key == "SingleValue:5"


def test_parts_carry_rule_keys():
    result = score([1, 1, 1, 5, 2, 3])
    assert [p.rule_key for p in result.parts] == ["ThreeOfAKind:1", "SingleValue:5"]
    assert [p.points for p in result.parts] == [1000, 50]


def test_removing_three_pairs_rule_falls_back_to_faces():
    rules = create_default_rules()
    rules.remove_rule(ThreePairs)
    result = rules.evaluate([1, 1, 5, 5, 3, 3])
    assert result.total == 300
    assert result.combinations == ["2 single 1s", "2 single 5s"]


def test_empty_rule_set_scores_nothing():
    result = ScoringRules().evaluate([1, 1, 1, 5, 5, 5])
    assert result.is_farkle


def test_changing_a_rule_set_does_not_change_default_scoring():
    import farkle.scoring
    rules = create_default_rules()
    rules.remove_rule(ThreePairs)
    assert rules.evaluate([2, 2, 3, 3, 4, 4]).is_farkle
    assert score([2, 2, 3, 3, 4, 4]).total == 1500
    assert create_default_rules() is not rules
    assert not hasattr(farkle.scoring, "DEFAULT_RULES")
