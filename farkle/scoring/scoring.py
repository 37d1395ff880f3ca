from __future__ import annotations
import logging
from enum import Enum, auto
from typing import Any, List, Optional, Sequence

from farkle.scoring.score_types import ScorePart, ScoringResult, _Tally
from farkle.scoring.validation import RollMode, validate_dice
from farkle.settings import (
    DICE_PER_ROLL,
    FACES,
    FIVE_OF_A_KIND_MULTIPLIER,
    FOUR_OF_A_KIND_MULTIPLIER,
    KIND_WORDS,
    SINGLE_POINTS,
    SIX_OF_A_KIND_POINTS,
    STRAIGHT_FACES,
    STRAIGHT_LABEL,
    STRAIGHT_POINTS,
    THREE_OF_A_KIND_POINTS,
    THREE_PAIRS_LABEL,
    THREE_PAIRS_POINTS,
)

logger = logging.getLogger(__name__)


class RuleStage(Enum):
    WHOLE_ROLL = auto()
    OF_A_KIND = auto()
    SINGLE = auto()


class ScoringRule:
    """Base class for a scoring rule.

    A rule inspects the remaining tally and, when it applies, claims dice and
    returns a ScorePart. combo_size is the number of dice the rule consumes
    (for singles: one per die). stage decides when the rule is consulted:
        - WHOLE_ROLL rules run first; the first match is the whole result.
        - OF_A_KIND rules run per face 1..6, largest combo first, one per face.
        - SINGLE rules run last over whatever dice are left.

    rule_key uniquely identifies the rule (e.g. "ThreeOfAKind:4").
    """
    combo_size: int = 0  # override in subclasses
    stage: RuleStage = RuleStage.OF_A_KIND
    value: Optional[int] = None

    def _build_rule_key(self) -> str:
        return self.__class__.__name__

    @property
    def rule_key(self) -> str:
        return self._build_rule_key()

    @property
    def terminal(self) -> bool:
        """True when a match consumes a full roll and nothing else can score."""
        return self.combo_size >= DICE_PER_ROLL

    def match(self, tally: _Tally) -> Optional[ScorePart]:
        """Claim dice from tally and return the scored part, or None."""
        raise NotImplementedError


class Straight6(ScoringRule):
    stage = RuleStage.WHOLE_ROLL

    def __init__(self, points: int):
        self.points = points
        self.combo_size = 6

    def match(self, tally: _Tally) -> Optional[ScorePart]:
        if sorted(tally.dice) != STRAIGHT_FACES:
            return None
        return ScorePart(self.rule_key, STRAIGHT_LABEL, self.points, tally.claim_all())


class ThreePairs(ScoringRule):
    stage = RuleStage.WHOLE_ROLL

    def __init__(self, points: int):
        self.points = points
        self.combo_size = 6

    def match(self, tally: _Tally) -> Optional[ScorePart]:
        pairs = [face for face, count in tally.counts.items() if count == 2]
        if len(pairs) != 3 or len(tally.dice) != self.combo_size:
            return None
        return ScorePart(self.rule_key, THREE_PAIRS_LABEL, self.points, tally.claim_all())


class _OfAKind(ScoringRule):
    """Shared matching for N of a kind; subclasses fix the count and the payout."""
    stage = RuleStage.OF_A_KIND

    def __init__(self, value: int, points: int):
        self.value = value
        self.points = points

    def _build_rule_key(self) -> str:  # e.g., FourOfAKind:3
        return f"{self.__class__.__name__}:{self.value}"

    def describe(self) -> str:
        return f"{KIND_WORDS[self.combo_size]} of {self.value}s"

    def match(self, tally: _Tally) -> Optional[ScorePart]:
        if tally.counts[self.value] < self.combo_size:
            return None
        indices = tally.claim(self.value, self.combo_size)
        return ScorePart(self.rule_key, self.describe(), self.points, indices)


class ThreeOfAKind(_OfAKind):
    combo_size = 3


class FourOfAKind(_OfAKind):
    """Four of a kind: double the value of the corresponding three of a kind."""
    combo_size = 4

    def __init__(self, value: int, three_kind_points: int):
        super().__init__(value, three_kind_points * FOUR_OF_A_KIND_MULTIPLIER)


class FiveOfAKind(_OfAKind):
    """Five of a kind: also double the corresponding three of a kind."""
    combo_size = 5

    def __init__(self, value: int, three_kind_points: int):
        super().__init__(value, three_kind_points * FIVE_OF_A_KIND_MULTIPLIER)


class SixOfAKind(_OfAKind):
    """Six of a kind: flat payout regardless of face."""
    combo_size = 6

    def __init__(self, value: int, points: int = SIX_OF_A_KIND_POINTS):
        super().__init__(value, points)


class SingleValue(ScoringRule):
    stage = RuleStage.SINGLE

    def __init__(self, value: int, points: int):
        self.value = value
        self.points = points
        self.combo_size = 1

    def _build_rule_key(self) -> str:  # e.g., SingleValue:5
        return f"SingleValue:{self.value}"

    def match(self, tally: _Tally) -> Optional[ScorePart]:
        n = tally.counts[self.value]
        if n <= 0:
            return None
        indices = tally.claim(self.value, n)
        plural = "s" if n > 1 else ""
        return ScorePart(self.rule_key, f"{n} single {self.value}{plural}", n * self.points, indices)


class ScoringRules:
    """Container for all active scoring rules, evaluated in strict priority order."""
    def __init__(self):
        self.rules: List[ScoringRule] = []

    def add_rule(self, rule: ScoringRule):
        self.rules.append(rule)

    def remove_rule(self, rule_type: type):
        self.rules = [r for r in self.rules if not isinstance(r, rule_type)]

    def _staged(self, stage: RuleStage) -> List[ScoringRule]:
        return [r for r in self.rules if r.stage is stage]

    def _kind_rules_for(self, face: int) -> List[ScoringRule]:
        rules = [r for r in self._staged(RuleStage.OF_A_KIND) if r.value == face]
        return sorted(rules, key=lambda r: r.combo_size, reverse=True)

    def evaluate(self, dice: Sequence[Any], mode: RollMode = RollMode.FULL_ROLL) -> ScoringResult:
        """Score dice and return a ScoringResult.

        Order is part of the rules, not an implementation detail:
          1. whole-roll patterns (straight, three pairs) short-circuit everything;
          2. faces 1..6 each take at most one N-of-a-kind, largest first, and
             a six of a kind ends evaluation;
          3. leftover singles score last, 1s before 5s.
        """
        error = validate_dice(dice, mode)
        if error is not None:
            logger.debug("Rejected dice %r (%s): %s", dice, mode, error)
            return ScoringResult.rejected(dice, error)
        tally = _Tally(list(dice))

        for rule in self._staged(RuleStage.WHOLE_ROLL):
            part = rule.match(tally)
            if part is not None:
                return self._finish(tally, [part])

        parts: List[ScorePart] = []
        for face in FACES:
            for rule in self._kind_rules_for(face):
                part = rule.match(tally)
                if part is None:
                    continue
                parts.append(part)
                if rule.terminal:
                    return self._finish(tally, parts)
                break

        singles = sorted(self._staged(RuleStage.SINGLE), key=lambda r: r.value or 0)
        for rule in singles:
            part = rule.match(tally)
            if part is not None:
                parts.append(part)
        return self._finish(tally, parts)

    @staticmethod
    def _finish(tally: _Tally, parts: List[ScorePart]) -> ScoringResult:
        return ScoringResult(
            dice=tuple(tally.dice),
            parts=tuple(parts),
            used=tuple(tally.used),
        )


def create_default_rules() -> 'ScoringRules':
    """Factory function to create a ScoringRules instance with standard Farkle rules.

    Returns:
        ScoringRules instance populated with all standard scoring patterns.
    """
    rules = ScoringRules()
    rules.add_rule(Straight6(STRAIGHT_POINTS))
    rules.add_rule(ThreePairs(THREE_PAIRS_POINTS))
    for v, pts in THREE_OF_A_KIND_POINTS.items():
        rules.add_rule(SixOfAKind(v))
        rules.add_rule(FiveOfAKind(v, pts))
        rules.add_rule(FourOfAKind(v, pts))
        rules.add_rule(ThreeOfAKind(v, pts))
    for v, pts in SINGLE_POINTS.items():
        rules.add_rule(SingleValue(v, pts))
    return rules


# Module-private so no caller can add or remove rules for everyone else.
_DEFAULT_RULES = create_default_rules()


def score(dice: Sequence[Any], mode: RollMode = RollMode.FULL_ROLL,
          rules: Optional[ScoringRules] = None) -> ScoringResult:
    """Score a full roll (default) or a kept selection with the standard rules."""
    return (rules or _DEFAULT_RULES).evaluate(dice, mode)


def can_continue_rolling(selection: Sequence[Any]) -> bool:
    """True when the dice set aside score on their own, so the turn may go on."""
    if not selection:
        return False
    return score(selection, RollMode.SELECTION).total > 0


def rules_summary() -> str:
    """Plain-text scoring sheet for the standard rules."""
    lines = ["Farkle Scoring Information:"]
    lines.append(f"- {STRAIGHT_LABEL} (1-2-3-4-5-6) = {STRAIGHT_POINTS} points")
    lines.append(f"- {THREE_PAIRS_LABEL} = {THREE_PAIRS_POINTS} points")
    lines.append(f"- Six of a kind = {SIX_OF_A_KIND_POINTS} points")
    lines.append("- Four or five of a kind = double the three of a kind value")
    for face, pts in THREE_OF_A_KIND_POINTS.items():
        lines.append(f"- Three {face}s = {pts} points")
    for face, pts in SINGLE_POINTS.items():
        lines.append(f"- Single {face} = {pts} points each")
    return "\n".join(lines)
