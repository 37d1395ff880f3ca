from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from farkle.settings import DESCRIPTION_SEPARATOR, FACES, FARKLE_LABEL


@dataclass(frozen=True)
class ScorePart:
    """A single recognized combination within a roll.

    indices are the dice positions the combination claimed (left-to-right,
    never shared with another part).
    """
    rule_key: str
    description: str
    points: int
    indices: tuple[int, ...] = ()

    def to_dict(self) -> dict:
        return {
            'rule_key': self.rule_key,
            'description': self.description,
            'points': self.points,
            'indices': list(self.indices),
        }


@dataclass(frozen=True)
class ScoringResult:
    """Outcome of scoring one roll or selection.

    total is derived as sum(part.points). A result carrying an error is a
    rejected input, not a Farkle: its score is zero and is_farkle stays False.
    """
    dice: tuple[int, ...] = ()
    parts: tuple[ScorePart, ...] = ()
    used: tuple[bool, ...] = ()
    error: Optional[str] = None

    @property
    def total(self) -> int:
        return sum(p.points for p in self.parts)

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def is_farkle(self) -> bool:
        return self.is_valid and self.total == 0

    @property
    def combinations(self) -> List[str]:
        if not self.is_valid:
            return []
        if not self.parts:
            return [FARKLE_LABEL]
        return [p.description for p in self.parts]

    @property
    def description(self) -> str:
        return DESCRIPTION_SEPARATOR.join(self.combinations)

    @property
    def used_count(self) -> int:
        return sum(1 for u in self.used if u)

    def part_by_rule(self, rule_key: str) -> Optional[ScorePart]:
        for p in self.parts:
            if p.rule_key == rule_key:
                return p
        return None

    def to_dict(self) -> dict:
        out = {
            'score': self.total,
            'combinations': self.combinations,
            'usedDice': list(self.used),
            'isFarkle': self.is_farkle,
            'parts': [p.to_dict() for p in self.parts],
        }
        if self.error is not None:
            out['error'] = self.error
        return out

    @classmethod
    def rejected(cls, dice, error: str) -> 'ScoringResult':
        """Zero-score result for input that failed validation."""
        try:
            length = len(dice)
        except TypeError:
            length = 0
        return cls(dice=(), parts=(), used=tuple([False] * length), error=error)


@dataclass
class _Tally:
    """Mutable per-evaluation bookkeeping: remaining face counts and claimed positions."""
    dice: List[int]
    counts: dict[int, int] = field(default_factory=dict)
    used: List[bool] = field(default_factory=list)

    def __post_init__(self):
        if not self.counts:
            self.counts = {face: 0 for face in FACES}
            for d in self.dice:
                self.counts[d] += 1
        if not self.used:
            self.used = [False] * len(self.dice)

    def claim(self, face: int, n: int) -> tuple[int, ...]:
        """Mark the first n unused positions showing face; deduct them from counts."""
        picked: List[int] = []
        for i, d in enumerate(self.dice):
            if len(picked) >= n:
                break
            if d == face and not self.used[i]:
                picked.append(i)
        for i in picked:
            self.used[i] = True
        self.counts[face] -= len(picked)
        return tuple(picked)

    def claim_all(self) -> tuple[int, ...]:
        self.used = [True] * len(self.dice)
        for face in self.counts:
            self.counts[face] = 0
        return tuple(range(len(self.dice)))
