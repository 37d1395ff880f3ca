from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Optional, Sequence

from farkle.scoring.scoring import score
from farkle.scoring.validation import RollMode
from farkle.settings import DEFAULT_TARGET_SCORE


class ScoreSubmissionError(ValueError):
    """A score submission that must be rejected before any total is touched."""


@dataclass(frozen=True)
class ScoreEntry:
    """One (player, round, points, combination) record ready for storage."""
    player_id: int | str
    round_number: int
    points: int
    combination: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def build_score_entry(player_id: Any, dice: Optional[Sequence[Any]] = None,
                      points: Any = None, combination: Optional[str] = None,
                      round_number: Any = 1,
                      mode: RollMode = RollMode.SELECTION) -> ScoreEntry:
    """Build a ScoreEntry from engine-scored dice or a caller-supplied score.

    When dice are given they win over points: the engine computes the value
    and, unless the caller overrides it, the combination description.
    Raises ScoreSubmissionError for anything that must not reach a total.
    """
    if player_id is None or player_id == "":
        raise ScoreSubmissionError("Player ID and score are required")
    if round_number is None:
        round_number = 1
    if not _is_int(round_number) or round_number < 1:
        raise ScoreSubmissionError("Round number must be a positive integer")

    if dice is not None:
        result = score(dice, mode)
        if not result.is_valid:
            raise ScoreSubmissionError(result.error)
        text = combination if combination is not None else result.description
        return ScoreEntry(player_id, round_number, result.total, text)

    if points is None:
        raise ScoreSubmissionError("Player ID and score are required")
    if not _is_int(points) or points < 0:
        raise ScoreSubmissionError("Score must be a non-negative integer")
    return ScoreEntry(player_id, round_number, points, combination or "")


def apply_to_total(total: int, entry: ScoreEntry,
                   target_score: int = DEFAULT_TARGET_SCORE) -> tuple[int, bool]:
    """Return (new_total, reached_target) after adding entry to a running total."""
    new_total = total + entry.points
    return new_total, new_total >= target_score
