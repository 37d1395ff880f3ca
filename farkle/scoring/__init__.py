"""Farkle scoring engine: validate, tally, classify and attribute a roll."""
from farkle.scoring.score_types import ScorePart, ScoringResult
from farkle.scoring.validation import RollMode, validate_dice
from farkle.scoring.scoring import (
    ScoringRules,
    can_continue_rolling,
    create_default_rules,
    rules_summary,
    score,
)

__all__ = [
    "RollMode",
    "ScorePart",
    "ScoringResult",
    "ScoringRules",
    "can_continue_rolling",
    "create_default_rules",
    "rules_summary",
    "score",
    "validate_dice",
]
