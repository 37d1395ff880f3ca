"""Farkle scoring package public API.

Exports the canonical scoring engine; every collaborator scores through it.
"""
from __future__ import annotations

from .scoring import RollMode, ScorePart, ScoringResult, can_continue_rolling, score

__all__ = ["RollMode", "ScorePart", "ScoringResult", "can_continue_rolling", "score"]
