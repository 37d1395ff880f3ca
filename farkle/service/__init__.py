"""Adapters that expose the scoring engine to its collaborators."""
from farkle.service.score_entry import ScoreEntry, ScoreSubmissionError, apply_to_total, build_score_entry
from farkle.service.score_tool import TOOL_NAME, TOOL_SCHEMA, handle_score_request, render_reply

__all__ = [
    "ScoreEntry",
    "ScoreSubmissionError",
    "TOOL_NAME",
    "TOOL_SCHEMA",
    "apply_to_total",
    "build_score_entry",
    "handle_score_request",
    "render_reply",
]
