"""Structured request/reply wrapper used by turn-assistance tools.

A request is a JSON-like mapping ``{"dice": [six faces]}``; the reply is
``{"score", "combinations", "isFarkle", "usedDice"}``. Malformed requests get
an error reply instead of an exception so a tool host never faults.
"""
from __future__ import annotations
import json
import logging
from typing import Any, Mapping

from farkle.scoring.scoring import rules_summary, score
from farkle.scoring.validation import RollMode
from farkle.settings import DICE_PER_ROLL, FACE_MAX, FACE_MIN

logger = logging.getLogger(__name__)

TOOL_NAME = "calculate_farkle_score"
INFO_URI = "farkle://info"

TOOL_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "dice": {
            "type": "array",
            "items": {"type": "integer", "minimum": FACE_MIN, "maximum": FACE_MAX},
            "minItems": DICE_PER_ROLL,
            "maxItems": DICE_PER_ROLL,
            "description": f"{DICE_PER_ROLL} dice values ({FACE_MIN}-{FACE_MAX})",
        },
    },
    "required": ["dice"],
}


def error_reply(message: str) -> dict[str, Any]:
    return {"error": message, "isError": True, "score": 0}


def handle_score_request(payload: Any, mode: RollMode = RollMode.FULL_ROLL) -> dict[str, Any]:
    """Score the dice carried by payload and build the reply mapping."""
    if not isinstance(payload, Mapping) or "dice" not in payload:
        logger.debug("Score request without dice: %r", payload)
        return error_reply("Request must contain a 'dice' array")
    dice = payload["dice"]
    if not isinstance(dice, list):
        return error_reply("'dice' must be an array of integers")
    result = score(dice, mode)
    if not result.is_valid:
        return error_reply(result.error or "Invalid dice")
    logger.debug("Scored %s -> %d", dice, result.total)
    return {
        "score": result.total,
        "combinations": result.combinations,
        "isFarkle": result.is_farkle,
        "usedDice": list(result.used),
    }


def handle_info_request() -> dict[str, Any]:
    return {"uri": INFO_URI, "mimeType": "text/plain", "text": rules_summary()}


def render_reply(reply: Mapping[str, Any]) -> str:
    return json.dumps(reply, indent=2)
