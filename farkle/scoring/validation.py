"""Input checks shared by every scoring entry point.

Validation never raises: callers receive an error message (or None) and
decide how to surface it.
"""
from __future__ import annotations
from enum import Enum, auto
from typing import Any, Optional, Sequence

from farkle.settings import (
    DICE_PER_ROLL,
    ERROR_FACE_VALUE,
    ERROR_FULL_ROLL_LENGTH,
    ERROR_NOT_A_SEQUENCE,
    ERROR_SELECTION_LENGTH,
    ERROR_UNKNOWN_MODE,
    FACE_MAX,
    FACE_MIN,
)


class RollMode(Enum):
    FULL_ROLL = auto()  # exactly six dice straight from a roll
    SELECTION = auto()  # 1..6 dice the player chose to keep


def is_face_value(value: Any) -> bool:
    # bool is an int subclass but never a die face
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return FACE_MIN <= value <= FACE_MAX


def validate_dice(dice: Sequence[Any], mode: RollMode = RollMode.FULL_ROLL) -> Optional[str]:
    """Return an error message for malformed dice, or None when they can be scored."""
    if isinstance(dice, (str, bytes)) or not isinstance(dice, Sequence):
        return ERROR_NOT_A_SEQUENCE
    if mode is RollMode.FULL_ROLL:
        if len(dice) != DICE_PER_ROLL:
            return ERROR_FULL_ROLL_LENGTH
    elif mode is RollMode.SELECTION:
        if not 1 <= len(dice) <= DICE_PER_ROLL:
            return ERROR_SELECTION_LENGTH
    else:
        return ERROR_UNKNOWN_MODE
    if not all(is_face_value(d) for d in dice):
        return ERROR_FACE_VALUE
    return None
