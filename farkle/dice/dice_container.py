from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from farkle.core.event_listener import EventListener
from farkle.core.game_event import GameEvent, GameEventType
from farkle.core.random_source import RandomSource
from farkle.dice.die import Die
from farkle.scoring.score_types import ScoringResult
from farkle.scoring.scoring import ScoringRules, can_continue_rolling, score
from farkle.scoring.validation import RollMode, validate_dice
from farkle.settings import DICE_PER_ROLL

logger = logging.getLogger(__name__)


class DiceContainer:
    """Encapsulates dice lifecycle & selection logic for one player's view.

    Nothing is drawn here; a presentation layer subscribes to the published
    events (or polls the queries) to show dice, selection and live score.
    """

    def __init__(self, event_listener: Optional[EventListener] = None,
                 rng: Optional[RandomSource] = None,
                 rules: Optional[ScoringRules] = None):
        self.event_listener = event_listener or EventListener()
        self.rng = rng or RandomSource()
        self.rules = rules
        self.dice: List[Die] = []
        self.reset_all()

    # --- lifecycle -------------------------------------------------
    def reset_all(self):
        self.dice = [Die(self.rng.roll_die(), i) for i in range(DICE_PER_ROLL)]
        self._after_new_values()

    def roll(self) -> List[int]:
        el = self.event_listener
        el.publish(GameEvent(GameEventType.PRE_ROLL, source=self, payload={}))
        for d in self.dice:
            old = d.value
            d.value = self.rng.roll_die()
            d.reset()
            el.publish(GameEvent(GameEventType.DIE_ROLLED, source=self, payload={"index": d.index, "old": old, "new": d.value}))
        values = self.values()
        el.publish(GameEvent(GameEventType.POST_ROLL, source=self, payload={"values": list(values)}))
        self._after_new_values()
        return values

    def set_values(self, values: Sequence[int]):
        """Place dice showing the given faces (replaying a known roll)."""
        error = validate_dice(values, RollMode.FULL_ROLL)
        if error is not None:
            raise ValueError(error)
        for d, v in zip(self.dice, values):
            d.value = v
            d.reset()
        self._after_new_values()

    def _after_new_values(self):
        self.mark_scoring()
        if self.check_farkle():
            logger.debug("Farkle on %s", self.values())
            self.event_listener.publish(GameEvent(GameEventType.FARKLE, source=self, payload={"values": self.values()}))

    def mark_scoring(self):
        result = self.roll_score()
        for d, used in zip(self.dice, result.used):
            d.scoring_eligible = used

    # --- queries ---------------------------------------------------
    def values(self) -> List[int]:
        return [int(d.value) for d in self.dice]

    def selected_indices(self) -> List[int]:
        return [d.index for d in self.dice if d.selected]

    def selection_values(self) -> List[int]:
        return [int(d.value) for d in self.dice if d.selected]

    def any_scoring_selection(self) -> bool:
        return any(d.selected and d.scoring_eligible for d in self.dice)

    def roll_score(self) -> ScoringResult:
        return score(self.values(), RollMode.FULL_ROLL, rules=self.rules)

    def selection_score(self) -> ScoringResult:
        return score(self.selection_values(), RollMode.SELECTION, rules=self.rules)

    def check_farkle(self) -> bool:
        return self.roll_score().is_farkle

    def can_continue(self) -> bool:
        return can_continue_rolling(self.selection_values())

    # --- mutations -------------------------------------------------
    def toggle_select(self, index: int) -> ScoringResult:
        """Flip selection of the die at index and publish the live selection score."""
        if not 0 <= index < len(self.dice):
            raise ValueError(f"No die at position {index}")
        d = self.dice[index]
        d.toggle_select()
        et = GameEventType.DIE_SELECTED if d.selected else GameEventType.DIE_DESELECTED
        self.event_listener.publish(GameEvent(et, source=self, payload={"index": index, "value": d.value}))
        return self._publish_preview()

    def clear_selection(self):
        for d in self.dice:
            d.selected = False
        self.event_listener.publish(GameEvent(GameEventType.SELECTION_CLEARED, source=self, payload={}))

    def _publish_preview(self) -> ScoringResult:
        result = self.selection_score()
        if not self.selected_indices():
            self.event_listener.publish(GameEvent(GameEventType.SELECTION_CLEARED, source=self, payload={}))
            return result
        logger.debug("Selection %s scores %d", self.selection_values(), result.total)
        payload = result.to_dict()
        payload["indices"] = self.selected_indices()
        self.event_listener.publish(GameEvent(GameEventType.SCORE_PREVIEW_COMPUTED, source=self, payload=payload))
        return result
