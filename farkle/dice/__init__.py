from farkle.dice.die import Die
from farkle.dice.dice_container import DiceContainer

__all__ = ["Die", "DiceContainer"]
