from __future__ import annotations


class Die:
    """One physical die on the tray: its face and selection flags."""

    def __init__(self, value: int, index: int):
        self.value = value
        self.index = index
        self.selected = False
        self.scoring_eligible = False

    def reset(self):
        self.selected = False
        self.scoring_eligible = False

    def toggle_select(self):
        self.selected = not self.selected

    def __repr__(self) -> str:
        flag = "*" if self.selected else ""
        return f"Die({self.value}{flag})"
