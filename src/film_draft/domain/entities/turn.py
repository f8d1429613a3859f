"""
Turn Entity

One selector's slot within a round, bounded by a fixed quota.
"""

from typing import NamedTuple

from .selector import Selector


class TurnNumbers(NamedTuple):
    """Position of a turn, 1-based"""
    global_number: int
    round_number: int


class Turn:
    """
    Counter bounded by ``selections_per_turn``.

    The selector's round counter is the source of truth for how many picks
    the participant made this round; ``selections_made`` mirrors it locally
    for completion checks.
    """

    def __init__(self, selector: Selector, selections_per_turn: int, round_number: int,
                 global_turn_number: int, round_turn_number: int):
        if selections_per_turn < 1:
            raise ValueError("A turn needs at least one selection")
        self.selector = selector
        self.selections_made = 0
        self.round_number = round_number
        self._selections_per_turn = selections_per_turn
        self._global_turn_number = global_turn_number
        self._round_turn_number = round_turn_number

    def __repr__(self) -> str:
        return (f"Turn(selector={self.selector.name!r}, round={self.round_number}, "
                f"made={self.selections_made}/{self._selections_per_turn})")

    @property
    def selections_per_turn(self) -> int:
        return self._selections_per_turn

    @property
    def turn_numbers(self) -> TurnNumbers:
        return TurnNumbers(self._global_turn_number, self._round_turn_number)

    def make_selection(self) -> None:
        if self.is_complete():
            return
        self.selections_made += 1
        self.selector.make_selection(self.round_number)

    def undo_selection(self) -> None:
        if self.is_empty():
            return
        self.selections_made -= 1
        self.selector.undo_selection(self.round_number)

    def is_complete(self) -> bool:
        return self.selections_made >= self._selections_per_turn

    def is_empty(self) -> bool:
        return self.selections_made <= 0

    def reset(self) -> None:
        self.selections_made = 0
