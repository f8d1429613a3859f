"""
Round Entity

A single pass through all selectors, one turn each. Odd-indexed rounds run in
reverse order (snake draft).
"""

from typing import List, Sequence, Tuple

from .selector import Selector
from .turn import Turn


class Round:
    """Ordered turns plus the cursor pointing at the active one"""

    def __init__(self, round_number: int, selections_per_turn: int, selectors: Sequence[Selector],
                 global_turn_offset: int, reverse_order: bool):
        if not selectors:
            raise ValueError("A round needs at least one selector")
        self.round_number = round_number
        self.reverse_order = reverse_order
        self.selections_made = 0
        self.current_turn_index = 0
        self.selections_per_round = selections_per_turn * len(selectors)
        self._turns: List[Turn] = self._calculate_turns(
            selections_per_turn, selectors, global_turn_offset, reverse_order
        )

    def __repr__(self) -> str:
        return (f"Round(number={self.round_number}, made={self.selections_made}/"
                f"{self.selections_per_round}, turn={self.current_turn_index + 1})")

    def _calculate_turns(self, selections_per_turn: int, selectors: Sequence[Selector],
                         global_turn_offset: int, reverse_order: bool) -> List[Turn]:
        ordered = list(reversed(selectors)) if reverse_order else list(selectors)
        return [
            Turn(
                selector=selector,
                selections_per_turn=selections_per_turn,
                round_number=self.round_number,
                global_turn_number=global_turn_offset + index + 1,
                round_turn_number=index + 1,
            )
            for index, selector in enumerate(ordered)
        ]

    @property
    def turns(self) -> Tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def selections_per_turn(self) -> int:
        return self._turns[0].selections_per_turn

    @property
    def current_turn(self) -> Turn:
        return self._turns[self.current_turn_index]

    @property
    def active_selector(self) -> Selector:
        return self.current_turn.selector

    def make_selection(self) -> None:
        if self.is_complete():
            return
        self.selections_made += 1
        self.current_turn.make_selection()
        if self.current_turn.is_complete():
            self._advance_to_next_turn()

    def undo_selection(self) -> None:
        if self.is_empty():
            return
        if self.current_turn.is_empty():
            self._return_to_previous_turn()
        self.selections_made -= 1
        self.current_turn.undo_selection()

    def is_complete(self) -> bool:
        selections_complete = self.selections_made >= self.selections_per_round
        is_last_turn = self.current_turn_index == len(self._turns) - 1
        return selections_complete and is_last_turn and self.current_turn.is_complete()

    def is_empty(self) -> bool:
        selections_empty = self.selections_made <= 0
        is_first_turn = self.current_turn_index <= 0
        return selections_empty and is_first_turn and self.current_turn.is_empty()

    def _advance_to_next_turn(self) -> None:
        if self.is_complete():
            return
        if not self.current_turn.is_complete():
            return
        self.current_turn_index += 1

    def _return_to_previous_turn(self) -> None:
        if self.is_empty():
            return
        if not self.current_turn.is_empty():
            return
        self.current_turn_index -= 1

    def reset(self) -> None:
        self.selections_made = 0
        self.current_turn_index = 0
        for turn in self._turns:
            turn.reset()
            turn.selector.reset_count_info(self.round_number)
