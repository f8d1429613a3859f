"""
Draft Entity - Scheduling Engine

Splits the film pool evenly across selectors, builds snake-ordered rounds of
shrinking size and walks a cursor through them. Every applied selection,
undo or reset republishes one DraftStateData snapshot.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..events import StateChannel, Subscriber, Unsubscribe
from ..exceptions import InsufficientEntriesError
from .round import Round
from .selector import Selector

logger = logging.getLogger(__name__)

MIN_REMAINING_SELECTIONS = 3


@dataclass(frozen=True)
class DraftStateData:
    """
    Snapshot of the draft cursor: the counts before the next pick.

    All numbers are 1-based except the ``*_order`` counters, which count the
    picks already made at each level.
    """
    global_order: int
    individual_selector_order: int
    global_turn_number: int
    individual_selector_turn_number: int
    turn_order: int
    round_number: int
    round_order: int
    round_turn_number: int
    rounds_count: int


def calculate_round_sizes(selections_per_selector: int) -> List[int]:
    """Ceil-halve the per-selector quota into round sizes, e.g. 10 -> [5, 3, 1, 1]"""
    sizes = []
    remaining = selections_per_selector
    while remaining > 0:
        size = math.ceil(remaining / 2)
        sizes.append(size)
        remaining -= size
    return sizes


class Draft:
    """
    Draft aggregate - owns its rounds and turns, borrows the selectors.

    A Draft is built once per (pool size, selector set) pair. ``reset`` empties
    it without rebuilding; any change of pool or selectors needs a new Draft.
    """

    def __init__(self, total_entries: int, selectors: Sequence[Selector]):
        if isinstance(total_entries, bool) or not isinstance(total_entries, int) or total_entries < 1:
            raise ValueError("Total entries must be a positive integer")
        if not selectors:
            raise ValueError("A draft needs at least one selector")
        if len({selector.key for selector in selectors}) != len(selectors):
            raise ValueError("Selector colours must be unique")

        self.total_entries = total_entries
        self.min_remaining_selections = MIN_REMAINING_SELECTIONS
        self.selections_made = 0
        self.current_round_index = 0

        selections_per_selector = (total_entries - self.min_remaining_selections) // len(selectors)
        if selections_per_selector < 1:
            raise InsufficientEntriesError(
                f"{total_entries} entries cannot give {len(selectors)} selector(s) a pick "
                f"while keeping {self.min_remaining_selections} in reserve"
            )
        self.selections_per_selector = selections_per_selector
        self.available_selections = selections_per_selector * len(selectors)
        self.remaining_selections = total_entries - self.available_selections

        self._selectors: Tuple[Selector, ...] = tuple(selectors)
        self._rounds: List[Round] = []
        self._calculate_rounds(selections_per_selector)

        self._complete = False
        self._active_selector: Optional[Selector] = self.current_round.active_selector
        self._state_channel: StateChannel[DraftStateData] = StateChannel("state_data")
        self._active_selector_channel: StateChannel[Optional[Selector]] = StateChannel("active_selector")
        self._complete_channel: StateChannel[bool] = StateChannel("draft_complete")

        self._active_selector_channel.publish(self._active_selector)
        self._complete_channel.publish(False)
        self._emit_state_data()
        logger.debug(
            "Draft built: %d entries, %d selectors, %d available, %d rounds %s",
            total_entries, len(selectors), self.available_selections,
            len(self._rounds), [r.selections_per_turn for r in self._rounds]
        )

    def __repr__(self) -> str:
        return (f"Draft(made={self.selections_made}/{self.available_selections}, "
                f"round={self.current_round_index + 1}/{len(self._rounds)})")

    def _calculate_rounds(self, selections_per_selector: int) -> None:
        for selector in self._selectors:
            selector.clear_round_info()

        global_turn_offset = 0
        for index, selections_per_turn in enumerate(calculate_round_sizes(selections_per_selector)):
            round_number = index + 1
            self._rounds.append(Round(
                round_number=round_number,
                selections_per_turn=selections_per_turn,
                selectors=self._selectors,
                global_turn_offset=global_turn_offset,
                reverse_order=index % 2 == 1,
            ))
            for selector in self._selectors:
                selector.set_round_info(round_number, selections_per_turn)
            global_turn_offset += len(self._selectors)

    # ===================
    # Accessors
    # ===================

    @property
    def rounds(self) -> Tuple[Round, ...]:
        return tuple(self._rounds)

    @property
    def selectors(self) -> Tuple[Selector, ...]:
        return self._selectors

    @property
    def rounds_count(self) -> int:
        return len(self._rounds)

    @property
    def current_round(self) -> Round:
        return self._rounds[self.current_round_index]

    @property
    def active_selector(self) -> Optional[Selector]:
        """Selector whose pick it is, None once the draft is complete"""
        return self._active_selector

    @property
    def complete(self) -> bool:
        return self._complete

    @property
    def state_data(self) -> DraftStateData:
        return self._state_channel.value

    # ===================
    # Notifications
    # ===================

    def subscribe_state_data(self, callback: Subscriber) -> Unsubscribe:
        return self._state_channel.subscribe(callback)

    def subscribe_active_selector(self, callback: Subscriber) -> Unsubscribe:
        return self._active_selector_channel.subscribe(callback)

    def subscribe_draft_complete(self, callback: Subscriber) -> Unsubscribe:
        return self._complete_channel.subscribe(callback)

    def close(self) -> None:
        """Drop every subscriber (the draft is being replaced)"""
        self._state_channel.clear_subscribers()
        self._active_selector_channel.clear_subscribers()
        self._complete_channel.clear_subscribers()

    # ===================
    # Core Draft Methods
    # ===================

    def make_selection(self) -> None:
        if self.is_complete():
            return
        self.selections_made += 1
        self.current_round.make_selection()
        if self.current_round.is_complete():
            self._advance_to_next_round()
        self._sync_active_selector()
        self._emit_state_data()

    def undo_selection(self) -> None:
        if self.is_empty():
            return
        if self.current_round.is_empty():
            self._return_to_previous_round()
        if self._complete:
            # Completion never moves the round cursor, so it still sits on the last round
            self._set_complete(False)
        self.selections_made -= 1
        self.current_round.undo_selection()
        self._sync_active_selector()
        self._emit_state_data()

    def is_complete(self) -> bool:
        selections_complete = self.selections_made >= self.available_selections
        is_last_round = self.current_round_index == len(self._rounds) - 1
        return selections_complete and is_last_round and self.current_round.is_complete()

    def is_empty(self) -> bool:
        selections_empty = self.selections_made <= 0
        is_first_round = self.current_round_index <= 0
        return selections_empty and is_first_round and self.current_round.is_empty()

    def reset(self) -> None:
        for draft_round in self._rounds:
            draft_round.reset()
        self.selections_made = 0
        self.current_round_index = 0
        self._set_complete(False)
        self._sync_active_selector()
        self._emit_state_data()

    def _advance_to_next_round(self) -> None:
        if self.is_complete():
            self._set_complete(True)
            logger.debug("Draft complete after %d selections", self.selections_made)
            return
        if not self.current_round.is_complete():
            return
        self.current_round_index += 1

    def _return_to_previous_round(self) -> None:
        if self.is_empty():
            return
        if not self.current_round.is_empty():
            return
        self.current_round_index -= 1

    def _set_complete(self, complete: bool) -> None:
        if complete == self._complete:
            return
        self._complete = complete
        self._complete_channel.publish(complete)

    def _sync_active_selector(self) -> None:
        selector = None if self._complete else self.current_round.active_selector
        if selector is self._active_selector:
            return
        self._active_selector = selector
        self._active_selector_channel.publish(selector)

    def _emit_state_data(self) -> None:
        current_round = self.current_round
        self._state_channel.publish(DraftStateData(
            global_order=self.selections_made,
            individual_selector_order=self._active_selector.current_order if self._active_selector else 0,
            global_turn_number=(self.current_round_index * len(current_round.turns)
                                + current_round.current_turn_index + 1),
            individual_selector_turn_number=self.current_round_index + 1,
            turn_order=current_round.current_turn.selections_made,
            round_number=self.current_round_index + 1,
            round_order=current_round.selections_made,
            round_turn_number=current_round.current_turn_index + 1,
            rounds_count=len(self._rounds),
        ))
