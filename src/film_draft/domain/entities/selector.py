"""
Selector Entity

A participant in the draft. Identity (name, colour) survives draft resets and
rebuilds; the per-round counters are reseeded by each Draft.
"""

from dataclasses import dataclass, field
from typing import List

from ..exceptions import RoundNotRegisteredError


@dataclass(eq=False)
class Selector:
    """
    Draft participant identified by a stable colour key.

    Round counters are kept in lists indexed by round number, where round
    numbers are 1-based: round ``n`` lives at index ``n - 1``.
    """
    name: str
    color: str
    contrast: str = "white"
    current_order: int = 0
    selections_per_round: List[int] = field(default_factory=list, repr=False)
    total_selections_per_round: List[int] = field(default_factory=list, repr=False)

    def __post_init__(self):
        """Validate selector data"""
        if not self.color:
            raise ValueError("Selector colour cannot be empty")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    @property
    def key(self) -> str:
        """Case-insensitive identity key"""
        return self.color.lower()

    @property
    def rounds_registered(self) -> int:
        return len(self.total_selections_per_round)

    def patch_name(self, new_name: str) -> None:
        """Rename the selector"""
        if not new_name or not new_name.strip():
            raise ValueError("Selector name cannot be empty")
        self.name = new_name.strip()

    # ===================
    # Round Counters
    # ===================

    def _index(self, round_number: int) -> int:
        if round_number < 1 or round_number > len(self.selections_per_round):
            raise RoundNotRegisteredError(round_number)
        return round_number - 1

    def set_round_info(self, round_number: int, total_selections: int) -> None:
        """Seed the counters for a round; rounds are registered in order"""
        if round_number < 1 or round_number > len(self.selections_per_round) + 1:
            raise ValueError(f"Round {round_number} cannot be registered after "
                             f"{len(self.selections_per_round)} rounds")
        if total_selections < 0:
            raise ValueError("Total selections cannot be negative")

        if round_number == len(self.selections_per_round) + 1:
            self.selections_per_round.append(0)
            self.total_selections_per_round.append(total_selections)
        else:
            self.selections_per_round[round_number - 1] = 0
            self.total_selections_per_round[round_number - 1] = total_selections

    def clear_round_info(self) -> None:
        """Forget every round and the lifetime count (a new draft is being built)"""
        self.current_order = 0
        self.selections_per_round.clear()
        self.total_selections_per_round.clear()

    def make_selection(self, round_number: int) -> None:
        index = self._index(round_number)
        self.current_order += 1
        self.selections_per_round[index] += 1

    def undo_selection(self, round_number: int) -> None:
        index = self._index(round_number)
        self.current_order -= 1
        self.selections_per_round[index] -= 1

    def reset_count_info(self, round_number: int) -> None:
        """Zero the lifetime count and the round's picks; quotas survive"""
        index = self._index(round_number)
        self.current_order = 0
        self.selections_per_round[index] = 0

    def get_selections_made_for_round(self, round_number: int) -> int:
        return self.selections_per_round[self._index(round_number)]

    def get_total_selections_for_round(self, round_number: int) -> int:
        return self.total_selections_per_round[self._index(round_number)]
