"""
Data Transfer Objects

Simple data containers for transferring data between layers.
The status DTO is built from the draft's published state, never recomputed.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.entities.film_list import SelectableListEntry
from ..domain.entities.selector import Selector
from ..domain.entities.session import DraftSession


@dataclass
class SelectorDTO:
    """Selector data for UI display"""
    name: str
    color: str
    contrast: str
    picks: List[str] = field(default_factory=list)
    is_active: bool = False

    @classmethod
    def from_domain(cls, selector: Selector, session: DraftSession) -> "SelectorDTO":
        """Convert from domain Selector entity"""
        return cls(
            name=selector.name,
            color=selector.color,
            contrast=selector.contrast,
            picks=[entry.entry.display_name for entry in session.film_list.entries_for(selector)],
            is_active=session.active_selector is not None and session.active_selector == selector
        )

    @property
    def pick_count(self) -> int:
        return len(self.picks)


@dataclass
class PickDTO:
    """One claimed film"""
    global_order: int
    title: str
    year: str
    position: int
    selector_name: str
    selector_color: str
    round_number: int

    @classmethod
    def from_domain(cls, entry: SelectableListEntry) -> "PickDTO":
        return cls(
            global_order=entry.global_order or 0,
            title=entry.title,
            year=entry.year,
            position=entry.position,
            selector_name=entry.selector.name if entry.selector else "",
            selector_color=entry.selector.color if entry.selector else "",
            round_number=entry.selection_state.round_number if entry.selection_state else 0
        )

    @property
    def display_name(self) -> str:
        return f"{self.title} ({self.year})" if self.year else self.title


@dataclass
class DraftStatusDTO:
    """Complete session data for UI display"""
    channel_id: int
    source_url: Optional[str]

    # Film list
    entry_count: int
    available_entries: int

    # Draft structure
    has_draft: bool
    available_selections: int
    remaining_selections: int
    round_sizes: List[int]

    # Cursor (from the draft's published state)
    selections_made: int
    round_number: int
    rounds_count: int
    round_turn_number: int
    global_turn_number: int
    turn_order: int
    selections_per_turn: int

    # Participants
    selectors: List[SelectorDTO]
    active_selector: Optional[SelectorDTO]
    picks: List[PickDTO]

    # Status flags
    is_complete: bool

    @classmethod
    def from_domain(cls, session: DraftSession) -> "DraftStatusDTO":
        """Convert from domain DraftSession aggregate"""
        draft = session.draft
        state = session.state_data
        selectors = [SelectorDTO.from_domain(selector, session) for selector in session.selectors]
        active = next((selector for selector in selectors if selector.is_active), None)

        return cls(
            channel_id=session.channel_id,
            source_url=session.last_valid_url,

            entry_count=len(session.film_list.entries),
            available_entries=session.film_list.available_entries,

            has_draft=draft is not None,
            available_selections=draft.available_selections if draft else 0,
            remaining_selections=draft.remaining_selections if draft else 0,
            round_sizes=[r.selections_per_turn for r in draft.rounds] if draft else [],

            selections_made=state.global_order if state else 0,
            round_number=state.round_number if state else 0,
            rounds_count=state.rounds_count if state else 0,
            round_turn_number=state.round_turn_number if state else 0,
            global_turn_number=state.global_turn_number if state else 0,
            turn_order=state.turn_order if state else 0,
            selections_per_turn=draft.current_round.selections_per_turn if draft else 0,

            selectors=selectors,
            active_selector=active,
            picks=[PickDTO.from_domain(entry) for entry in session.film_list.selected_entries()],

            is_complete=session.is_complete
        )

    @property
    def picks_left_in_turn(self) -> int:
        return max(0, self.selections_per_turn - self.turn_order)


# Result DTOs for operation outcomes

@dataclass
class LoadResult:
    """Result of loading a film list"""
    success: bool
    message: Optional[str] = None
    entry_count: int = 0
    has_draft: bool = False
    error_code: Optional[str] = None


@dataclass
class SelectorResult:
    """Result of adding, removing or renaming a selector"""
    success: bool
    message: Optional[str] = None
    selector: Optional[SelectorDTO] = None
    error_code: Optional[str] = None


@dataclass
class SelectionResult:
    """Result of a pick"""
    success: bool
    message: Optional[str] = None
    entry_title: Optional[str] = None
    selector_name: Optional[str] = None
    draft_completed: bool = False
    next_selector: Optional[str] = None
    error_code: Optional[str] = None


@dataclass
class UndoResult:
    """Result of undoing the last pick"""
    success: bool
    message: Optional[str] = None
    entry_title: Optional[str] = None
    selector_name: Optional[str] = None
    error_code: Optional[str] = None
