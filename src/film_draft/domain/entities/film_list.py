"""
Film List Entities

The candidate pool the draft distributes. The draft engine only needs the
count of available entries; binding "the nth pick" to a concrete film happens
here.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional

from ..exceptions import EntryNotFoundError
from .draft import DraftStateData
from .selector import Selector


@dataclass(frozen=True)
class ListEntry:
    """A film as it appears on the source list"""
    position: int
    title: str
    year: str = ""
    url_slug: str = ""
    poster_url: str = ""
    suggested_by: Optional[str] = None
    disabled: bool = False

    @property
    def display_name(self) -> str:
        return f"{self.title} ({self.year})" if self.year else self.title


@dataclass
class SelectableListEntry:
    """A list entry that can be claimed by a selector during the draft"""
    entry: ListEntry
    selected: bool = False
    selector: Optional[Selector] = None
    selection_state: Optional[DraftStateData] = None

    @property
    def position(self) -> int:
        return self.entry.position

    @property
    def title(self) -> str:
        return self.entry.title

    @property
    def year(self) -> str:
        return self.entry.year

    @property
    def disabled(self) -> bool:
        return self.entry.disabled

    @property
    def global_order(self) -> Optional[int]:
        """Pick number that claimed this entry"""
        return self.selection_state.global_order if self.selection_state else None

    @property
    def is_selectable(self) -> bool:
        return not self.selected and not self.disabled

    def select(self, selector: Selector) -> None:
        self.selected = True
        self.selector = selector

    def set_selection_state(self, state: Optional[DraftStateData]) -> None:
        self.selection_state = state

    def deselect(self) -> None:
        if not self.selector:
            return
        self.selected = False
        self.selector = None
        self.set_selection_state(None)

    def copy(self) -> "SelectableListEntry":
        return replace(self)


@dataclass
class FilmList:
    """Ordered film entries plus the running pick counter"""
    entries: List[SelectableListEntry] = field(default_factory=list)
    current_order: int = 0

    @classmethod
    def from_entries(cls, entries: List[ListEntry]) -> "FilmList":
        return cls([SelectableListEntry(entry) for entry in entries])

    @property
    def available_entries(self) -> int:
        """Entries that may be drafted (disabled ones are skipped)"""
        return sum(1 for entry in self.entries if not entry.disabled)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def get_entry(self, position: int) -> SelectableListEntry:
        for entry in self.entries:
            if entry.position == position:
                return entry
        raise EntryNotFoundError(f"No film at position {position}")

    def find_entry(self, title: str, year: str) -> Optional[SelectableListEntry]:
        for entry in self.entries:
            if entry.title == title and entry.year == year:
                return entry
        return None

    def select_entry(self, entry: SelectableListEntry, selector: Selector) -> None:
        if entry.selected or entry.disabled:
            return
        self.current_order += 1
        entry.select(selector)

    def deselect_entry(self, entry: SelectableListEntry) -> None:
        if not entry.selected or entry.disabled:
            return
        entry.deselect()
        self.current_order -= 1

    def last_selected_entry(self) -> Optional[SelectableListEntry]:
        for entry in self.entries:
            if entry.selected and entry.global_order == self.current_order:
                return entry
        return None

    def selected_entries(self) -> List[SelectableListEntry]:
        """Selected entries in pick order"""
        selected = [entry for entry in self.entries if entry.selected]
        return sorted(selected, key=lambda entry: entry.global_order or 0)

    def unselected_entries(self) -> List[SelectableListEntry]:
        return [entry for entry in self.entries if entry.is_selectable]

    def entries_for(self, selector: Selector) -> List[SelectableListEntry]:
        return [entry for entry in self.selected_entries() if entry.selector == selector]

    def reset(self) -> None:
        for entry in self.entries:
            if entry.selected:
                self.deselect_entry(entry)
