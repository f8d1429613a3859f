"""
Draft Session Entity - Aggregate Root

One film draft per channel: the film list, the selectors taking part and the
Draft scheduling their picks. Any change to the film list or the selector set
rebuilds the Draft from scratch; ``reset`` only empties it.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from ..events import Unsubscribe
from ..exceptions import (
    EntryNotAvailableError,
    InsufficientEntriesError,
    InvalidDraftStateError,
    SelectorAlreadyExistsError,
    SelectorNotFoundError,
    StructuralMismatchError,
)
from .draft import Draft, DraftStateData
from .film_list import FilmList, ListEntry, SelectableListEntry
from .selector import Selector
from .snapshot import EntryRecord, SelectorRecord, SessionSnapshot

logger = logging.getLogger(__name__)


class DraftSession:
    """Film draft running in one channel"""

    def __init__(self, channel_id: int):
        self.channel_id = channel_id
        self.film_list = FilmList()
        self.draft: Optional[Draft] = None
        self.last_valid_url: Optional[str] = None

        # Mirrors of the draft's notifications
        self.state_data: Optional[DraftStateData] = None
        self.active_selector: Optional[Selector] = None
        self.is_complete = False

        self._selectors: List[Selector] = []
        self._subscriptions: List[Unsubscribe] = []

    def __repr__(self) -> str:
        return (f"DraftSession(channel_id={self.channel_id}, entries={len(self.film_list.entries)}, "
                f"selectors={len(self._selectors)}, draft={self.draft!r})")

    @property
    def selectors(self) -> List[Selector]:
        return list(self._selectors)

    @property
    def has_draft(self) -> bool:
        return self.draft is not None

    # ===================
    # Selector Registry
    # ===================

    def get_selector(self, color: str) -> Selector:
        for selector in self._selectors:
            if selector.key == color.lower():
                return selector
        raise SelectorNotFoundError(f"No selector with colour {color}")

    def find_selector_by_name(self, name: str) -> Optional[Selector]:
        for selector in self._selectors:
            if selector.name.lower() == name.lower():
                return selector
        return None

    def add_selectors(self, new_selectors: Iterable[Selector]) -> None:
        new_selectors = list(new_selectors)
        taken = {selector.key for selector in self._selectors}
        for selector in new_selectors:
            if selector.key in taken:
                raise SelectorAlreadyExistsError(f"Colour {selector.color} is already taken")
            taken.add(selector.key)

        self._selectors.extend(new_selectors)
        logger.info("Channel %s: added selectors %s", self.channel_id, [s.name for s in new_selectors])
        self._rebuild()

    def remove_selector(self, color: str) -> Selector:
        selector = self.get_selector(color)
        self._selectors.remove(selector)
        logger.info("Channel %s: removed selector %s", self.channel_id, selector.name)
        self._rebuild()
        return selector

    def patch_selector_name(self, color: str, name: str) -> Selector:
        """Rename a selector; identity is the colour, so the draft is untouched"""
        selector = self.get_selector(color)
        selector.patch_name(name)
        return selector

    # ===================
    # Film List
    # ===================

    def set_film_list(self, film_list: FilmList, source_url: Optional[str] = None) -> None:
        self._discard_draft()
        self.film_list.reset()
        self.film_list = film_list
        if source_url:
            self.last_valid_url = source_url
        logger.info("Channel %s: film list set with %d entries", self.channel_id, len(film_list.entries))
        self._build_draft()

    # ===================
    # Draft Operations
    # ===================

    def make_selection(self, entry: SelectableListEntry) -> None:
        """Claim a film for whichever selector's pick it is"""
        if self.draft is None:
            raise InvalidDraftStateError("No draft is in progress")
        if self.is_complete or self.active_selector is None:
            raise InvalidDraftStateError("The draft is already complete")
        if not entry.is_selectable:
            raise EntryNotAvailableError(f"{entry.entry.display_name} cannot be picked")
        self._make_selection_for_selector(entry, self.active_selector)

    def _make_selection_for_selector(self, entry: SelectableListEntry, selector: Selector) -> None:
        state = self.state_data
        entry.set_selection_state(replace(
            state,
            global_order=state.global_order + 1,
            individual_selector_order=state.individual_selector_order + 1,
            turn_order=state.turn_order + 1,
            round_order=state.round_order + 1,
        ))
        self.film_list.select_entry(entry, selector)
        self.draft.make_selection()

    def undo_last_selection(self) -> Optional[SelectableListEntry]:
        """Give back the most recent pick; None when there is nothing to undo"""
        if self.draft is None:
            return None
        entry = self.film_list.last_selected_entry()
        if entry is None:
            return None
        self.film_list.deselect_entry(entry)
        self.draft.undo_selection()
        return entry

    def reset(self) -> None:
        self.film_list.reset()
        if self.draft is not None:
            self.draft.reset()

    def close(self) -> None:
        self._discard_draft()

    def _rebuild(self) -> None:
        self._discard_draft()
        self.film_list.reset()
        self._build_draft()

    def _discard_draft(self) -> None:
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions.clear()
        if self.draft is not None:
            self.draft.reset()
            self.draft.close()
        self.draft = None
        self.state_data = None
        self.active_selector = None
        self.is_complete = False

    def _build_draft(self) -> None:
        if self.film_list.available_entries == 0 or not self._selectors:
            return
        try:
            draft = Draft(self.film_list.available_entries, self._selectors)
        except InsufficientEntriesError as e:
            logger.warning("Channel %s: %s", self.channel_id, e)
            for selector in self._selectors:
                selector.clear_round_info()
            return

        self.draft = draft
        self._subscriptions = [
            draft.subscribe_state_data(self._on_state_data),
            draft.subscribe_active_selector(self._on_active_selector),
            draft.subscribe_draft_complete(self._on_draft_complete),
        ]

    def _on_state_data(self, state: DraftStateData) -> None:
        self.state_data = state

    def _on_active_selector(self, selector: Optional[Selector]) -> None:
        self.active_selector = selector

    def _on_draft_complete(self, complete: bool) -> None:
        self.is_complete = complete
        if complete:
            self.active_selector = None
            logger.info("Channel %s: draft complete", self.channel_id)

    # ===================
    # Persistence Support
    # ===================

    def to_snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            channel_id=self.channel_id,
            selectors=[SelectorRecord(s.name, s.color, s.contrast) for s in self._selectors],
            entries=[
                EntryRecord(
                    position=item.entry.position,
                    title=item.entry.title,
                    year=item.entry.year,
                    url_slug=item.entry.url_slug,
                    poster_url=item.entry.poster_url,
                    suggested_by=item.entry.suggested_by,
                    disabled=item.entry.disabled,
                    selected=item.selected,
                    selector_color=item.selector.color if item.selector else None,
                    global_order=item.global_order,
                )
                for item in self.film_list.entries
            ],
            last_valid_url=self.last_valid_url,
        )

    @classmethod
    def from_snapshot(cls, snapshot: SessionSnapshot) -> "DraftSession":
        """
        Rebuild a session by replaying its picks.

        Selectors are constructed first, then the film list and the draft;
        the selected films are then replayed in their original pick order
        through the normal selection path.

        Raises:
            StructuralMismatchError: If a pick cannot be matched to the rebuilt
                selectors, films or draft order
        """
        session = cls(snapshot.channel_id)
        session.last_valid_url = snapshot.last_valid_url

        try:
            selectors = [Selector(r.name, r.color, r.contrast) for r in snapshot.selectors]
            keys = {s.key for s in selectors}
        except (AttributeError, ValueError) as e:
            raise StructuralMismatchError(f"Snapshot selector is invalid: {e}") from e
        if len(keys) != len(selectors):
            raise StructuralMismatchError("Snapshot contains duplicate selector colours")
        session._selectors = selectors
        session.film_list = FilmList.from_entries([
            ListEntry(
                position=r.position,
                title=r.title,
                year=r.year,
                url_slug=r.url_slug,
                poster_url=r.poster_url,
                suggested_by=r.suggested_by,
                disabled=r.disabled,
            )
            for r in snapshot.entries
        ])
        session._build_draft()

        picks = [r for r in snapshot.entries if r.selected]
        if any(r.global_order is None for r in picks):
            raise StructuralMismatchError("A selected film has no pick order")
        if any(not isinstance(r.global_order, int) for r in picks):
            raise StructuralMismatchError("Pick orders must be whole numbers")

        for record in sorted(picks, key=lambda r: r.global_order):
            selector = next(
                (s for s in selectors if record.selector_color and s.key == record.selector_color.lower()),
                None,
            )
            entry = session.film_list.find_entry(record.title, record.year)
            if selector is None or entry is None:
                raise StructuralMismatchError("Selectors and film list mismatch")
            if session.draft is None or session.is_complete:
                raise StructuralMismatchError("More picks recorded than the draft allows")
            if selector != session.active_selector:
                raise StructuralMismatchError(
                    f"Pick {record.global_order} belongs to {session.active_selector.name}, "
                    f"not {selector.name}"
                )
            if not entry.is_selectable:
                raise StructuralMismatchError(f"{entry.entry.display_name} cannot be picked twice")
            session._make_selection_for_selector(entry, selector)

        logger.info("Channel %s: restored %d picks", snapshot.channel_id, len(picks))
        return session
