"""
Draft Application Service

Main application service that coordinates film draft operations.
Acts as the facade for all draft-related use cases: it loads sessions, runs
the domain operations, persists snapshots and turns domain errors into result
objects for the presentation layer.
"""

import logging
from typing import Dict, Optional

from ..domain.entities.film_list import FilmList
from ..domain.entities.list_url import ListUrl
from ..domain.entities.palette import find_color_option, next_free_color
from ..domain.entities.selector import Selector
from ..domain.entities.session import DraftSession
from ..domain.exceptions import (
    DraftError,
    EntryNotAvailableError,
    EntryNotFoundError,
    FilmListFetchError,
    InvalidDraftStateError,
    SelectorAlreadyExistsError,
    SelectorNotFoundError,
    StructuralMismatchError,
    ValidationError
)
from .interfaces import IFilmListProvider, ISessionRepository
from .dto import (
    DraftStatusDTO,
    LoadResult,
    SelectionResult,
    SelectorDTO,
    SelectorResult,
    UndoResult
)

logger = logging.getLogger(__name__)

ERROR_CODES = {
    ValidationError: "invalid_input",
    FilmListFetchError: "fetch_failed",
    EntryNotFoundError: "entry_not_found",
    EntryNotAvailableError: "entry_not_available",
    InvalidDraftStateError: "invalid_state",
    SelectorAlreadyExistsError: "selector_exists",
    SelectorNotFoundError: "selector_not_found",
}


def error_code_for(error: DraftError) -> str:
    """Map a domain error to the code carried by result objects"""
    for error_type, code in ERROR_CODES.items():
        if isinstance(error, error_type):
            return code
    return "draft_error"


class DraftApplicationService:
    """
    Main application service for film draft operations.

    Keeps one live DraftSession per channel. Sessions missing from memory are
    restored from the repository by replaying their picks.
    """

    def __init__(
        self,
        session_repository: ISessionRepository,
        film_list_provider: IFilmListProvider
    ):
        self._session_repository = session_repository
        self._film_list_provider = film_list_provider
        self._sessions: Dict[int, DraftSession] = {}

    # ====================
    # Session Lifecycle
    # ====================

    async def get_session(self, channel_id: int) -> DraftSession:
        """Get the live session for a channel, restoring it when needed"""
        session = self._sessions.get(channel_id)
        if session is None:
            session = await self.restore_session(channel_id)
        return session

    async def restore_session(self, channel_id: int) -> DraftSession:
        """
        Rebuild a channel's session from its stored snapshot.

        A snapshot that cannot be replayed is discarded and an empty session
        is started instead.
        """
        try:
            snapshot = await self._session_repository.get_session(channel_id)
            session = DraftSession.from_snapshot(snapshot) if snapshot else DraftSession(channel_id)
        except StructuralMismatchError as e:
            logger.warning(f"Discarding stored draft for channel {channel_id}: {e}")
            await self._session_repository.delete_session(channel_id)
            session = DraftSession(channel_id)

        old_session = self._sessions.get(channel_id)
        if old_session is not None:
            old_session.close()
        self._sessions[channel_id] = session
        return session

    async def end_session(self, channel_id: int) -> bool:
        """Drop a channel's session and its stored snapshot"""
        session = self._sessions.pop(channel_id, None)
        if session is not None:
            session.close()
        await self._session_repository.delete_session(channel_id)
        logger.info(f"Ended film draft session in channel {channel_id}")
        return session is not None

    async def _save(self, session: DraftSession) -> None:
        await self._session_repository.save_session(session.to_snapshot())

    # ====================
    # Film List
    # ====================

    async def load_film_list(self, channel_id: int, url: str) -> LoadResult:
        """Fetch a Letterboxd list and use it as the channel's film pool"""
        try:
            list_url = ListUrl.parse(url)
            entries = await self._film_list_provider.fetch_entries(list_url)
        except (ValidationError, FilmListFetchError) as e:
            logger.warning(f"Could not load film list {url!r} for channel {channel_id}: {e}")
            return LoadResult(success=False, message=str(e), error_code=error_code_for(e))

        if not entries:
            return LoadResult(success=False, message="The list has no films", error_code="empty_list")

        session = await self.get_session(channel_id)
        session.set_film_list(FilmList.from_entries(entries), source_url=list_url.grid_url)
        await self._save(session)

        if session.has_draft:
            message = (f"Loaded {len(entries)} films: {session.draft.available_selections} picks "
                       f"over {session.draft.rounds_count} rounds")
        else:
            message = f"Loaded {len(entries)} films"
        return LoadResult(
            success=True,
            message=message,
            entry_count=len(entries),
            has_draft=session.has_draft
        )

    # ====================
    # Selectors
    # ====================

    async def add_selector(self, channel_id: int, name: str, color: Optional[str] = None) -> SelectorResult:
        """Add a participant; without a colour the next free palette colour is used"""
        session = await self.get_session(channel_id)
        name = (name or "").strip()
        if not name:
            return SelectorResult(success=False, message="Name cannot be empty", error_code="invalid_input")
        if session.find_selector_by_name(name):
            return SelectorResult(success=False, message=f"{name} is already drafting", error_code="selector_exists")

        if color is None:
            option = next_free_color({selector.key for selector in session.selectors})
            if option is None:
                return SelectorResult(success=False, message="Every colour is taken", error_code="palette_full")
            color, contrast = option.value, option.contrast
        else:
            option = find_color_option(color)
            contrast = option.contrast if option else "white"

        try:
            selector = Selector(name=name, color=color, contrast=contrast)
            session.add_selectors([selector])
        except (SelectorAlreadyExistsError, ValueError) as e:
            code = error_code_for(e) if isinstance(e, DraftError) else "invalid_input"
            return SelectorResult(success=False, message=str(e), error_code=code)

        await self._save(session)
        return SelectorResult(
            success=True,
            message=f"{name} joined the draft",
            selector=SelectorDTO.from_domain(selector, session)
        )

    async def remove_selector(self, channel_id: int, name: str) -> SelectorResult:
        session = await self.get_session(channel_id)
        selector = session.find_selector_by_name(name)
        if selector is None:
            return SelectorResult(success=False, message=f"{name} is not drafting", error_code="selector_not_found")

        session.remove_selector(selector.color)
        await self._save(session)
        return SelectorResult(success=True, message=f"{selector.name} left the draft")

    async def rename_selector(self, channel_id: int, name: str, new_name: str) -> SelectorResult:
        session = await self.get_session(channel_id)
        selector = session.find_selector_by_name(name)
        if selector is None:
            return SelectorResult(success=False, message=f"{name} is not drafting", error_code="selector_not_found")
        other = session.find_selector_by_name(new_name)
        if other is not None and other is not selector:
            return SelectorResult(success=False, message=f"{new_name} is already drafting",
                                  error_code="selector_exists")

        try:
            session.patch_selector_name(selector.color, new_name)
        except ValueError as e:
            return SelectorResult(success=False, message=str(e), error_code="invalid_input")

        await self._save(session)
        return SelectorResult(
            success=True,
            message=f"{name} is now {selector.name}",
            selector=SelectorDTO.from_domain(selector, session)
        )

    # ====================
    # Draft Operations
    # ====================

    async def make_selection(self, channel_id: int, position: int) -> SelectionResult:
        """Claim the film at ``position`` for whoever's pick it is"""
        session = await self.get_session(channel_id)
        try:
            entry = session.film_list.get_entry(position)
            picker = session.active_selector
            session.make_selection(entry)
        except (EntryNotFoundError, EntryNotAvailableError, InvalidDraftStateError) as e:
            return SelectionResult(success=False, message=str(e), error_code=error_code_for(e))

        await self._save(session)
        logger.info(f"Channel {channel_id}: {picker.name} picked {entry.entry.display_name}")
        return SelectionResult(
            success=True,
            message=f"{picker.name} picked {entry.entry.display_name}",
            entry_title=entry.title,
            selector_name=picker.name,
            draft_completed=session.is_complete,
            next_selector=session.active_selector.name if session.active_selector else None
        )

    async def undo_selection(self, channel_id: int) -> UndoResult:
        """Give back the most recent pick"""
        session = await self.get_session(channel_id)
        entry = session.undo_last_selection()
        if entry is None:
            return UndoResult(success=False, message="Nothing to undo", error_code="nothing_to_undo")

        await self._save(session)
        picker = session.active_selector
        return UndoResult(
            success=True,
            message=f"Undid {entry.entry.display_name}",
            entry_title=entry.title,
            selector_name=picker.name if picker else None
        )

    async def reset_draft(self, channel_id: int) -> DraftStatusDTO:
        """Clear every pick, keeping films and selectors"""
        session = await self.get_session(channel_id)
        session.reset()
        await self._save(session)
        logger.info(f"Channel {channel_id}: draft reset")
        return DraftStatusDTO.from_domain(session)

    async def get_status(self, channel_id: int) -> DraftStatusDTO:
        session = await self.get_session(channel_id)
        return DraftStatusDTO.from_domain(session)

    # ====================
    # Cleanup
    # ====================

    async def cleanup(self) -> None:
        """Close every session and the film list provider"""
        for session in self._sessions.values():
            session.close()
        self._sessions.clear()
        await self._film_list_provider.close()
