"""
Application Layer Interfaces (Ports)

Defines contracts between application layer and infrastructure adapters.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..domain.entities.film_list import ListEntry
from ..domain.entities.list_url import ListUrl
from ..domain.entities.snapshot import SessionSnapshot
from .dto import DraftStatusDTO, PickDTO, SelectionResult


# Repository Interfaces
class ISessionRepository(ABC):
    """Repository for session snapshots"""

    @abstractmethod
    async def save_session(self, snapshot: SessionSnapshot) -> None:
        """Save a session snapshot"""
        pass

    @abstractmethod
    async def get_session(self, channel_id: int) -> Optional[SessionSnapshot]:
        """Get the snapshot stored for a channel

        Raises:
            StructuralMismatchError: If the stored data cannot be read back
        """
        pass

    @abstractmethod
    async def delete_session(self, channel_id: int) -> None:
        """Delete a session snapshot"""
        pass

    @abstractmethod
    async def get_channel_ids(self) -> List[int]:
        """Get all channels with a stored session"""
        pass


# External Service Interfaces
class IFilmListProvider(ABC):
    """Source of candidate films"""

    @abstractmethod
    async def fetch_entries(self, list_url: ListUrl) -> List[ListEntry]:
        """Fetch the entries of a list

        Raises:
            FilmListFetchError: If the list cannot be retrieved
        """
        pass

    async def close(self) -> None:
        """Release any held resources"""
        pass


# Presentation Interfaces
class IDraftPresenter(ABC):
    """Renders draft DTOs for the chat front end"""

    @abstractmethod
    def create_status_embed(self, status: DraftStatusDTO) -> Any:
        """Render the turn indicator and every selector's picks"""
        pass

    @abstractmethod
    def create_selection_embed(self, result: SelectionResult) -> Any:
        """Render a successful pick"""
        pass

    @abstractmethod
    def create_picks_embed(self, picks: List[PickDTO]) -> Any:
        """Render the most recent picks"""
        pass
