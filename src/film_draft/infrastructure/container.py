"""
Dependency Injection Configuration

Central container that wires up all dependencies for the film draft system.
"""

from typing import Any, Dict, Optional

from ..application.draft_service import DraftApplicationService
from ..application.interfaces import IFilmListProvider, ISessionRepository
from .film_list_adapter import LetterboxdListAdapter
from .storage_adapter import JsonSessionRepository, MemorySessionRepository


class DraftContainer:
    """
    Dependency injection container for the film draft system.

    Centralizes all dependency wiring and provides factory methods
    for creating properly configured services.
    """

    def __init__(self, config: Optional[Dict[str, str]] = None):
        """
        Initialize container from the application config.

        Args:
            config: Configuration dictionary. Without ``DRAFT_DATA_DIR``
                sessions are kept in memory only.
        """
        self.config = config or {}
        self._services: Dict[str, Any] = {}
        self._setup_dependencies()

    def _setup_dependencies(self):
        """Setup all service dependencies"""
        data_dir = self.config.get("DRAFT_DATA_DIR")
        if data_dir:
            self._services['session_repository'] = JsonSessionRepository(data_dir)
        else:
            self._services['session_repository'] = MemorySessionRepository()

        self._services['film_list_provider'] = LetterboxdListAdapter(
            self.config.get("FILM_LIST_BACKEND_URL") or None
        )

    def get_draft_service(self) -> DraftApplicationService:
        """Get configured draft application service"""
        if 'draft_service' not in self._services:
            self._services['draft_service'] = DraftApplicationService(
                session_repository=self.get_session_repository(),
                film_list_provider=self.get_film_list_provider()
            )
        return self._services['draft_service']

    def get_session_repository(self) -> ISessionRepository:
        return self._services['session_repository']

    def get_film_list_provider(self) -> IFilmListProvider:
        return self._services['film_list_provider']

    async def cleanup(self) -> None:
        """Cleanup resources"""
        if 'draft_service' in self._services:
            await self._services['draft_service'].cleanup()
        else:
            await self.get_film_list_provider().close()

        repo = self._services.get('session_repository')
        if hasattr(repo, 'clear_all_sessions'):
            repo.clear_all_sessions()

        # Clear service cache
        self._services.clear()


# Global container instance
_container: Optional[DraftContainer] = None


def get_container() -> DraftContainer:
    """Get global container instance"""
    global _container
    if _container is None:
        _container = DraftContainer()
    return _container


def initialize_container(config: Optional[Dict[str, str]] = None) -> DraftContainer:
    """Initialize global container with the application config"""
    global _container
    _container = DraftContainer(config)
    return _container


async def cleanup_container() -> None:
    """Cleanup global container"""
    global _container
    if _container:
        await _container.cleanup()
        _container = None
