"""
Application Layer

Coordinates between domain and infrastructure layers.
Contains use cases, application services, and ports (interfaces).
"""

from .draft_service import DraftApplicationService
from .dto import DraftStatusDTO, SelectorDTO, PickDTO, LoadResult, SelectorResult, SelectionResult, UndoResult
from .interfaces import IDraftPresenter, IFilmListProvider, ISessionRepository

__all__ = [
    "DraftApplicationService",
    "DraftStatusDTO",
    "SelectorDTO",
    "PickDTO",
    "LoadResult",
    "SelectorResult",
    "SelectionResult",
    "UndoResult",
    "IDraftPresenter",
    "IFilmListProvider",
    "ISessionRepository"
]
