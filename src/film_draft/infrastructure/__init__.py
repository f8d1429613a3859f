"""
Infrastructure Layer

Adapters for external systems and services.
"""

from .storage_adapter import MemorySessionRepository, JsonSessionRepository
from .film_list_adapter import LetterboxdListAdapter
from .container import DraftContainer, initialize_container, get_container, cleanup_container

__all__ = [
    "MemorySessionRepository",
    "JsonSessionRepository",
    "LetterboxdListAdapter",
    "DraftContainer",
    "initialize_container",
    "get_container",
    "cleanup_container"
]
