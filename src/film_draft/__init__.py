"""
Film Draft System - Hexagonal Architecture Implementation

Snake-draft scheduling over a film list: selectors take turns claiming films,
turn order reverses every round and every pick can be undone.
"""

from .application.draft_service import DraftApplicationService
from .infrastructure.container import DraftContainer, initialize_container
from .presentation.presenters.draft_presenter import DraftPresenter

__all__ = [
    "DraftApplicationService",
    "DraftContainer",
    "DraftPresenter",
    "initialize_container"
]
