"""
Presentation Layer

Renders draft state for Discord.
"""

from .presenters.draft_presenter import DraftPresenter

__all__ = ["DraftPresenter"]
