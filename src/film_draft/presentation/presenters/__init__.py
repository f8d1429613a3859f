from .draft_presenter import DraftPresenter

__all__ = ["DraftPresenter"]
