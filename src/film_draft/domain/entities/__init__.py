"""
Domain Entities

Core business objects representing the film draft's main concepts.
"""

from .selector import Selector
from .turn import Turn, TurnNumbers
from .round import Round
from .draft import Draft, DraftStateData, MIN_REMAINING_SELECTIONS, calculate_round_sizes
from .film_list import FilmList, ListEntry, SelectableListEntry
from .list_url import ListUrl, is_valid_url
from .snapshot import EntryRecord, SelectorRecord, SessionSnapshot
from .session import DraftSession

__all__ = [
    "Selector",
    "Turn",
    "TurnNumbers",
    "Round",
    "Draft",
    "DraftStateData",
    "MIN_REMAINING_SELECTIONS",
    "calculate_round_sizes",
    "FilmList",
    "ListEntry",
    "SelectableListEntry",
    "ListUrl",
    "is_valid_url",
    "EntryRecord",
    "SelectorRecord",
    "SessionSnapshot",
    "DraftSession",
]
