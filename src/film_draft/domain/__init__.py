"""
Domain Layer - Pure Business Logic

Contains the draft scheduling engine, the film list and the session aggregate.
No external dependencies allowed in this layer.
"""

from .entities.draft import Draft, DraftStateData
from .entities.round import Round
from .entities.turn import Turn
from .entities.selector import Selector
from .entities.session import DraftSession
from .exceptions import DraftError, RoundNotRegisteredError, StructuralMismatchError

__all__ = [
    "Draft",
    "DraftStateData",
    "Round",
    "Turn",
    "Selector",
    "DraftSession",
    "DraftError",
    "RoundNotRegisteredError",
    "StructuralMismatchError"
]
