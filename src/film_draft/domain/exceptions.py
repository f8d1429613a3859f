"""
Domain Exceptions

Business rule violations and domain-specific errors.
"""


class DraftError(Exception):
    """Base exception for all draft-related errors"""
    pass


class RoundNotRegisteredError(DraftError):
    """Raised when a selector's round counters are used for a round that was never seeded"""

    def __init__(self, round_number: int):
        super().__init__(f"Round {round_number} not found for selector")
        self.round_number = round_number


class StructuralMismatchError(DraftError):
    """Raised when persisted selections cannot be matched to a rebuilt draft"""
    pass


class InsufficientEntriesError(DraftError):
    """Raised when the film pool is too small to give every selector a pick"""
    pass


class InvalidDraftStateError(DraftError):
    """Raised when attempting an operation in an invalid draft state"""
    pass


class SelectorNotFoundError(DraftError):
    """Raised when trying to operate on a selector that doesn't exist"""
    pass


class SelectorAlreadyExistsError(DraftError):
    """Raised when trying to add a selector whose colour is already taken"""
    pass


class EntryNotFoundError(DraftError):
    """Raised when a film list entry cannot be found"""
    pass


class EntryNotAvailableError(DraftError):
    """Raised when trying to pick a film that is disabled or already taken"""
    pass


class ValidationError(DraftError):
    """Raised when validation fails"""
    pass


class FilmListFetchError(DraftError):
    """Raised when the film list cannot be retrieved from its source"""
    pass
