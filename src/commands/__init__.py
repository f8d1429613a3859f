from .base_commands import BaseCommands
from .film_draft import FilmDraftCommands

__all__ = ['BaseCommands', 'FilmDraftCommands']
