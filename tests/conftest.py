import pytest
from typing import Callable, List, Optional
from unittest.mock import AsyncMock, MagicMock, create_autospec

import discord
from discord.ext import commands

from src.film_draft.application.draft_service import DraftApplicationService
from src.film_draft.application.interfaces import IFilmListProvider
from src.film_draft.domain.entities.film_list import FilmList, ListEntry
from src.film_draft.domain.entities.list_url import ListUrl
from src.film_draft.domain.entities.selector import Selector
from src.film_draft.domain.exceptions import FilmListFetchError
from src.film_draft.infrastructure.storage_adapter import MemorySessionRepository


class FakeFilmListProvider(IFilmListProvider):
    """Serves a fixed list of entries and records what was asked for"""

    def __init__(self, entries: List[ListEntry]):
        self.entries = entries
        self.requests: List[ListUrl] = []
        self.error: Optional[FilmListFetchError] = None
        self.closed = False

    async def fetch_entries(self, list_url: ListUrl) -> List[ListEntry]:
        self.requests.append(list_url)
        if self.error:
            raise self.error
        return list(self.entries)

    async def close(self) -> None:
        self.closed = True


def make_entries(count: int, disabled: tuple = ()) -> List[ListEntry]:
    return [
        ListEntry(
            position=position,
            title=f"Film {position}",
            year=str(1990 + position),
            url_slug=f"film-{position}",
            disabled=position in disabled
        )
        for position in range(1, count + 1)
    ]


@pytest.fixture
def entry_factory() -> Callable[..., List[ListEntry]]:
    return make_entries


@pytest.fixture
def film_list_factory() -> Callable[..., FilmList]:
    def factory(count: int, disabled: tuple = ()) -> FilmList:
        return FilmList.from_entries(make_entries(count, disabled))
    return factory


@pytest.fixture
def selectors() -> List[Selector]:
    """Three selectors named after their place in the first round"""
    return [
        Selector(name="Ana", color="#673AB7"),
        Selector(name="Bruno", color="#FF9800", contrast="black"),
        Selector(name="Carla", color="#00796B"),
    ]


@pytest.fixture
def film_list_provider() -> FakeFilmListProvider:
    return FakeFilmListProvider(make_entries(23))


@pytest.fixture
def session_repository() -> MemorySessionRepository:
    return MemorySessionRepository()


@pytest.fixture
def draft_service(session_repository, film_list_provider) -> DraftApplicationService:
    return DraftApplicationService(
        session_repository=session_repository,
        film_list_provider=film_list_provider
    )


@pytest.fixture
def mock_interaction() -> discord.Interaction:
    """Create mock interaction with all required attributes"""
    interaction = create_autospec(discord.Interaction)

    # Response handling
    interaction.response = AsyncMock()
    interaction.response.send_message = AsyncMock()
    interaction.response.is_done = MagicMock(return_value=False)
    interaction.response.defer = AsyncMock()

    # Followup handling
    interaction.followup = AsyncMock()
    interaction.followup.send = AsyncMock()

    # User info
    interaction.user = MagicMock(spec=discord.Member)
    interaction.user.name = "Test User"
    interaction.user.id = 123

    # Guild info
    member = MagicMock(spec=discord.Member)
    member.display_name = "Test User"
    interaction.guild = MagicMock(spec=discord.Guild)
    interaction.guild.id = 789
    interaction.guild.get_member = MagicMock(return_value=member)

    interaction.channel_id = 123

    return interaction


@pytest.fixture
def mock_context() -> commands.Context:
    """Create mock context with all required attributes"""
    ctx = create_autospec(commands.Context)

    # Message handling
    ctx.send = AsyncMock()
    ctx.message = MagicMock(spec=discord.Message)

    # Channel info
    ctx.channel = MagicMock(spec=discord.TextChannel)
    ctx.channel.id = 123

    # Author info
    ctx.author = MagicMock(spec=discord.Member)
    ctx.author.name = "Test User"
    ctx.author.display_name = "Test User"
    ctx.author.id = 456

    # Guild info
    ctx.guild = MagicMock(spec=discord.Guild)
    ctx.guild.id = 789

    return ctx
