import pytest

from src.film_draft.application.draft_service import DraftApplicationService
from src.film_draft.domain.entities.session import DraftSession
from src.film_draft.domain.entities.snapshot import SessionSnapshot
from src.film_draft.domain.exceptions import FilmListFetchError

CHANNEL_ID = 123
LIST_URL = "https://letterboxd.com/someone/list/favourites/"


async def start_draft(service, *names):
    await service.load_film_list(CHANNEL_ID, LIST_URL)
    for name in names:
        await service.add_selector(CHANNEL_ID, name)


@pytest.mark.asyncio
class TestDraftApplicationService:
    """Use cases and their result objects"""

    async def test_load_film_list(self, draft_service, film_list_provider, session_repository):
        result = await draft_service.load_film_list(CHANNEL_ID, LIST_URL)
        assert result.success
        assert result.entry_count == 23
        assert not result.has_draft
        assert film_list_provider.requests[0].detail_url.endswith("/favourites/detail/")
        assert session_repository.has_session(CHANNEL_ID)

        status = await draft_service.get_status(CHANNEL_ID)
        assert status.source_url == LIST_URL

    async def test_load_reports_draft_shape(self, draft_service):
        await draft_service.add_selector(CHANNEL_ID, "Ana")
        await draft_service.add_selector(CHANNEL_ID, "Bruno")
        await draft_service.add_selector(CHANNEL_ID, "Carla")
        result = await draft_service.load_film_list(CHANNEL_ID, LIST_URL)
        assert result.has_draft
        assert result.message == "Loaded 23 films: 18 picks over 3 rounds"

    async def test_load_invalid_url(self, draft_service, film_list_provider):
        result = await draft_service.load_film_list(CHANNEL_ID, "https://example.com/list")
        assert not result.success
        assert result.error_code == "invalid_input"
        assert film_list_provider.requests == []

    async def test_load_fetch_failure(self, draft_service, film_list_provider):
        film_list_provider.error = FilmListFetchError("List not found")
        result = await draft_service.load_film_list(CHANNEL_ID, LIST_URL)
        assert not result.success
        assert result.error_code == "fetch_failed"
        assert result.message == "List not found"

    async def test_load_empty_list(self, draft_service, film_list_provider):
        film_list_provider.entries = []
        result = await draft_service.load_film_list(CHANNEL_ID, LIST_URL)
        assert result.error_code == "empty_list"

    async def test_add_selector_assigns_palette_colours(self, draft_service):
        first = await draft_service.add_selector(CHANNEL_ID, "Ana")
        second = await draft_service.add_selector(CHANNEL_ID, "Bruno")
        assert first.selector.color == "#673AB7"
        assert second.selector.color == "#FF9800"
        assert second.selector.contrast == "black"

    async def test_add_selector_rejections(self, draft_service):
        await draft_service.add_selector(CHANNEL_ID, "Ana")
        duplicate = await draft_service.add_selector(CHANNEL_ID, "ana")
        assert duplicate.error_code == "selector_exists"
        blank = await draft_service.add_selector(CHANNEL_ID, "  ")
        assert blank.error_code == "invalid_input"
        taken = await draft_service.add_selector(CHANNEL_ID, "Bruno", color="#673ab7")
        assert taken.error_code == "selector_exists"

    async def test_palette_runs_out(self, draft_service):
        for index in range(10):
            assert (await draft_service.add_selector(CHANNEL_ID, f"S{index}")).success
        result = await draft_service.add_selector(CHANNEL_ID, "One too many")
        assert result.error_code == "palette_full"

    async def test_remove_and_rename_selector(self, draft_service):
        await start_draft(draft_service, "Ana", "Bruno")
        renamed = await draft_service.rename_selector(CHANNEL_ID, "Ana", "Anabel")
        assert renamed.success
        assert renamed.selector.name == "Anabel"

        same = await draft_service.rename_selector(CHANNEL_ID, "Anabel", "anabel")
        assert same.success
        clash = await draft_service.rename_selector(CHANNEL_ID, "anabel", "Bruno")
        assert clash.error_code == "selector_exists"

        removed = await draft_service.remove_selector(CHANNEL_ID, "Bruno")
        assert removed.success
        missing = await draft_service.remove_selector(CHANNEL_ID, "Bruno")
        assert missing.error_code == "selector_not_found"

    async def test_make_selection(self, draft_service):
        await start_draft(draft_service, "Ana", "Bruno", "Carla")
        result = await draft_service.make_selection(CHANNEL_ID, 5)
        assert result.success
        assert result.selector_name == "Ana"
        assert result.entry_title == "Film 5"
        assert result.next_selector == "Ana"
        assert result.message == "Ana picked Film 5 (1995)"

        again = await draft_service.make_selection(CHANNEL_ID, 5)
        assert again.error_code == "entry_not_available"
        missing = await draft_service.make_selection(CHANNEL_ID, 99)
        assert missing.error_code == "entry_not_found"

    async def test_make_selection_without_draft(self, draft_service):
        await draft_service.load_film_list(CHANNEL_ID, LIST_URL)
        result = await draft_service.make_selection(CHANNEL_ID, 1)
        assert result.error_code == "invalid_state"

    async def test_full_draft(self, draft_service):
        await start_draft(draft_service, "Ana", "Bruno", "Carla")
        for position in range(1, 19):
            result = await draft_service.make_selection(CHANNEL_ID, position)
        assert result.draft_completed
        assert result.next_selector is None

        status = await draft_service.get_status(CHANNEL_ID)
        assert status.is_complete
        assert len(status.picks) == 18
        assert [s.pick_count for s in status.selectors] == [6, 6, 6]

        late = await draft_service.make_selection(CHANNEL_ID, 19)
        assert late.error_code == "invalid_state"

    async def test_undo_selection(self, draft_service):
        await start_draft(draft_service, "Ana", "Bruno", "Carla")
        nothing = await draft_service.undo_selection(CHANNEL_ID)
        assert nothing.error_code == "nothing_to_undo"

        for position in (1, 2, 3, 4):
            await draft_service.make_selection(CHANNEL_ID, position)
        result = await draft_service.undo_selection(CHANNEL_ID)
        assert result.success
        assert result.entry_title == "Film 4"
        assert result.selector_name == "Bruno"

    async def test_reset_draft(self, draft_service):
        await start_draft(draft_service, "Ana", "Bruno", "Carla")
        for position in (1, 2, 3, 4):
            await draft_service.make_selection(CHANNEL_ID, position)
        status = await draft_service.reset_draft(CHANNEL_ID)
        assert status.selections_made == 0
        assert status.picks == []
        assert status.active_selector.name == "Ana"
        assert len(status.selectors) == 3

    async def test_status_fields(self, draft_service):
        await start_draft(draft_service, "Ana", "Bruno", "Carla")
        for position in range(1, 11):
            await draft_service.make_selection(CHANNEL_ID, position)
        status = await draft_service.get_status(CHANNEL_ID)
        assert status.round_sizes == [3, 2, 1]
        assert status.round_number == 2
        assert status.rounds_count == 3
        assert status.active_selector.name == "Carla"
        assert status.selections_per_turn == 2
        assert status.picks_left_in_turn == 1
        assert status.picks[-1].round_number == 2

    async def test_session_restored_from_repository(self, draft_service, session_repository,
                                                    film_list_provider):
        await start_draft(draft_service, "Ana", "Bruno", "Carla")
        for position in range(1, 8):
            await draft_service.make_selection(CHANNEL_ID, position)
        before = await draft_service.get_status(CHANNEL_ID)

        fresh = DraftApplicationService(session_repository, film_list_provider)
        after = await fresh.get_status(CHANNEL_ID)
        assert after == before

    async def test_broken_snapshot_is_discarded(self, draft_service, session_repository):
        await start_draft(draft_service, "Ana")
        await draft_service.make_selection(CHANNEL_ID, 1)
        data = (await session_repository.get_session(CHANNEL_ID)).to_dict()
        data["entries"][0]["selector_color"] = "#000000"
        await session_repository.save_session(SessionSnapshot.from_dict(data))

        session = await draft_service.restore_session(CHANNEL_ID)
        assert isinstance(session, DraftSession)
        assert session.film_list.is_empty
        assert not session_repository.has_session(CHANNEL_ID)

    async def test_invalid_selector_colour_is_discarded(self, draft_service, session_repository):
        await session_repository.save_session(SessionSnapshot.from_dict({
            "channel_id": CHANNEL_ID,
            "selectors": [{"name": "Ana", "color": ""}],
        }))

        session = await draft_service.get_session(CHANNEL_ID)
        assert session.selectors == []
        assert not session_repository.has_session(CHANNEL_ID)

    async def test_text_pick_order_is_discarded(self, draft_service, session_repository,
                                                film_list_provider):
        await start_draft(draft_service, "Ana", "Bruno")
        await draft_service.make_selection(CHANNEL_ID, 1)
        await draft_service.make_selection(CHANNEL_ID, 2)
        data = (await session_repository.get_session(CHANNEL_ID)).to_dict()
        data["entries"][0]["global_order"] = "1"
        await session_repository.save_session(SessionSnapshot.from_dict(data))

        fresh = DraftApplicationService(session_repository, film_list_provider)
        session = await fresh.get_session(CHANNEL_ID)
        assert session.film_list.is_empty
        assert not session_repository.has_session(CHANNEL_ID)

    async def test_end_session(self, draft_service, session_repository):
        await start_draft(draft_service, "Ana")
        assert await draft_service.end_session(CHANNEL_ID)
        assert not session_repository.has_session(CHANNEL_ID)
        assert not await draft_service.end_session(CHANNEL_ID)

    async def test_cleanup_closes_provider(self, draft_service, film_list_provider):
        await start_draft(draft_service, "Ana")
        await draft_service.cleanup()
        assert film_list_provider.closed
