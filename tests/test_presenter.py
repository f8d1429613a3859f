import pytest

from src.film_draft.application.dto import DraftStatusDTO, PickDTO, SelectionResult, SelectorDTO
from src.film_draft.presentation.presenters.draft_presenter import (
    COMPLETE_COLOR,
    IDLE_COLOR,
    DraftPresenter,
    parse_color
)


def make_status(**overrides):
    ana = SelectorDTO(name="Ana", color="#673AB7", contrast="white", picks=["Stalker (1979)"], is_active=True)
    bruno = SelectorDTO(name="Bruno", color="#FF9800", contrast="black")
    values = dict(
        channel_id=1,
        source_url="https://letterboxd.com/someone/list/favourites/",
        entry_count=23,
        available_entries=23,
        has_draft=True,
        available_selections=18,
        remaining_selections=5,
        round_sizes=[3, 2, 1],
        selections_made=1,
        round_number=1,
        rounds_count=3,
        round_turn_number=1,
        global_turn_number=1,
        turn_order=1,
        selections_per_turn=3,
        selectors=[ana, bruno],
        active_selector=ana,
        picks=[],
        is_complete=False
    )
    values.update(overrides)
    return DraftStatusDTO(**values)


@pytest.fixture
def presenter():
    return DraftPresenter()


class TestDraftPresenter:
    """Status embeds"""

    def test_parse_color(self):
        assert parse_color("#673AB7") == 0x673AB7
        assert parse_color("not a colour") == IDLE_COLOR

    def test_turn_embed(self, presenter):
        embed = presenter.create_status_embed(make_status())
        assert embed.title == "🎬 Ana's turn"
        assert embed.color.value == 0x673AB7
        assert "Round **1/3**" in embed.description
        assert "2 pick(s) left this turn" in embed.description
        assert embed.fields[0].name == "▶ Ana (1)"
        assert embed.fields[0].value == "1. Stalker (1979)"
        assert embed.fields[1].value == "—"
        assert embed.footer.text == "https://letterboxd.com/someone/list/favourites/"

    def test_complete_embed(self, presenter):
        embed = presenter.create_status_embed(make_status(is_complete=True, active_selector=None))
        assert embed.title == "🏁 Draft complete"
        assert embed.color.value == COMPLETE_COLOR

    def test_no_list_embed(self, presenter):
        embed = presenter.create_status_embed(make_status(entry_count=0, has_draft=False))
        assert "No film list loaded" in embed.description

    def test_waiting_embeds(self, presenter):
        lonely = presenter.create_status_embed(make_status(has_draft=False, selectors=[]))
        assert "join" in lonely.description

        crowded = presenter.create_status_embed(make_status(has_draft=False, available_entries=4))
        assert "too few" in crowded.description
        assert "Ana, Bruno" in crowded.description

    def test_selection_embed(self, presenter):
        embed = presenter.create_selection_embed(SelectionResult(
            success=True, entry_title="Stalker", selector_name="Ana", next_selector="Bruno"
        ))
        assert "**Ana** picked **Stalker**" in embed.description
        assert embed.fields[0].value == "Bruno"

        done = presenter.create_selection_embed(SelectionResult(
            success=True, entry_title="Playtime", selector_name="Ana", draft_completed=True
        ))
        assert done.fields[0].name == "Draft"

    def test_picks_embed(self, presenter):
        picks = [
            PickDTO(global_order=order, title=f"Film {order}", year="2000", position=order,
                    selector_name="Ana", selector_color="#673AB7", round_number=1)
            for order in range(1, 13)
        ]
        embed = presenter.create_picks_embed(picks)
        lines = embed.description.split("\n")
        assert len(lines) == 10
        assert "Film 12" in lines[0]

        assert presenter.create_picks_embed([]).description == "No picks yet"

    def test_picks_embed_without_year(self, presenter):
        picks = [
            PickDTO(global_order=1, title="Untitled", year="", position=4,
                    selector_name="Ana", selector_color="#673AB7", round_number=1),
            PickDTO(global_order=2, title="Stalker", year="1979", position=2,
                    selector_name="Bruno", selector_color="#FF9800", round_number=1)
        ]
        lines = presenter.create_picks_embed(picks).description.split("\n")
        assert lines[0].endswith("Stalker (1979)")
        assert lines[1].endswith("Untitled")
        assert "()" not in lines[1]
