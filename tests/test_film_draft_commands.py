from unittest.mock import MagicMock

import pytest

from src.commands.film_draft import FilmDraftCommands

LIST_URL = "https://letterboxd.com/someone/list/favourites/"


@pytest.fixture
def cog(draft_service):
    return FilmDraftCommands(MagicMock(), draft_service)


def sent_embed(mock_send):
    """Embed passed to the latest send call"""
    return mock_send.call_args.kwargs["embed"]


@pytest.mark.asyncio
class TestFilmDraftCommands:
    """Prefix and slash commands"""

    async def test_load_list(self, cog, mock_context):
        await cog.load_list_chat.callback(cog, mock_context, LIST_URL)
        assert mock_context.send.call_count == 2
        first = mock_context.send.call_args_list[0].kwargs["embed"]
        assert first.description == "Loaded 23 films"

    async def test_load_bad_list(self, cog, mock_context):
        await cog.load_list_chat.callback(cog, mock_context, "https://example.com")
        assert sent_embed(mock_context.send).title == "❌ Error"

    async def test_join_uses_display_name(self, cog, mock_context, draft_service):
        await cog.join_chat.callback(cog, mock_context)
        assert sent_embed(mock_context.send).description == "Test User joined the draft"

        session = await draft_service.get_session(mock_context.channel.id)
        assert session.find_selector_by_name("Test User") is not None

    async def test_pick_and_undo(self, cog, mock_context):
        await cog.load_list_chat.callback(cog, mock_context, LIST_URL)
        for name in ("Ana", "Bruno", "Carla"):
            await cog.join_chat.callback(cog, mock_context, name=name)

        await cog.pick_chat.callback(cog, mock_context, 7)
        embed = sent_embed(mock_context.send)
        assert embed.title == "✅ Pick made"
        assert "**Ana** picked **Film 7**" in embed.description

        await cog.pick_chat.callback(cog, mock_context, 7)
        assert sent_embed(mock_context.send).title == "❌ Error"

        await cog.undo_chat.callback(cog, mock_context)
        assert mock_context.send.call_args_list[-2].kwargs["embed"].description == "Undid Film 7 (1997)"
        assert sent_embed(mock_context.send).title == "🎬 Ana's turn"

    async def test_status_and_picks(self, cog, mock_context):
        await cog.status_chat.callback(cog, mock_context)
        assert sent_embed(mock_context.send).title == "🎬 Film Draft"

        await cog.picks_chat.callback(cog, mock_context)
        assert sent_embed(mock_context.send).description == "No picks yet"

    async def test_rename_leave_and_end(self, cog, mock_context):
        await cog.join_chat.callback(cog, mock_context, name="Ana")
        await cog.rename_chat.callback(cog, mock_context, "Ana", new_name="Anabel")
        assert sent_embed(mock_context.send).description == "Ana is now Anabel"

        await cog.leave_chat.callback(cog, mock_context, name="Anabel")
        assert sent_embed(mock_context.send).description == "Anabel left the draft"

        await cog.end_chat.callback(cog, mock_context)
        assert sent_embed(mock_context.send).description == "Draft ended"
        await cog.end_chat.callback(cog, mock_context)
        assert sent_embed(mock_context.send).title == "❌ Error"

    async def test_reset(self, cog, mock_context):
        await cog.load_list_chat.callback(cog, mock_context, LIST_URL)
        await cog.join_chat.callback(cog, mock_context, name="Ana")
        await cog.pick_chat.callback(cog, mock_context, 1)
        await cog.reset_chat.callback(cog, mock_context)
        assert sent_embed(mock_context.send).fields[0].value == "—"

    async def test_slash_commands(self, cog, mock_interaction):
        await cog.join_slash.callback(cog, mock_interaction)
        embed = mock_interaction.response.send_message.call_args.kwargs["embed"]
        assert embed.description == "Test User joined the draft"

        await cog.pick_slash.callback(cog, mock_interaction, 1)
        embed = mock_interaction.response.send_message.call_args.kwargs["embed"]
        assert embed.title == "❌ Error"
        assert mock_interaction.response.send_message.call_args.kwargs["ephemeral"]

        await cog.status_slash.callback(cog, mock_interaction)
        assert mock_interaction.response.send_message.call_args.kwargs["ephemeral"]

    async def test_help(self, cog, mock_context):
        await cog.help_chat.callback(cog, mock_context)
        assert "!!pick" in sent_embed(mock_context.send).description

    async def test_unexpected_error_is_reported(self, cog, mock_context, draft_service):
        draft_service.get_status = MagicMock(side_effect=RuntimeError("boom"))
        with pytest.raises(RuntimeError):
            await cog.status_chat.callback(cog, mock_context)
        mock_context.send.assert_called_with("Something went wrong while running that command")
