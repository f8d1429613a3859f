"""
Film Draft Commands

Discord front end for the film draft. Commands only say *which* film; the
draft decides whose pick it is.
"""

import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from src.commands.base_commands import BaseCommands
from src.film_draft.application.draft_service import DraftApplicationService
from src.film_draft.presentation.presenters.draft_presenter import DraftPresenter
from src.utils.constants import INFO_COLOR
from src.utils.decorators import command_handler
from src.utils.types import CommandContext

logger = logging.getLogger(__name__)

HELP_DESCRIPTION = """
**Film draft**:
• `!!list <letterboxd url>` - load a list as the film pool
• `!!join [name]` / `!!leave [name]` - take part or drop out
• `!!rename <old> <new>` - change a selector's name
• `!!pick <position>` or `/draft_pick` - pick a film by its list position
• `!!undo` - take back the last pick
• `!!status` or `/draft_status` - whose turn it is
• `!!picks` - recent picks
• `!!resetdraft` - clear every pick
• `!!enddraft` - end the draft in this channel

Changing the list or the selectors restarts the draft.
"""


class FilmDraftCommands(BaseCommands):
    """Snake draft over a Letterboxd list, one draft per channel"""

    def __init__(self, bot: commands.Bot, draft_service: DraftApplicationService,
                 presenter: Optional[DraftPresenter] = None) -> None:
        super().__init__()
        self.bot = bot
        self.draft_service = draft_service
        self.presenter = presenter or DraftPresenter()

    async def cog_load(self) -> None:
        logger.info("Film draft commands loaded")

    async def cog_unload(self) -> None:
        try:
            await self.draft_service.cleanup()
        except Exception as e:
            logger.error(f"Error cleaning up film draft service: {e}")

    async def _send_status(self, ctx_or_interaction: CommandContext, *, ephemeral: bool = False) -> None:
        status = await self.draft_service.get_status(self.get_channel_id(ctx_or_interaction))
        await self.send_response(
            ctx_or_interaction,
            embed=self.presenter.create_status_embed(status),
            ephemeral=ephemeral
        )

    # ===================
    # Setup Commands
    # ===================

    @commands.command(name="filmlist", aliases=["list"], help="Load a Letterboxd list as the film pool")
    @command_handler()
    async def load_list_chat(self, ctx: commands.Context, url: str) -> None:
        result = await self.draft_service.load_film_list(ctx.channel.id, url)
        if not result.success:
            await self.send_error(ctx, result.message or "The list could not be loaded")
            return
        await self.send_success(ctx, result.message)
        await self._send_status(ctx)

    @commands.command(name="join", help="Join the draft in this channel")
    @command_handler()
    async def join_chat(self, ctx: commands.Context, *, name: Optional[str] = None) -> None:
        result = await self.draft_service.add_selector(ctx.channel.id, name or self.get_user_name(ctx))
        if not result.success:
            await self.send_error(ctx, result.message)
            return
        await self.send_success(ctx, result.message)

    @app_commands.command(name="draft_join", description="Join the draft in this channel")
    async def join_slash(self, interaction: discord.Interaction) -> None:
        try:
            result = await self.draft_service.add_selector(
                interaction.channel_id, self.get_user_name(interaction)
            )
            if not result.success:
                await self.send_error(interaction, result.message)
                return
            await self.send_success(interaction, result.message)
        except Exception as e:
            logger.error(f"Draft join failed: {e}")
            await self.send_error(interaction, "Something went wrong while joining")

    @commands.command(name="leave", help="Leave the draft (clears every pick)")
    @command_handler()
    async def leave_chat(self, ctx: commands.Context, *, name: Optional[str] = None) -> None:
        result = await self.draft_service.remove_selector(ctx.channel.id, name or self.get_user_name(ctx))
        if not result.success:
            await self.send_error(ctx, result.message)
            return
        await self.send_success(ctx, result.message)

    @commands.command(name="rename", help="Rename a selector: rename <old> <new>")
    @command_handler()
    async def rename_chat(self, ctx: commands.Context, old_name: str, *, new_name: str) -> None:
        result = await self.draft_service.rename_selector(ctx.channel.id, old_name, new_name)
        if not result.success:
            await self.send_error(ctx, result.message)
            return
        await self.send_success(ctx, result.message)

    # ===================
    # Draft Commands
    # ===================

    @commands.command(name="pick", help="Pick the film at a list position")
    @command_handler()
    async def pick_chat(self, ctx: commands.Context, position: int) -> None:
        result = await self.draft_service.make_selection(ctx.channel.id, position)
        if not result.success:
            await self.send_error(ctx, result.message)
            return
        await self.send_response(ctx, embed=self.presenter.create_selection_embed(result))

    @app_commands.command(name="draft_pick", description="Pick the film at a list position")
    @app_commands.describe(position="Position of the film on the list")
    async def pick_slash(self, interaction: discord.Interaction, position: int) -> None:
        try:
            result = await self.draft_service.make_selection(interaction.channel_id, position)
            if not result.success:
                await self.send_error(interaction, result.message)
                return
            await self.send_response(interaction, embed=self.presenter.create_selection_embed(result))
        except Exception as e:
            logger.error(f"Draft pick failed: {e}")
            await self.send_error(interaction, "Something went wrong while picking")

    @commands.command(name="undo", help="Undo the last pick")
    @command_handler()
    async def undo_chat(self, ctx: commands.Context) -> None:
        result = await self.draft_service.undo_selection(ctx.channel.id)
        if not result.success:
            await self.send_error(ctx, result.message)
            return
        await self.send_success(ctx, result.message)
        await self._send_status(ctx)

    @commands.command(name="resetdraft", help="Clear every pick, keeping films and selectors")
    @command_handler()
    async def reset_chat(self, ctx: commands.Context) -> None:
        status = await self.draft_service.reset_draft(ctx.channel.id)
        await self.send_response(ctx, embed=self.presenter.create_status_embed(status))

    @commands.command(name="status", aliases=["turn"], help="Show whose turn it is")
    @command_handler()
    async def status_chat(self, ctx: commands.Context) -> None:
        await self._send_status(ctx)

    @app_commands.command(name="draft_status", description="Show whose turn it is")
    async def status_slash(self, interaction: discord.Interaction) -> None:
        try:
            await self._send_status(interaction, ephemeral=True)
        except Exception as e:
            logger.error(f"Draft status failed: {e}")
            await self.send_error(interaction, "Something went wrong while reading the draft")

    @commands.command(name="picks", help="List the most recent picks")
    @command_handler()
    async def picks_chat(self, ctx: commands.Context) -> None:
        status = await self.draft_service.get_status(ctx.channel.id)
        await self.send_response(ctx, embed=self.presenter.create_picks_embed(status.picks))

    @commands.command(name="enddraft", help="End the draft in this channel")
    @command_handler()
    async def end_chat(self, ctx: commands.Context) -> None:
        ended = await self.draft_service.end_session(ctx.channel.id)
        if ended:
            await self.send_success(ctx, "Draft ended")
        else:
            await self.send_error(ctx, "No draft is running in this channel")

    @commands.command(name="help", help="Show the film draft commands")
    async def help_chat(self, ctx: commands.Context) -> None:
        embed = discord.Embed(title="Help", description=HELP_DESCRIPTION, color=INFO_COLOR)
        await self.send_response(ctx, embed=embed)
