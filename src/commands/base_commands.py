import logging
from typing import Optional

import discord
from discord.ext import commands

from src.utils.types import CommandContext
from src.utils.constants import ERROR_COLOR, SUCCESS_COLOR

logger = logging.getLogger(__name__)

"""Base command class providing common functionality for all command types."""

class BaseCommands(commands.Cog):
    """Base class for all command categories providing common functionality."""

    async def send_response(
        self,
        ctx_or_interaction: CommandContext,
        message: Optional[str] = None,
        *,
        embed: Optional[discord.Embed] = None,
        ephemeral: bool = False
    ) -> None:
        """Send response to command

        Args:
            ctx_or_interaction: Command context or interaction
            message: Optional text message
            embed: Optional embed message
            ephemeral: Whether the response should be ephemeral (only visible to command user)

        Raises:
            discord.Forbidden: If bot lacks permission to send message
            discord.HTTPException: If sending message fails
        """
        try:
            # Plain messages are sent as an embed description
            if not embed:
                embed = discord.Embed(description=message or "No message provided")
                message = None
            elif not embed.description and message:
                embed.description = message
                message = None

            if isinstance(ctx_or_interaction, discord.Interaction):
                if ctx_or_interaction.response.is_done():
                    await ctx_or_interaction.followup.send(
                        content=message,
                        embed=embed,
                        ephemeral=ephemeral
                    )
                else:
                    await ctx_or_interaction.response.send_message(
                        content=message,
                        embed=embed,
                        ephemeral=ephemeral
                    )
            else:
                await ctx_or_interaction.send(
                    content=message,
                    embed=embed
                )
        except Exception as e:
            logger.error(f"Error sending response: {e}")
            raise

    async def send_error(
        self,
        ctx_or_interaction: CommandContext,
        error_message: str,
        *,
        ephemeral: bool = True
    ) -> None:
        """Send error message with standard formatting"""
        embed = discord.Embed(
            title="❌ Error",
            description=error_message,
            color=ERROR_COLOR
        )
        await self.send_response(
            ctx_or_interaction,
            embed=embed,
            ephemeral=ephemeral
        )

    async def send_success(
        self,
        ctx_or_interaction: CommandContext,
        message: str,
        *,
        ephemeral: bool = False
    ) -> None:
        """Send success message with standard formatting"""
        embed = discord.Embed(
            title="✅ Done",
            description=message,
            color=SUCCESS_COLOR
        )
        await self.send_response(
            ctx_or_interaction,
            embed=embed,
            ephemeral=ephemeral
        )

    def get_user_name(self, ctx_or_interaction: CommandContext) -> str:
        """Get username from context or interaction

        Returns:
            str: Username (server display name if in a guild, otherwise Discord username)
        """
        if isinstance(ctx_or_interaction, discord.Interaction):
            if ctx_or_interaction.guild:
                member = ctx_or_interaction.guild.get_member(ctx_or_interaction.user.id)
                if member:
                    return member.display_name
            return ctx_or_interaction.user.name
        return ctx_or_interaction.author.display_name

    def get_channel_id(self, ctx_or_interaction: CommandContext) -> int:
        """Get channel ID from context or interaction"""
        if isinstance(ctx_or_interaction, discord.Interaction):
            return ctx_or_interaction.channel_id
        return ctx_or_interaction.channel.id
