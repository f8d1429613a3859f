import logging
from typing import Dict, List, Optional, cast

import discord
from discord import app_commands
from discord.ext import commands

from src.commands.film_draft import FilmDraftCommands
from src.film_draft.infrastructure.container import (
    DraftContainer,
    cleanup_container,
    initialize_container
)
from src.utils.constants import COMMAND_PREFIXES, ERROR_COLOR
from src.utils.types import CommandContext
from src.utils.version import VersionInfo, get_git_info

logger = logging.getLogger(__name__)


class DiscordBot(commands.Bot):
    """Main bot class handling commands and events"""

    def __init__(self, config: Dict[str, str]) -> None:
        """Initialize bot

        Args:
            config: Configuration dictionary read from the environment
        """
        intents = discord.Intents.default()
        intents.message_content = True  # Required for prefix commands
        logger.info("Initialized bot intents: %s", intents.value)

        super().__init__(
            command_prefix=self._get_prefix,
            intents=intents,
            help_command=None  # FilmDraftCommands provides help
        )

        self._config = config
        self._container: Optional[DraftContainer] = None
        self.version_info: VersionInfo = get_git_info()
        logger.info("Bot initialization completed")

    @property
    def container(self) -> DraftContainer:
        """Get the dependency container

        Raises:
            ValueError: If setup_hook has not run yet
        """
        if not self._container:
            raise ValueError("Container not initialized")
        return self._container

    async def setup_hook(self) -> None:
        """Wire the draft services and register commands"""
        try:
            logger.info("Starting setup_hook...")
            self._container = initialize_container(self._config)

            logger.info("Registering commands...")
            await self._register_commands()

            logger.info("Syncing slash commands...")
            await self.tree.sync()
            logger.info("Bot setup completed successfully")
        except Exception as e:
            logger.error(f"Error in setup_hook: {str(e)}", exc_info=True)
            await self._cleanup()
            raise

    async def _register_commands(self) -> None:
        cog = FilmDraftCommands(self, self.container.get_draft_service())
        await self.add_cog(cog)
        if not self.get_cog(FilmDraftCommands.__name__):
            raise ValueError(f"Failed to add cog: {FilmDraftCommands.__name__}")
        logger.info(f"Successfully registered {FilmDraftCommands.__name__}")

    async def on_ready(self) -> None:
        """Handle bot ready event"""
        try:
            user = cast(discord.ClientUser, self.user)
            logger.info(
                f"Logged in as {user.name} "
                f"(Version: {self.version_info.version}, "
                f"Commit: {self.version_info.commit}, "
                f"Branch: {self.version_info.branch})"
            )
            await self.change_presence(
                activity=discord.Game(name=f"!!help | /draft_status | {self.version_info.commit}")
            )
        except Exception as e:
            logger.error(f"Error in on_ready: {e}", exc_info=True)

    async def on_command_error(
        self,
        ctx: commands.Context,
        error: commands.CommandError
    ) -> None:
        """Handle command errors

        Args:
            ctx: Command context
            error: Error that occurred
        """
        if isinstance(error, commands.CommandNotFound):
            return
        # command_handler has already told the user
        if isinstance(error, commands.CommandInvokeError):
            logger.error(f"Command error: {error}", exc_info=error)
            return

        error_message = self._get_error_message(error)
        await self._send_error_message(cast(CommandContext, ctx), error_message)
        logger.warning(f"Command error: {error}")

    async def on_app_command_error(
        self,
        interaction: discord.Interaction,
        error: app_commands.AppCommandError
    ) -> None:
        """Handle application command errors"""
        error_message = self._get_error_message(error)
        await self._send_error_message(interaction, error_message)
        logger.error(f"Slash command error: {error}", exc_info=error)

    def _get_error_message(self, error: Exception) -> str:
        """Get user-friendly error message"""
        if isinstance(error, commands.MissingPermissions):
            return "You are not allowed to run this command"
        if isinstance(error, commands.BotMissingPermissions):
            return "The bot is missing a permission it needs"
        if isinstance(error, commands.MissingRequiredArgument):
            return f"Missing argument: {error.param.name}"
        if isinstance(error, commands.BadArgument):
            return "One of the arguments is not valid"
        if isinstance(error, commands.CommandOnCooldown):
            return f"Slow down, try again in {error.retry_after:.1f}s"
        if isinstance(error, ValueError):
            return str(error)

        return "Something went wrong while running that command"

    async def _send_error_message(
        self,
        ctx_or_interaction: CommandContext,
        error_message: str
    ) -> None:
        embed = discord.Embed(
            title="❌ Error",
            description=error_message,
            color=ERROR_COLOR
        )

        try:
            if isinstance(ctx_or_interaction, discord.Interaction):
                if ctx_or_interaction.response.is_done():
                    await ctx_or_interaction.followup.send(embed=embed, ephemeral=True)
                else:
                    await ctx_or_interaction.response.send_message(embed=embed, ephemeral=True)
            else:
                await ctx_or_interaction.send(embed=embed)
        except Exception as e:
            logger.error(f"Failed to send error message: {e}")

    async def _cleanup(self) -> None:
        """Release the container's resources"""
        if self._container is None:
            return
        try:
            await cleanup_container()
        except Exception as e:
            logger.error(f"Container cleanup error: {e}", exc_info=True)
        finally:
            self._container = None

    async def close(self) -> None:
        """Close the bot connection and clean up resources"""
        try:
            logger.info("Bot shutting down, cleaning up resources...")
            await self._cleanup()
        except Exception as e:
            logger.error(f"Error during cleanup: {str(e)}", exc_info=True)
        finally:
            await super().close()
            logger.info("Bot shutdown complete")

    async def _get_prefix(self, bot: commands.Bot, message: discord.Message) -> List[str]:
        """Get command prefixes for the bot"""
        return COMMAND_PREFIXES
