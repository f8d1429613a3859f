"""Utility decorators for command handling"""

import functools
import logging
from typing import Any, Callable, Union, cast

import discord
from discord.ext import commands

logger = logging.getLogger(__name__)

CommandFunc = Callable[..., Any]

GENERIC_ERROR_MESSAGE = "Something went wrong while running that command"


def command_handler() -> Callable[[CommandFunc], CommandFunc]:
    """Decorator for handling both slash and prefix commands

    Errors are logged, reported to the user and re-raised so the bot's
    error hooks still see them.

    Returns:
        Callable: Decorated command handler
    """
    def decorator(func: CommandFunc) -> CommandFunc:
        @functools.wraps(func)
        async def wrapper(
            self,
            ctx_or_interaction: Union[commands.Context, discord.Interaction],
            *args: Any,
            **kwargs: Any
        ) -> Any:
            try:
                return await func(self, ctx_or_interaction, *args, **kwargs)
            except Exception as e:
                logger.error(f"Error in {func.__name__}: {e}", exc_info=True)
                if isinstance(ctx_or_interaction, discord.Interaction):
                    if ctx_or_interaction.response.is_done():
                        await ctx_or_interaction.followup.send(GENERIC_ERROR_MESSAGE, ephemeral=True)
                    else:
                        await ctx_or_interaction.response.send_message(GENERIC_ERROR_MESSAGE, ephemeral=True)
                else:
                    await ctx_or_interaction.send(GENERIC_ERROR_MESSAGE)
                raise
        return cast(CommandFunc, wrapper)
    return decorator
