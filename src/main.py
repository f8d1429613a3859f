import asyncio
import logging
import os
import sys
from typing import Dict, NoReturn

import discord

from src.bot import DiscordBot
from src.film_draft.infrastructure.film_list_adapter import DEFAULT_BACKEND_URL
from src.utils.constants import BASE_RETRY_DELAY, MAX_RETRY_ATTEMPTS, MAX_RETRY_DELAY

logger = logging.getLogger(__name__)

REQUIRED_CONFIG = ("DISCORD_TOKEN",)


def setup_logging() -> None:
    """Configure logging settings"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler("bot.log", encoding="utf-8")
        ]
    )


def get_config() -> Dict[str, str]:
    """Get configuration from environment variables"""
    return {
        "DISCORD_TOKEN": os.getenv("DISCORD_TOKEN", ""),
        "FILM_LIST_BACKEND_URL": os.getenv("FILM_LIST_BACKEND_URL", DEFAULT_BACKEND_URL),
        "DRAFT_DATA_DIR": os.getenv("DRAFT_DATA_DIR", "data"),
    }


def validate_config(config: Dict[str, str]) -> None:
    """Raise ValueError naming every required variable that is unset"""
    missing_vars = [key for key in REQUIRED_CONFIG if not config.get(key)]
    if missing_vars:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing_vars)}\n"
            "Please ensure all required environment variables are set."
        )


def retry_delay(attempt: int) -> int:
    """Exponential backoff in seconds for the given 1-based attempt"""
    return min(BASE_RETRY_DELAY * (2 ** (attempt - 1)), MAX_RETRY_DELAY)


async def start_bot(config: Dict[str, str], attempt: int = 1) -> NoReturn:
    """Start the Discord bot with retry logic

    Args:
        config: Application configuration
        attempt: Current attempt number

    Raises:
        SystemExit: If bot fails to start after maximum retries
    """
    try:
        logger.info("Creating bot instance...")
        bot = DiscordBot(config)

        async with bot:
            await bot.start(config["DISCORD_TOKEN"])
    except discord.LoginFailure as e:
        logger.error(f"Failed to login: {e}", exc_info=True)
        raise SystemExit("Discord login failed") from e
    except Exception as e:
        if attempt >= MAX_RETRY_ATTEMPTS:
            logger.error(
                f"Bot failed to start after {MAX_RETRY_ATTEMPTS} attempts. "
                f"Last error: {e}",
                exc_info=True
            )
            raise SystemExit(
                f"Bot failed to start after {MAX_RETRY_ATTEMPTS} attempts.\n"
                f"Last error: {str(e)}"
            ) from e

        delay = retry_delay(attempt)
        logger.warning(
            f"Bot crashed (attempt {attempt}/{MAX_RETRY_ATTEMPTS}). "
            f"Retrying in {delay} seconds..."
        )

        await asyncio.sleep(delay)
        await start_bot(config, attempt + 1)


async def main() -> NoReturn:
    """Main entry point

    Raises:
        SystemExit: If initialization fails or bot crashes
    """
    try:
        logger.info("Loading configuration from environment...")
        config = get_config()
        validate_config(config)

        logger.info("Starting bot with retry logic...")
        await start_bot(config)

    except SystemExit as e:
        logger.error(f"Bot terminated: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        sys.exit(1)


def run() -> None:
    """Console entry point"""
    setup_logging()
    logger.info("Starting film draft bot...")

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")


if __name__ == "__main__":
    run()
