"""Constants used throughout the application"""

import discord

# Colors for embeds
SUCCESS_COLOR = discord.Color.green()
ERROR_COLOR = discord.Color.red()
INFO_COLOR = discord.Color.blue()

# Prefix commands answer to any of these
COMMAND_PREFIXES = ["!!", "fd "]

# Bot restart policy
MAX_RETRY_ATTEMPTS = 3
BASE_RETRY_DELAY = 5  # seconds
MAX_RETRY_DELAY = 300  # seconds
