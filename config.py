"""Global configuration for Alfred."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Discord
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")
COMMAND_PREFIX = "!"

# Steam Web API
STEAM_API_KEY = os.getenv("STEAM_API_KEY")

# Channel that receives game update announcements (#game-updates)
GAME_UPDATES_CHANNEL_ID = int(os.getenv("GAME_UPDATES_CHANNEL_ID", "0") or 0)

# Persisted state (tracked games + announced news ids)
DATA_DIR = Path(os.getenv("ALFRED_DATA_DIR", "data"))

# Logging
LOG_DIR = Path(os.getenv("LOCALAPPDATA", ".")) / "alfred-bot" / "logs"
LOG_DIR.mkdir(parents=True, exist_ok=True)


def missing_settings() -> list[str]:
    """Names of required settings that are not configured."""
    required = {
        "DISCORD_TOKEN": DISCORD_TOKEN,
        "STEAM_API_KEY": STEAM_API_KEY,
        "GAME_UPDATES_CHANNEL_ID": GAME_UPDATES_CHANNEL_ID,
    }
    return [name for name, value in required.items() if not value]
