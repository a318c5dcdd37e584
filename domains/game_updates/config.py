"""Game updates domain configuration."""

import config as global_config

CHANNEL_ID = global_config.GAME_UPDATES_CHANNEL_ID  # #game-updates
CHANNEL_NAME = "#game-updates"

# Steam news API
STEAM_NEWS_URL = "https://api.steampowered.com/ISteamNews/GetNewsForApp/v2/"
NEWS_COUNT = 5
OFFICIAL_FEED_TYPE = 1  # feed_type for official developer announcements
REQUEST_TIMEOUT = 10  # seconds per Steam request

# Polling
CHECK_INTERVAL_MINUTES = 60

# Announced-id retention (raised from 50 to 100 when tracking several games)
DEFAULT_MAX_IDS = 50
MAX_TRACKED_IDS = 100

# Persisted files
TRACKING_FILE = global_config.DATA_DIR / "tracked_news_ids.txt"
TRACKED_APPS_FILE = global_config.DATA_DIR / "tracked_app_ids.json"

# Follow-up prompt timeout for !addTrackedGame / !removeTrackedGame
PROMPT_TIMEOUT = 30
