"""Pytest configuration and fixtures."""

import pytest
from unittest.mock import Mock, AsyncMock, patch


@pytest.fixture
def game_files(tmp_path, monkeypatch):
    """Point the game updates stores at fresh temp files."""
    import domains.game_updates.config as config

    tracking_file = tmp_path / "data" / "tracked_news_ids.txt"
    apps_file = tmp_path / "data" / "tracked_app_ids.json"
    monkeypatch.setattr(config, "TRACKING_FILE", tracking_file)
    monkeypatch.setattr(config, "TRACKED_APPS_FILE", apps_file)
    monkeypatch.setattr(config, "CHANNEL_ID", 1234)

    return Mock(tracking_file=tracking_file, apps_file=apps_file)


@pytest.fixture
def mock_channel():
    """Create a mock Discord text channel."""
    return Mock(id=1234, send=AsyncMock())


@pytest.fixture
def mock_discord_bot(mock_channel):
    """Create a mock Discord bot."""
    bot = Mock()
    bot.get_channel = Mock(return_value=mock_channel)
    bot.fetch_channel = AsyncMock(return_value=mock_channel)
    bot.wait_for = AsyncMock()
    bot.user = None
    return bot


@pytest.fixture
def make_message():
    """Factory for mock Discord messages."""

    def _make(content: str = "", author_id: int = 42, is_bot: bool = False, voice=None):
        message = Mock()
        message.content = content
        message.author = Mock(id=author_id, bot=is_bot, voice=voice)
        message.channel = Mock(id=99, send=AsyncMock())
        message.reply = AsyncMock()
        return message

    return _make


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx client."""
    with patch('httpx.AsyncClient') as mock:
        client = AsyncMock()
        mock.return_value.__aenter__.return_value = client
        yield client


@pytest.fixture
def registered_domains():
    """Register the bot's domains in the global registry."""
    from bot import register_domains
    from registry import registry

    register_domains()
    return registry
