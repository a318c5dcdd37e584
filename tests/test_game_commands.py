"""Tests for the game tracking chat commands."""

import asyncio

import pytest
from unittest.mock import Mock, AsyncMock, patch

from domains.game_updates import commands
from domains.game_updates.commands import (
    TIMEOUT_REPLY,
    add_game,
    parse_game_input,
    remove_game,
    tracked_games,
)
from domains.game_updates.services import add_tracked_game, get_tracked_games, TrackedGame


def _last_reply(message):
    return message.reply.await_args_list[-1].args[0]


class TestParseGameInput:

    def test_name_and_id(self):
        assert parse_game_input(" Rematch , 2138720 ") == ("Rematch", "2138720")

    @pytest.mark.parametrize("text", ["Rematch", "Rematch,", ",2138720", ""])
    def test_invalid(self, text):
        assert parse_game_input(text) is None


class TestTrackedGames:

    @pytest.mark.asyncio
    async def test_lists_games(self, game_files, mock_discord_bot, make_message):
        add_tracked_game("Rematch", "2138720")
        add_tracked_game("Deep Rock Galactic", "548430")
        message = make_message("!trackedGames")

        await tracked_games(mock_discord_bot, message)

        assert _last_reply(message) == (
            "Here are the currently tracked games, sir:\n"
            "• Rematch (2138720)\n"
            "• Deep Rock Galactic (548430)"
        )

    @pytest.mark.asyncio
    async def test_no_games(self, game_files, mock_discord_bot, make_message):
        message = make_message("!trackedGames")

        await tracked_games(mock_discord_bot, message)

        assert _last_reply(message) == "There are currently no games being tracked, sir."


class TestAddGame:

    @pytest.mark.asyncio
    async def test_adds_game(self, game_files, mock_discord_bot, make_message):
        mock_discord_bot.wait_for.return_value = Mock(content="Rematch,2138720")
        message = make_message("!addTrackedGame")

        await add_game(mock_discord_bot, message)

        assert _last_reply(message) == 'Successfully added "Rematch" (2138720) to tracked games'
        assert get_tracked_games() == [TrackedGame(name="Rematch", app_id="2138720")]

    @pytest.mark.asyncio
    async def test_only_waits_for_author(self, game_files, mock_discord_bot, make_message):
        mock_discord_bot.wait_for.return_value = Mock(content="Rematch,2138720")
        message = make_message("!addTrackedGame", author_id=7)

        await add_game(mock_discord_bot, message)

        check = mock_discord_bot.wait_for.await_args.kwargs["check"]
        assert check(Mock(author=Mock(id=7), channel=Mock(id=99)))
        assert not check(Mock(author=Mock(id=8), channel=Mock(id=99)))

    @pytest.mark.asyncio
    async def test_duplicate_reported_verbatim(self, game_files, mock_discord_bot, make_message):
        add_tracked_game("Rematch", "2138720")
        mock_discord_bot.wait_for.return_value = Mock(content="Other,2138720")
        message = make_message("!addTrackedGame")

        await add_game(mock_discord_bot, message)

        assert _last_reply(message) == 'Game with app ID 2138720 already exists as "Rematch"'
        assert len(get_tracked_games()) == 1

    @pytest.mark.asyncio
    async def test_invalid_format(self, game_files, mock_discord_bot, make_message):
        mock_discord_bot.wait_for.return_value = Mock(content="just a name")
        message = make_message("!addTrackedGame")

        await add_game(mock_discord_bot, message)

        assert _last_reply(message) == "Invalid format. Please use: Game Name,AppID"
        assert get_tracked_games() == []

    @pytest.mark.asyncio
    async def test_timeout(self, game_files, mock_discord_bot, make_message):
        mock_discord_bot.wait_for.side_effect = asyncio.TimeoutError()
        message = make_message("!addTrackedGame")

        await add_game(mock_discord_bot, message)

        assert _last_reply(message) == TIMEOUT_REPLY


class TestRemoveGame:

    @pytest.mark.asyncio
    async def test_removes_game(self, game_files, mock_discord_bot, make_message):
        add_tracked_game("Rematch", "2138720")
        mock_discord_bot.wait_for.return_value = Mock(content=" 2138720 ")
        message = make_message("!removeTrackedGame")

        await remove_game(mock_discord_bot, message)

        assert _last_reply(message) == 'Successfully removed "Rematch" (2138720) from tracked games'
        assert get_tracked_games() == []

    @pytest.mark.asyncio
    async def test_unknown_game(self, game_files, mock_discord_bot, make_message):
        mock_discord_bot.wait_for.return_value = Mock(content="404")
        message = make_message("!removeTrackedGame")

        await remove_game(mock_discord_bot, message)

        assert _last_reply(message) == "No game found with app ID 404"

    @pytest.mark.asyncio
    async def test_timeout(self, game_files, mock_discord_bot, make_message):
        mock_discord_bot.wait_for.side_effect = asyncio.TimeoutError()
        message = make_message("!removeTrackedGame")

        await remove_game(mock_discord_bot, message)

        assert _last_reply(message) == TIMEOUT_REPLY


@pytest.mark.asyncio
async def test_game_updates_command_runs_manual_check(mock_discord_bot, make_message):
    message = make_message("!gameUpdates")

    with patch.object(commands, "check_game_news", AsyncMock()) as check:
        await commands.game_updates(mock_discord_bot, message)

    check.assert_awaited_once_with(mock_discord_bot, message)
