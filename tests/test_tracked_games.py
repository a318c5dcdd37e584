"""Tests for the tracked games registry."""

import json

import pytest

from domains.errors import StoreIOError, DuplicateGameError, GameNotFoundError
from domains.game_updates.services.tracked_games import (
    TrackedGame,
    get_tracked_games,
    add_tracked_game,
    remove_tracked_game,
)


def test_empty_registry_creates_file(game_files):
    assert get_tracked_games() == []
    assert json.loads(game_files.apps_file.read_text(encoding="utf-8")) == []


def test_add_game_persists_pretty_json(game_files):
    message = add_tracked_game("Rematch", "2138720")

    assert message == 'Successfully added "Rematch" (2138720) to tracked games'
    content = game_files.apps_file.read_text(encoding="utf-8")
    assert json.loads(content) == [{"name": "Rematch", "app_id": "2138720"}]
    assert "\n  " in content  # indented


def test_add_preserves_insertion_order(game_files):
    add_tracked_game("Rematch", "2138720")
    add_tracked_game("Deep Rock Galactic", "548430")

    assert get_tracked_games() == [
        TrackedGame(name="Rematch", app_id="2138720"),
        TrackedGame(name="Deep Rock Galactic", app_id="548430"),
    ]


def test_duplicate_app_id_rejected_and_registry_unchanged(game_files):
    add_tracked_game("Rematch", "2138720")
    before = game_files.apps_file.read_text(encoding="utf-8")

    with pytest.raises(DuplicateGameError) as exc_info:
        add_tracked_game("Rematch Again", "2138720")

    assert 'already exists as "Rematch"' in str(exc_info.value)
    assert game_files.apps_file.read_text(encoding="utf-8") == before


def test_same_name_different_app_id_allowed(game_files):
    add_tracked_game("Rematch", "1")
    add_tracked_game("Rematch", "2")

    assert len(get_tracked_games()) == 2


def test_remove_game(game_files):
    add_tracked_game("Rematch", "2138720")
    add_tracked_game("Deep Rock Galactic", "548430")

    message = remove_tracked_game("2138720")

    assert message == 'Successfully removed "Rematch" (2138720) from tracked games'
    assert get_tracked_games() == [TrackedGame(name="Deep Rock Galactic", app_id="548430")]


def test_remove_unknown_game(game_files):
    add_tracked_game("Rematch", "2138720")

    with pytest.raises(GameNotFoundError) as exc_info:
        remove_tracked_game("999")

    assert str(exc_info.value) == "No game found with app ID 999"
    assert len(get_tracked_games()) == 1


def test_corrupt_file_raises(game_files):
    game_files.apps_file.parent.mkdir(parents=True)
    game_files.apps_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(StoreIOError):
        get_tracked_games()


def test_malformed_entries_skipped(game_files):
    game_files.apps_file.parent.mkdir(parents=True)
    game_files.apps_file.write_text(
        json.dumps([{"name": "Rematch", "app_id": 2138720}, {"name": "No id"}, "junk"]),
        encoding="utf-8"
    )

    assert get_tracked_games() == [TrackedGame(name="Rematch", app_id="2138720")]
