"""Tests for log sanitization."""

from utils.log_sanitizer import sanitize_log, redact_secret


def test_query_key_redacted():
    url = "https://api.steampowered.com/ISteamNews/GetNewsForApp/v2/?key=ABC123DEF456&appid=2138720&count=5"

    assert sanitize_log(url) == (
        "https://api.steampowered.com/ISteamNews/GetNewsForApp/v2/?key=REDACTED&appid=2138720&count=5"
    )


def test_known_secret_redacted_anywhere():
    assert redact_secret("failed with my-steam-key inside", "my-steam-key") == "failed with REDACTED inside"


def test_no_secret_configured():
    assert redact_secret("plain message", None) == "plain message"


def test_empty_text():
    assert sanitize_log("") == ""
    assert redact_secret("", "key") == ""
