from pathlib import Path

import pytest

from market_mood.config import DEFAULT_QUERY, MoodConfig

_VARS = [
    "MARKET_MOOD_QUERY",
    "MARKET_MOOD_LANGUAGE",
    "MARKET_MOOD_REGION",
    "MARKET_MOOD_PROVIDER",
    "RSS2JSON_API_KEY",
    "MARKET_MOOD_REQUEST_TIMEOUT",
    "MARKET_MOOD_SEED",
    "MARKET_MOOD_PREFERENCES_PATH",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = MoodConfig.from_env()
    assert config.query == DEFAULT_QUERY
    assert (config.language, config.region) == ("en", "IN")
    assert config.provider == "rss2json"
    assert config.request_timeout is None
    assert config.seed is None


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MARKET_MOOD_QUERY", "Sensex")
    monkeypatch.setenv("MARKET_MOOD_PROVIDER", " Google_RSS ")
    monkeypatch.setenv("MARKET_MOOD_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("MARKET_MOOD_SEED", "9")
    monkeypatch.setenv("MARKET_MOOD_PREFERENCES_PATH", str(tmp_path / "prefs.json"))
    config = MoodConfig.from_env()
    assert config.query == "Sensex"
    assert config.provider == "google_rss"
    assert config.request_timeout == 2.5
    assert config.seed == 9
    assert config.preferences_path == Path(tmp_path / "prefs.json")


def test_invalid_seed_names_variable(monkeypatch):
    monkeypatch.setenv("MARKET_MOOD_SEED", "lucky")
    with pytest.raises(ValueError, match="MARKET_MOOD_SEED"):
        MoodConfig.from_env()
