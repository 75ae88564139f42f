from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_QUERY = "Indian stock market"
DEFAULT_PREFERENCES_PATH = Path.home() / ".market_mood" / "preferences.json"


@dataclass(slots=True)
class MoodConfig:
    """Runtime configuration for the market mood pipeline."""

    query: str = DEFAULT_QUERY
    language: str = "en"
    region: str = "IN"
    provider: str = "rss2json"
    rss2json_api_key: Optional[str] = None
    request_timeout: Optional[float] = None
    seed: Optional[int] = None
    preferences_path: Path = DEFAULT_PREFERENCES_PATH

    @classmethod
    def from_env(cls) -> "MoodConfig":
        import os

        return cls(
            query=os.getenv("MARKET_MOOD_QUERY") or DEFAULT_QUERY,
            language=os.getenv("MARKET_MOOD_LANGUAGE") or "en",
            region=os.getenv("MARKET_MOOD_REGION") or "IN",
            provider=(os.getenv("MARKET_MOOD_PROVIDER") or "rss2json").strip().lower(),
            rss2json_api_key=os.getenv("RSS2JSON_API_KEY") or None,
            request_timeout=_parse_number(os.getenv("MARKET_MOOD_REQUEST_TIMEOUT"), "MARKET_MOOD_REQUEST_TIMEOUT", float),
            seed=_parse_number(os.getenv("MARKET_MOOD_SEED"), "MARKET_MOOD_SEED", int),
            preferences_path=Path(os.getenv("MARKET_MOOD_PREFERENCES_PATH") or DEFAULT_PREFERENCES_PATH).expanduser(),
        )


def _parse_number(value: Optional[str], name: str, kind: type):
    if value is None or value.strip() == "":
        return None
    try:
        return kind(value)
    except ValueError:
        raise ValueError(f"{name} must be a {kind.__name__} if set") from None
