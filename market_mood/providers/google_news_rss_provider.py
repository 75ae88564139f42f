from __future__ import annotations

import logging
from time import strftime
from typing import List, Mapping, Optional
from urllib.parse import quote

import feedparser
import requests

from ..errors import HttpStatusError, ProtocolError
from ..models import Headline
from ..normalize import to_headline
from .base import BaseProvider

logger = logging.getLogger(__name__)

GOOGLE_NEWS_SEARCH = "https://news.google.com/rss/search"


def google_news_feed_url(query: str, language: str = "en", region: str = "IN") -> str:
    return (
        f"{GOOGLE_NEWS_SEARCH}?q={quote(query, safe='')}"
        f"&hl={language}-{region}&gl={region}&ceid={region}:{language}"
    )


class GoogleNewsRSSProvider(BaseProvider):
    """Reads the Google News search feed directly, without the JSON proxy."""

    def __init__(self, language: str = "en", region: str = "IN", timeout: Optional[float] = None) -> None:
        self._language = language
        self._region = region
        self._timeout = timeout

    def fetch(self, query: str, **kwargs: Mapping[str, object]) -> List[Headline]:
        url = google_news_feed_url(query, self._language, self._region)
        response = requests.get(url, timeout=self._timeout)
        if not 200 <= response.status_code < 300:
            raise HttpStatusError(response.status_code, response.text or "")
        feed = feedparser.parse(response.content)
        entries = feed.entries or []
        if feed.bozo and not entries:
            raise ProtocolError(f"Unreadable feed: {feed.get('bozo_exception')}")
        return [to_headline(_as_raw_item(entry)) for entry in entries]


def _as_raw_item(entry: Mapping[str, object]) -> dict:
    return {
        "title": entry.get("title"),
        "link": entry.get("link"),
        "pubDate": entry.get("published") or _struct_text(entry.get("published_parsed")),
    }


def _struct_text(value: object) -> Optional[str]:
    if not value:
        return None
    try:
        return strftime("%Y-%m-%dT%H:%M:%S+00:00", value)
    except (TypeError, ValueError):
        return None
