"""Headline providers."""

from .base import BaseProvider
from .google_news_rss_provider import GoogleNewsRSSProvider, google_news_feed_url
from .mock_provider import MockProvider
from .rss2json_provider import RSS2JSONProvider

__all__ = [
    "BaseProvider",
    "GoogleNewsRSSProvider",
    "MockProvider",
    "RSS2JSONProvider",
    "google_news_feed_url",
]
