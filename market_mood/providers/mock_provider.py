from __future__ import annotations

from datetime import datetime, timedelta
from typing import List

from ..models import Headline
from ..normalize import to_headline
from .base import BaseProvider


class MockProvider(BaseProvider):
    """Returns hard-coded headlines for offline development."""

    def fetch(self, query: str, **kwargs) -> List[Headline]:
        now = datetime.now()
        stamp = "%Y-%m-%d %H:%M:%S"
        sample = [
            {
                "title": "Sensex and Nifty surge as foreign inflows return",
                "link": "https://www.example.com/markets/sensex-surge",
                "pubDate": (now - timedelta(minutes=30)).strftime(stamp),
            },
            {
                "title": "Rupee slump deepens on crude oil worries",
                "link": "https://economictimes.example.com/rupee",
                "pubDate": (now - timedelta(minutes=45)).strftime(stamp),
            },
            {
                "title": f"What to watch in {query} this week",
                "link": "https://www.example.com/markets/week-ahead",
                "pubDate": (now - timedelta(hours=1)).strftime(stamp),
            },
            {
                "title": "Banking stocks rally to record high",
                "link": None,
                "pubDate": (now - timedelta(days=1)).strftime(stamp),
            },
        ]
        return [to_headline(item) for item in sample]
