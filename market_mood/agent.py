from __future__ import annotations

from datetime import date
import logging
import random
from typing import Callable, Optional

import requests

from .config import MoodConfig
from .errors import FetchError
from .models import MoodReport
from .mood import classify, empty_result_notice
from .providers import BaseProvider, GoogleNewsRSSProvider, MockProvider, RSS2JSONProvider

logger = logging.getLogger(__name__)


class MoodAgent:
    """Loads today's headlines and turns them into a market mood report."""

    def __init__(
        self,
        config: Optional[MoodConfig] = None,
        provider: Optional[BaseProvider] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], date]] = None,
    ) -> None:
        self.config = config or MoodConfig.from_env()
        self.provider = provider or self._build_provider()
        if rng is None and self.config.seed is not None:
            rng = random.Random(self.config.seed)
        self._rng = rng
        self._clock = clock or date.today

    def _build_provider(self) -> BaseProvider:
        name = self.config.provider
        if name == "rss2json":
            return RSS2JSONProvider(
                language=self.config.language,
                region=self.config.region,
                api_key=self.config.rss2json_api_key,
                timeout=self.config.request_timeout,
            )
        if name == "google_rss":
            return GoogleNewsRSSProvider(
                language=self.config.language,
                region=self.config.region,
                timeout=self.config.request_timeout,
            )
        if name == "mock":
            return MockProvider()
        raise ValueError(f"Unknown headline provider: {name}")

    def load_today(self, query: Optional[str] = None, today: Optional[str] = None) -> MoodReport:
        """Fetch, filter and classify today's headlines.

        Never raises for fetch failures: the returned report is empty and
        carries a single user-facing ``error`` message instead.
        """
        query = (query or "").strip() or self.config.query
        today = today or self._clock().isoformat()
        try:
            headlines = self.provider.fetch(query=query)
        except FetchError as exc:
            logger.warning("Headline fetch failed: %s", exc)
            return MoodReport(date_key=today, error=f"Failed to load market news: {exc}")
        except requests.RequestException as exc:
            logger.warning("Headline request failed: %s", exc)
            return MoodReport(date_key=today, error="Failed to load market news: the news service could not be reached.")

        classified, counts, mood = classify(headlines, today, self._rng)
        report = MoodReport(
            date_key=today,
            headlines=classified,
            counts=counts,
            mood_score=mood,
            fetched_count=len(headlines),
        )
        if not classified:
            report.notice = empty_result_notice(len(headlines), today)
            logger.info("No headlines for %s (%d fetched)", today, len(headlines))
        return report
