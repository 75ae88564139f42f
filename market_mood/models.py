from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

BULLISH = "Bullish"
BEARISH = "Bearish"
NEUTRAL = "Neutral"

LABELS = (BULLISH, BEARISH, NEUTRAL)


@dataclass(slots=True)
class Headline:
    """Canonical headline record produced by a provider."""

    title: str
    source: str
    url: Optional[str]
    published_at: Optional[str]
    published_date_key: str = ""
    sentiment_label: str = NEUTRAL
    sentiment_score: float = 0.0
    _classified: bool = field(default=False, repr=False, compare=False)

    def assign_sentiment(self, label: str, score: float) -> None:
        if self._classified:
            raise RuntimeError(f"Sentiment already assigned for {self.title!r}")
        if label not in LABELS:
            raise ValueError(f"Unknown sentiment label: {label}")
        self.sentiment_label = label
        self.sentiment_score = score
        self._classified = True

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "source": self.source,
            "url": self.url,
            "published_at": self.published_at,
            "published_date_key": self.published_date_key,
            "sentiment_label": self.sentiment_label,
            "sentiment_score": self.sentiment_score,
        }


@dataclass(slots=True)
class SentimentCounts:
    bullish: int = 0
    bearish: int = 0
    neutral: int = 0

    @property
    def total(self) -> int:
        return self.bullish + self.bearish + self.neutral

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(slots=True)
class MoodReport:
    """Result of one load cycle, consumed by the presentation layer."""

    date_key: str
    headlines: List[Headline] = field(default_factory=list)
    counts: SentimentCounts = field(default_factory=SentimentCounts)
    mood_score: int = 0
    fetched_count: int = 0
    error: Optional[str] = None
    notice: Optional[str] = None
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "date_key": self.date_key,
            "headlines": [headline.to_dict() for headline in self.headlines],
            "counts": self.counts.to_dict(),
            "mood_score": self.mood_score,
            "fetched_count": self.fetched_count,
            "error": self.error,
            "notice": self.notice,
            "generated_at": self.generated_at.isoformat(),
        }
