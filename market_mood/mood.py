from __future__ import annotations

import logging
import math
import random
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import BEARISH, BULLISH, Headline, SentimentCounts
from .sentiment import score_sentiment

logger = logging.getLogger(__name__)


def filter_today(headlines: Iterable[Headline], today: str) -> List[Headline]:
    """Keep headlines whose date key is exactly ``today``.

    Plain string equality: headlines published on another local date, or with
    no parseable date, are dropped.
    """
    return [headline for headline in headlines if headline.published_date_key == today]


def count_labels(headlines: Iterable[Headline]) -> SentimentCounts:
    counts = SentimentCounts()
    for headline in headlines:
        if headline.sentiment_label == BULLISH:
            counts.bullish += 1
        elif headline.sentiment_label == BEARISH:
            counts.bearish += 1
        else:
            counts.neutral += 1
    return counts


def mood_score(counts: SentimentCounts) -> int:
    total = counts.total
    if total == 0:
        return 0
    value = (counts.bullish - counts.bearish) / total * 100
    # Half away from zero.
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def classify(
    headlines: Sequence[Headline],
    today: str,
    rng: Optional[random.Random] = None,
) -> Tuple[List[Headline], SentimentCounts, int]:
    """Filter to ``today``, label each headline and aggregate the mood."""
    classified = filter_today(headlines, today)
    for headline in classified:
        label, score = score_sentiment(headline.title, rng)
        headline.assign_sentiment(label, score)
    counts = count_labels(classified)
    mood = mood_score(counts)
    logger.debug(
        "Classified %d of %d headlines for %s: %s, mood %d",
        len(classified),
        len(headlines),
        today,
        counts.to_dict(),
        mood,
    )
    return classified, counts, mood


def empty_result_notice(fetched_count: int, today: str) -> str:
    if fetched_count == 0:
        return "The news feed returned no headlines. Try refreshing in a few minutes."
    return (
        f"The news feed returned {fetched_count} headlines, "
        f"but none were published today ({today})."
    )
