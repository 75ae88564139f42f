from __future__ import annotations

import random
from typing import Optional, Tuple

from .models import BEARISH, BULLISH, NEUTRAL

_POSITIVE = (
    "surge",
    "rally",
    "record",
    "gain",
    "rises",
    "boost",
    "soar",
    "jump",
    "climb",
    "growth",
    "profit",
    "strong",
    "upgrade",
    "bullish",
)

_NEGATIVE = (
    "drop",
    "fall",
    "slump",
    "crisis",
    "plunges",
    "warns",
    "decline",
    "crash",
    "loss",
    "tumble",
    "slide",
    "weak",
    "downgrade",
    "bearish",
    "sell-off",
)


def score_sentiment(title: Optional[str], rng: Optional[random.Random] = None) -> Tuple[str, float]:
    """Label a headline title and draw a score for it.

    Positive keywords win over negative ones. Titles without any keyword fall
    back to a random draw, so unseeded reruns may label them differently.
    """
    rng = rng or random
    lowered = (title or "").lower()
    if any(token in lowered for token in _POSITIVE):
        return BULLISH, round(0.5 + rng.random() * 0.4, 2)
    if any(token in lowered for token in _NEGATIVE):
        return BEARISH, round(-0.5 - rng.random() * 0.4, 2)
    draw = rng.random()
    if draw > 0.65:
        return BULLISH, round(rng.random() * 0.3, 2)
    if draw < 0.35:
        return BEARISH, round(-rng.random() * 0.3, 2)
    return NEUTRAL, 0.0
