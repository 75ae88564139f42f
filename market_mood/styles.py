from __future__ import annotations

from typing import Dict

from .models import BEARISH, BULLISH, NEUTRAL

LABEL_STYLES: Dict[str, Dict[str, str]] = {
    BULLISH: {"color": "emerald", "icon": "📈", "trend": "up"},
    NEUTRAL: {"color": "slate", "icon": "⚖️", "trend": "neutral"},
    BEARISH: {"color": "red", "icon": "📉", "trend": "down"},
}


def style_for(label: str) -> Dict[str, str]:
    return LABEL_STYLES.get(label, LABEL_STYLES[NEUTRAL])
