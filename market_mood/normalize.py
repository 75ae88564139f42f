from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional
from urllib.parse import urlparse

from dateutil import parser as dateparser

from .models import Headline

UNTITLED = "Untitled headline"
UNKNOWN_SOURCE = "Unknown Source"


def to_headline(item: Mapping[str, object]) -> Headline:
    """Map one raw feed item (``title``/``link``/``pubDate``) to a ``Headline``."""
    title = _text(item.get("title")) or UNTITLED
    link = _text(item.get("link"))
    published = _text(item.get("pubDate"))
    return Headline(
        title=title,
        source=source_from_link(link),
        url=link,
        published_at=published,
        published_date_key=date_key(published),
    )


def source_from_link(link: Optional[str]) -> str:
    if not link:
        return UNKNOWN_SOURCE
    try:
        hostname = urlparse(link).hostname
    except ValueError:
        return UNKNOWN_SOURCE
    if not hostname:
        return UNKNOWN_SOURCE
    if hostname.startswith("www."):
        hostname = hostname[4:]
    return hostname


def date_key(value: Optional[str]) -> str:
    """Return the local ``YYYY-MM-DD`` for a loosely formatted date, or ``""``."""
    parsed = _parse_date(value)
    if parsed is None:
        return ""
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime("%Y-%m-%d")


def _parse_date(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return dateparser.parse(value)
    except (ValueError, OverflowError):
        return None


def _text(value: object) -> Optional[str]:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None
