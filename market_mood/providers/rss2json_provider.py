from __future__ import annotations

import json
import logging
from typing import List, Mapping, Optional
from urllib.parse import quote

import requests

from ..errors import ApiError, HttpStatusError, ProtocolError
from ..models import Headline
from ..normalize import to_headline
from .base import BaseProvider
from .google_news_rss_provider import google_news_feed_url

logger = logging.getLogger(__name__)

INVALID_DATA_MESSAGE = "Invalid data received from the news API"


class RSS2JSONProvider(BaseProvider):
    """Fetches a Google News search feed converted to JSON by rss2json.com."""

    BASE_URL = "https://api.rss2json.com/v1/api.json"

    def __init__(
        self,
        language: str = "en",
        region: str = "IN",
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._language = language
        self._region = region
        self._api_key = api_key
        self._timeout = timeout

    def build_url(self, query: str) -> str:
        feed_url = google_news_feed_url(query, self._language, self._region)
        # The feed URL travels as a query-string value, so it is encoded again.
        url = f"{self.BASE_URL}?rss_url={quote(feed_url, safe='')}"
        if self._api_key:
            url = f"{url}&api_key={quote(self._api_key, safe='')}"
        return url

    def fetch(self, query: str, **kwargs: Mapping[str, object]) -> List[Headline]:
        url = self.build_url(query)
        logger.debug("Requesting headlines from %s", url)
        response = requests.get(url, timeout=self._timeout)
        if not 200 <= response.status_code < 300:
            raise HttpStatusError(response.status_code, _error_body(response))
        try:
            payload = response.json()
        except ValueError as exc:
            raise ProtocolError(f"Malformed JSON from news API: {exc}") from exc
        if payload is None:
            raise ProtocolError("Empty JSON body from news API")
        items = _envelope_items(payload)
        return [to_headline(item) for item in items if isinstance(item, Mapping)]


def _envelope_items(payload: object) -> list:
    if not isinstance(payload, Mapping):
        raise ApiError(INVALID_DATA_MESSAGE)
    items = payload.get("items")
    if payload.get("status") != "ok" or items is None:
        message = payload.get("message")
        raise ApiError(message if isinstance(message, str) and message else INVALID_DATA_MESSAGE)
    if not isinstance(items, list):
        raise ApiError(INVALID_DATA_MESSAGE)
    return items


def _error_body(response: requests.Response) -> str:
    if response.status_code == 422:
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, Mapping) and isinstance(data.get("message"), str):
            return data["message"]
        if data is not None:
            return json.dumps(data)
    try:
        return response.text or ""
    except Exception:  # body already consumed or undecodable
        logger.debug("Could not read error body for status %s", response.status_code)
        return ""
