from __future__ import annotations

import json
from typing import Iterable, List, Optional

from market_mood.models import Headline
from market_mood.normalize import to_headline
from market_mood.providers.base import BaseProvider

_MISSING = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=_MISSING, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self._payload = payload
        if text is None:
            text = "" if payload is _MISSING else json.dumps(payload)
        self.text = text
        self.content = text.encode("utf-8")

    def json(self):
        if self._payload is _MISSING:
            return json.loads(self.text)
        return self._payload


class SequenceRandom:
    """Stands in for ``random.Random`` with a fixed sequence of draws."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


class StubProvider(BaseProvider):
    def __init__(self, items: Optional[List[dict]] = None, error: Optional[Exception] = None) -> None:
        self.items = items or []
        self.error = error
        self.queries: List[str] = []

    def fetch(self, query: str, **kwargs) -> List[Headline]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return [to_headline(item) for item in self.items]
