from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Mapping

from ..models import Headline


class BaseProvider(ABC):
    """Abstract base class for headline providers."""

    @abstractmethod
    def fetch(self, query: str, **kwargs: Mapping[str, object]) -> List[Headline]:
        """Return normalized ``Headline`` objects for the given query.

        Raises a ``FetchError`` subclass when the upstream call fails; a single
        failure aborts the whole batch.
        """
