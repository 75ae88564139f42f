from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Preferences:
    dark_mode: bool = False


class PreferenceStore:
    """Persists the dashboard's UI preference as a small JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Preferences:
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return Preferences()
        except (OSError, ValueError) as exc:
            logger.warning("Could not read preferences from %s: %s", self._path, exc)
            return Preferences()
        dark_mode = payload.get("dark_mode") if isinstance(payload, dict) else None
        return Preferences(dark_mode=dark_mode if isinstance(dark_mode, bool) else False)

    def save(self, preferences: Preferences) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps({"dark_mode": preferences.dark_mode}), encoding="utf-8")
