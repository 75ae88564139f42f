"""Market Mood package initializer."""

from .agent import MoodAgent
from .config import MoodConfig

__all__ = ["MoodAgent", "MoodConfig"]
