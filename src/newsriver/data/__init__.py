"""Data models for the Newsriver client."""

from newsriver.data.models import Credentials, DayProgress, DayWindow, SearchRequest

__all__ = [
    "Credentials",
    "DayProgress",
    "DayWindow",
    "SearchRequest",
]
