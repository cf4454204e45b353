from collections.abc import Callable
from datetime import date
from typing import Protocol

import pandas as pd

from newsriver.data import DayProgress

ProgressCallback = Callable[[DayProgress], None]


class NewsSearcher(Protocol):
    """Interface for retrieving articles over a date range."""

    def search(
        self,
        query: str,
        *,
        from_date: str | date | None = None,
        to_date: str | date | None = None,
        language: str = "en",
        limit: int = 100,
        on_progress: ProgressCallback | None = None,
    ) -> pd.DataFrame:
        """Search for articles matching the query, one request per day.

        Args:
            query: Lucene query searched against titles and text.
            from_date: Start date (ISO format, e.g. "2026-01-01").
            to_date: End date (ISO format), inclusive.
            language: ISO 639-1 language code.
            limit: Maximum articles to return per day (1-100).
            on_progress: Optional observer called after every day.

        Returns:
            One row per article, days concatenated in ascending order.
        """
        ...
