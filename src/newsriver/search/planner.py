"""Validation of search parameters and expansion into per-day queries.

Newsriver caps every response at 100 articles. To return as many results as
possible, a date range is split into one request per calendar day, each
scoped with a ``discoverDate:[d TO d+1]`` clause.
"""

import re
from datetime import date, datetime, timedelta
from numbers import Real
from urllib.parse import quote

import pandas as pd

from newsriver.data import Credentials, DayWindow, SearchRequest
from newsriver.errors import InvalidParameterError
from newsriver.languages import is_language_code

MAX_ENCODED_QUERY_LENGTH = 414
MAX_LOOKBACK_DAYS = 365
MIN_LIMIT = 1
MAX_LIMIT = 100

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def build_search_request(
    query: str,
    from_date: str | date | None = None,
    to_date: str | date | None = None,
    language: str = "en",
    limit: int = 100,
    *,
    credentials: Credentials,
    today: date | None = None,
) -> SearchRequest:
    """Validate search parameters and return a ``SearchRequest``.

    Args:
        query: Lucene query searched against article titles and text.
        from_date: Start of the range, ``YYYY-MM-DD``. Defaults to one month
            before ``to_date``'s default (today).
        to_date: End of the range (inclusive). Defaults to today.
        language: ISO 639-1 code of the articles to return.
        limit: Maximum results per day, a whole number from 1 to 100.
        credentials: Resolved API token and user agent.
        today: Reference date for defaults and range checks.

    Returns:
        The validated request.

    Raises:
        InvalidParameterError: If any argument is invalid.
    """
    today = today or date.today()

    _check_query(query)

    if from_date is None:
        from_date = (pd.Timestamp(today) - pd.DateOffset(months=1)).date()
    start = _parse_date(from_date, "from_date")
    if start < today - timedelta(days=MAX_LOOKBACK_DAYS):
        raise InvalidParameterError(
            f"from_date must be within the past {MAX_LOOKBACK_DAYS} days, got {start}"
        )
    if start > today:
        raise InvalidParameterError(f"from_date can't be in the future, got {start}")

    end = _parse_date(to_date if to_date is not None else today, "to_date")
    if end < start:
        raise InvalidParameterError(
            f"to_date must be greater than or equal to from_date, got {end} < {start}"
        )
    if end > today:
        raise InvalidParameterError(f"to_date can't be in the future, got {end}")

    if not is_language_code(language):
        raise InvalidParameterError(
            f"language not recognised, expected a 2 character ISO 639-1 code, got {language!r}"
        )

    if isinstance(limit, bool) or not isinstance(limit, Real):
        raise InvalidParameterError(f"limit must be a number, got {limit!r}")
    if not MIN_LIMIT <= limit <= MAX_LIMIT:
        raise InvalidParameterError(
            f"limit must be between {MIN_LIMIT} and {MAX_LIMIT}, got {limit}"
        )
    if limit != int(limit):
        raise InvalidParameterError(f"limit must be a whole number, got {limit}")

    if not credentials.token:
        raise InvalidParameterError("api_token cannot be empty")
    if not credentials.user_agent:
        raise InvalidParameterError("user_agent cannot be empty")

    return SearchRequest(
        query=query,
        from_date=start,
        to_date=end,
        language=language,
        limit=int(limit),
        credentials=credentials,
    )


def build_day_query(query: str, language: str, day: date) -> str:
    """Combine the user query with language and one-day discovery filters."""
    next_day = day + timedelta(days=1)
    return (
        f'"{query}" AND language:{language} '
        f"AND discoverDate:[{day.isoformat()} TO {next_day.isoformat()}]"
    )


def plan_day_windows(request: SearchRequest) -> list[DayWindow]:
    """Expand a request into one DayWindow per day, in ascending date order."""
    return [
        DayWindow(day=day, query=build_day_query(request.query, request.language, day))
        for day in (request.from_date + timedelta(days=i) for i in range(request.num_days))
    ]


def _check_query(query: object) -> None:
    if query is None:
        raise InvalidParameterError("query cannot be None")
    if not isinstance(query, str):
        raise InvalidParameterError(f"query must be a string, got {type(query).__name__}")
    if not query:
        raise InvalidParameterError("query cannot be empty")
    if len(quote(query, safe="")) > MAX_ENCODED_QUERY_LENGTH:
        raise InvalidParameterError(
            f"query is too long: encoded queries cannot exceed "
            f"{MAX_ENCODED_QUERY_LENGTH} characters"
        )


def _parse_date(value: str | date, name: str) -> date:
    """Parse a ``YYYY-MM-DD`` string (or pass a date through)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and _DATE_PATTERN.fullmatch(value):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise InvalidParameterError(
        f"{name} needs to be a date string in \"%Y-%m-%d\" format, got {value!r}"
    )
