"""Newsriver search API client."""

import logging
import time
from datetime import date

import httpx
import pandas as pd

from newsriver.credentials.store import CredentialStore, resolve_credentials
from newsriver.data import DayProgress, DayWindow, SearchRequest
from newsriver.errors import ResponseFormatError
from newsriver.run_logger import RunLogger
from newsriver.search.base import ProgressCallback
from newsriver.search.planner import build_search_request, plan_day_windows
from newsriver.search.rate_limit import DEFAULT_REQUEST_INTERVAL, RateLimiter

NEWSRIVER_API_URL = "https://api.newsriver.io/v2/search"

logger = logging.getLogger(__name__)


class NewsriverClient:
    """Search for news articles using the Newsriver API.

    A search over a date range is issued as one request per day, strictly in
    sequence and spaced out by a ``RateLimiter``. A day whose request fails
    with an HTTP error contributes no rows; a response that is not JSON
    aborts the whole search.

    Args:
        api_token: Newsriver API token (defaults to NEWSRIVER_API_KEY).
        user_agent: User agent string (defaults to NEWSRIVER_USER_AGENT).
        credential_store: Where to look up credentials not passed explicitly.
        endpoint: Search endpoint URL.
        timeout: HTTP timeout in seconds, used when no client is supplied.
        http_client: Optional ``httpx.Client`` to issue requests with.
        rate_limiter: Optional rate limiter (defaults to one call per 4s).
        run_logger: Optional RunLogger recording every day's request.
    """

    def __init__(
        self,
        *,
        api_token: str | None = None,
        user_agent: str | None = None,
        credential_store: CredentialStore | None = None,
        endpoint: str = NEWSRIVER_API_URL,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
        rate_limiter: RateLimiter | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._api_token = api_token
        self._user_agent = user_agent
        self._credential_store = credential_store
        self._endpoint = endpoint
        self._timeout = timeout
        self._http_client = http_client
        self._rate_limiter = rate_limiter or RateLimiter(DEFAULT_REQUEST_INTERVAL)
        self._run_logger = run_logger

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
            query: Lucene query searched against titles and text, e.g.
                ``'title:Google AND text:"Google Cloud"'``.
            from_date: Start date (``YYYY-MM-DD``), defaults to one month ago.
            to_date: End date (``YYYY-MM-DD``), inclusive, defaults to today.
            language: ISO 639-1 language code.
            limit: Maximum articles to return per day (1-100).
            on_progress: Optional observer called after every day.

        Returns:
            One row per article with nested fields flattened into dotted
            column names (e.g. ``website.domainName``).

        Raises:
            InvalidParameterError: If any argument is invalid. Raised before
                any request is issued.
            ResponseFormatError: If a response is not a JSON article array.
        """
        credentials = resolve_credentials(
            self._api_token, self._user_agent, self._credential_store
        )
        request = build_search_request(
            query,
            from_date,
            to_date,
            language,
            limit,
            credentials=credentials,
        )
        windows = plan_day_windows(request)

        if self._run_logger:
            self._run_logger.start_run(request)

        if self._http_client is not None:
            frames = self._fetch_all(self._http_client, request, windows, on_progress)
        else:
            with httpx.Client(timeout=self._timeout) as client:
                frames = self._fetch_all(client, request, windows, on_progress)

        news = pd.concat(frames, ignore_index=True, sort=False) if frames else pd.DataFrame()

        if self._run_logger:
            self._run_logger.finish_run(len(news))
        return news

    def _fetch_all(
        self,
        client: httpx.Client,
        request: SearchRequest,
        windows: list[DayWindow],
        on_progress: ProgressCallback | None,
    ) -> list[pd.DataFrame]:
        frames: list[pd.DataFrame] = []
        for i, window in enumerate(windows, 1):
            self._rate_limiter.wait()

            t0 = time.monotonic()
            status_code, day_news = self._fetch_day(client, request, window)
            duration = time.monotonic() - t0

            rows = 0 if day_news is None else len(day_news)
            if day_news is not None and not day_news.empty:
                frames.append(day_news)

            if self._run_logger:
                self._run_logger.log_day(
                    window, status_code=status_code, rows=rows, duration_seconds=duration
                )
            logger.info(f"Fetched {rows} articles for {window.day} ({i}/{len(windows)})")
            if on_progress is not None:
                on_progress(
                    DayProgress(
                        index=i,
                        total=len(windows),
                        day=window.day,
                        rows=rows,
                        status_code=status_code,
                    )
                )
        return frames

    def _fetch_day(
        self,
        client: httpx.Client,
        request: SearchRequest,
        window: DayWindow,
    ) -> tuple[int, pd.DataFrame | None]:
        """Execute the request for a single day.

        Returns:
            Tuple of (status code, articles or None if the request failed).
        """
        params = {
            "query": window.query,
            "sortBy": "_score",
            "sortOrder": "DESC",
            "limit": str(request.limit),
        }
        headers = {
            "User-Agent": request.credentials.user_agent,
            "Authorization": request.credentials.token,
        }
        response = client.get(self._endpoint, params=params, headers=headers)

        if _media_type(response) != "application/json":
            raise ResponseFormatError(
                f"API did not return json for {window.day} "
                f"(status {response.status_code}, content type "
                f"{response.headers.get('content-type')!r})"
            )

        if response.is_error:
            logger.warning(
                f"Request for {window.day} failed with status {response.status_code}"
            )
            return (response.status_code, None)

        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseFormatError(f"API returned malformed json for {window.day}") from e
        return (response.status_code, _articles_to_frame(payload, window))


def get_news(
    query: str,
    from_date: str | date | None = None,
    to_date: str | date | None = None,
    language: str = "en",
    limit: int = 100,
    api_token: str | None = None,
    user_agent: str | None = None,
    **client_kwargs,
) -> pd.DataFrame:
    """Retrieve news articles matching ``query`` between two dates.

    Convenience wrapper around ``NewsriverClient.search``. Extra keyword
    arguments are forwarded to the client constructor.
    """
    client = NewsriverClient(api_token=api_token, user_agent=user_agent, **client_kwargs)
    return client.search(
        query,
        from_date=from_date,
        to_date=to_date,
        language=language,
        limit=limit,
    )


def _media_type(response: httpx.Response) -> str:
    """Return the response's media type without parameters, e.g. ``application/json``."""
    content_type = response.headers.get("content-type", "")
    return content_type.split(";")[0].strip().lower()


def _articles_to_frame(payload: object, window: DayWindow) -> pd.DataFrame:
    """Flatten a JSON article array into a DataFrame with dotted column names."""
    if not isinstance(payload, list):
        raise ResponseFormatError(
            f"Expected a JSON array of articles for {window.day}, "
            f"got {type(payload).__name__}"
        )
    if not payload:
        return pd.DataFrame()
    return pd.json_normalize(payload)
