"""Core data models for the Newsriver client."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Credentials:
    """API token and user agent sent with every request."""

    token: str
    user_agent: str

    def __repr__(self) -> str:
        return f"Credentials(token='***', user_agent={self.user_agent!r})"


@dataclass(frozen=True)
class SearchRequest:
    """A validated search, built by ``build_search_request``."""

    query: str
    from_date: date
    to_date: date
    language: str
    limit: int
    credentials: Credentials

    @property
    def num_days(self) -> int:
        """Number of DayWindows (and therefore requests) this search spans."""
        return (self.to_date - self.from_date).days + 1


@dataclass(frozen=True)
class DayWindow:
    """One calendar day of a search and the query string scoped to it."""

    day: date
    query: str


@dataclass(frozen=True)
class DayProgress:
    """Progress report handed to observers after each day is fetched."""

    index: int
    total: int
    day: date
    rows: int
    status_code: int

    @property
    def ok(self) -> bool:
        return self.status_code < 400
