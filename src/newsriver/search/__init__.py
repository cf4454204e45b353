from newsriver.search.base import NewsSearcher, ProgressCallback
from newsriver.search.newsriver import NEWSRIVER_API_URL, NewsriverClient, get_news
from newsriver.search.planner import build_day_query, build_search_request, plan_day_windows
from newsriver.search.rate_limit import RateLimiter

__all__ = [
    "NEWSRIVER_API_URL",
    "NewsSearcher",
    "NewsriverClient",
    "ProgressCallback",
    "RateLimiter",
    "build_day_query",
    "build_search_request",
    "get_news",
    "plan_day_windows",
]
