"""Clean a table of retrieved articles into an analysis-ready corpus."""

import logging
from numbers import Real

import pandas as pd

from newsriver.errors import InvalidParameterError, SchemaError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (
    "elements",
    "text",
    "publishDate",
    "discoverDate",
    "title",
    "website.domainName",
)
CORE_COLUMNS = ["text", "title", "discoverDate", "website.domainName"]
TIF_COLUMNS = ["doc_id", *CORE_COLUMNS]


def clean_news(
    data: pd.DataFrame,
    min_chars: int = 300,
    as_date: bool = True,
    drop_vars: bool = True,
    to_lower: bool = True,
    distinct: bool = True,
    drop_na: bool = False,
    tif_corpus: bool = False,
) -> pd.DataFrame:
    """Wrangle articles returned by ``get_news`` into a tidy corpus.

    Stages run in a fixed order: drop ``elements``, filter short texts,
    coerce dates, drop variables, lowercase, de-duplicate, drop missing
    values, build a TIF corpus. The input frame is never modified.

    Args:
        data: Table returned by ``get_news``.
        min_chars: Minimum number of characters of an article's text.
        as_date: Convert ``discoverDate`` and ``publishDate`` to dates.
        drop_vars: Keep only ``text``, ``title``, ``discoverDate`` and
            ``website.domainName``. Newsriver typically returns 26 columns,
            many of them sparse metadata.
        to_lower: Lowercase ``title`` and ``text``.
        distinct: Keep only the first article of each (text, title) pair.
        drop_na: Drop rows containing missing values.
        tif_corpus: Return a Text Interchange Format corpus with a
            ``doc_id`` column (https://github.com/ropensci/tif).

    Returns:
        The cleaned table with a fresh RangeIndex.

    Raises:
        SchemaError: If ``data`` is not a DataFrame with the expected columns.
        InvalidParameterError: If an option has the wrong type or value.
    """
    _check_schema(data)
    _check_options(
        min_chars,
        as_date=as_date,
        drop_vars=drop_vars,
        to_lower=to_lower,
        distinct=distinct,
        drop_na=drop_na,
        tif_corpus=tif_corpus,
    )

    news = data.drop(columns="elements")
    text_length = news["text"].astype("string").str.len().fillna(-1)
    news = news[text_length >= min_chars]

    if as_date:
        news = news.assign(
            discoverDate=_to_date(news["discoverDate"]),
            publishDate=_to_date(news["publishDate"]),
        )

    if drop_vars:
        news = news[CORE_COLUMNS]
    else:
        logger.info(
            "Keeping all variables: sparse metadata columns may remove most rows "
            "if drop_na is enabled, consider leaving drop_na set to False."
        )

    if to_lower:
        news = news.assign(title=_lower(news["title"]), text=_lower(news["text"]))

    if distinct:
        news = news.drop_duplicates(subset=["text", "title"], keep="first")

    if drop_na:
        news = news.dropna()

    news = news.reset_index(drop=True)

    if tif_corpus:
        news = news.assign(doc_id=[str(i) for i in range(1, len(news) + 1)])
        news = news[TIF_COLUMNS]

    return news


normalize = clean_news


def _check_schema(data: object) -> None:
    if not isinstance(data, pd.DataFrame):
        raise SchemaError(f"data must be a pandas DataFrame, got {type(data).__name__}")
    missing = [column for column in REQUIRED_COLUMNS if column not in data.columns]
    if missing:
        raise SchemaError(
            f"data is missing required columns {missing}; "
            "please provide a table returned by get_news()"
        )


def _check_options(min_chars: object, **flags: object) -> None:
    if isinstance(min_chars, bool) or not isinstance(min_chars, Real):
        raise InvalidParameterError(f"min_chars must be a number, got {min_chars!r}")
    if min_chars < 0:
        raise InvalidParameterError(f"min_chars cannot be negative, got {min_chars}")
    for name, value in flags.items():
        if not isinstance(value, bool):
            raise InvalidParameterError(f"{name} must be a bool, got {value!r}")


def _to_date(values: pd.Series) -> pd.Series:
    """Truncate timestamps to their calendar date, keeping the written date."""
    if pd.api.types.is_datetime64_any_dtype(values):
        return values.dt.date
    days = values.astype("string").str.slice(0, 10)
    return pd.to_datetime(days, format="%Y-%m-%d", errors="coerce").dt.date


def _lower(values: pd.Series) -> pd.Series:
    return values.map(lambda value: value.lower() if isinstance(value, str) else value)
