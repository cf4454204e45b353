"""Corpus normalization."""

from newsriver.normalize.corpus import CORE_COLUMNS, REQUIRED_COLUMNS, clean_news, normalize

__all__ = [
    "CORE_COLUMNS",
    "REQUIRED_COLUMNS",
    "clean_news",
    "normalize",
]
