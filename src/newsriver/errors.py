"""Exceptions raised by the Newsriver client."""


class NewsriverError(Exception):
    """Base class for all errors raised by this package."""


class InvalidParameterError(NewsriverError, ValueError):
    """An argument failed validation before any request was issued."""


class SchemaError(InvalidParameterError):
    """A table handed to the normalizer lacks the expected columns."""


class ResponseFormatError(NewsriverError):
    """The API answered with something other than a JSON article array.

    Unlike a plain HTTP error for a single day, this aborts the whole
    retrieval.
    """
