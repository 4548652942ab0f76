"""
Exceptions raised by the term index.
"""


class TermIndexError(Exception):
    """Base class for term index errors."""


class NotFoundError(TermIndexError):
    """Raised when a URL has no TermCounter record in the store."""

    def __init__(self, url):
        self.url = url
        super().__init__(f"URL is not indexed: {url}")


class MalformedCountError(TermIndexError, ValueError):
    """Raised when a stored count is not a positive decimal integer."""

    def __init__(self, url, term, raw):
        self.url = url
        self.term = term
        self.raw = raw
        super().__init__(f"Malformed count {raw!r} for term {term!r} at {url}")
