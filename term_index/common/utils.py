"""
Utility functions for the term index: Redis key naming and count encoding.
"""
from term_index.common.config import URL_SET_PREFIX, TERM_COUNTER_PREFIX
from term_index.common.exceptions import MalformedCountError


def url_set_key(term):
    """Return the Redis key of the URL set for a term."""
    return URL_SET_PREFIX + term

def term_counter_key(url):
    """Return the Redis key of the TermCounter hash for a URL."""
    return TERM_COUNTER_PREFIX + url

def term_from_url_set_key(key):
    """Extract the term from a URLSet key.

    Splits on ':' and keeps the second component, so a term that itself
    contains ':' comes back truncated. A key with no second component
    yields the empty string.
    """
    parts = key.split(':')
    if len(parts) < 2:
        return ''
    return parts[1]

def encode_count(count):
    """Serialize a term count for storage as a decimal string."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"Count must be an int, got {type(count).__name__}")
    if count <= 0:
        raise ValueError(f"Count must be positive, got {count}")
    return str(count)

def decode_count(raw, url=None, term=None):
    """Parse a stored count back into an int."""
    if isinstance(raw, bytes):
        raw = raw.decode('utf-8', errors='replace')
    try:
        # int() would also accept '+5', ' 5', '5_0' or non-ASCII digits
        if not (raw.isascii() and raw.isdigit()):
            raise ValueError(raw)
        count = int(raw)
    except (AttributeError, ValueError):
        raise MalformedCountError(url, term, raw) from None
    if count <= 0:
        raise MalformedCountError(url, term, raw)
    return count
