"""
Redis-backed web search index.
Stores a TermCounter hash per indexed URL and a URL set per term.
"""
import sys
import logging

import redis

from term_index.common.config import URL_SET_PREFIX, TERM_COUNTER_PREFIX
from term_index.common.exceptions import NotFoundError
from term_index.common.utils import (
    url_set_key, term_counter_key, term_from_url_set_key,
    encode_count, decode_count
)
from term_index.indexer.term_counter import count_terms

logger = logging.getLogger("indexer")


class RedisIndex:
    """
    Inverted index kept in Redis.

    The client is passed in by the caller and must be created with
    decode_responses=True so that keys and members come back as str.
    """
    def __init__(self, client):
        self.redis = client

    def is_indexed(self, url):
        """Check whether there is a TermCounter for the given URL."""
        return self.redis.exists(term_counter_key(url)) > 0

    def add_membership(self, term, url, pipe=None):
        """Record that the page at url contains term.

        When pipe is given the command is only queued on it.
        """
        client = pipe if pipe is not None else self.redis
        client.sadd(url_set_key(term), url)

    def get_urls(self, term):
        """Return the set of URLs that contain term."""
        return set(self.redis.smembers(url_set_key(term)))

    def get_count(self, url, term):
        """Return the number of times term appears at url.

        Raises NotFoundError if url was never indexed. A term that does not
        occur on an indexed page counts as zero.
        """
        key = term_counter_key(url)
        pipe = self.redis.pipeline(transaction=False)
        pipe.exists(key)
        pipe.hget(key, term)
        exists, raw = pipe.execute()
        return self._to_count(url, term, exists, raw)

    def get_counts(self, term):
        """Return a map from URL to the number of times term appears there."""
        urls = list(self.get_urls(term))
        if not urls:
            return {}

        # One round trip for every lookup
        pipe = self.redis.pipeline(transaction=False)
        for url in urls:
            key = term_counter_key(url)
            pipe.exists(key)
            pipe.hget(key, term)
        replies = pipe.execute()

        counts = {}
        for i, url in enumerate(urls):
            exists, raw = replies[2 * i], replies[2 * i + 1]
            counts[url] = self._to_count(url, term, exists, raw)
        return counts

    def _to_count(self, url, term, exists, raw):
        if not exists:
            raise NotFoundError(url)
        if raw is None:
            return 0
        return decode_count(raw, url=url, term=term)

    def record_counts(self, term_counter):
        """Replace the stored TermCounter for a page in one transaction.

        Returns the per-command results of the transaction. URL sets are
        left untouched.
        """
        url = term_counter.get_label()
        key = term_counter_key(url)

        pipe = self.redis.pipeline(transaction=True)
        pipe.delete(key)
        for term, count in term_counter.items():
            pipe.hset(key, term, encode_count(count))

        try:
            results = pipe.execute()
        except redis.exceptions.RedisError as e:
            logger.error(f"Error recording term counts for {url}: {e}")
            raise
        logger.debug(f"Recorded {len(term_counter)} term counts for {url}")
        return results

    def index_page(self, url, content):
        """Add a page to the index.

        content is either the page text or a sequence of paragraphs.
        """
        logger.info(f"Indexing page: {url}")
        term_counter = count_terms(url, content)

        # Membership of terms dropped since the last revision is not cleaned up
        previous_terms = set(self.redis.hkeys(term_counter_key(url)))
        stale_terms = previous_terms - term_counter.keys()
        if stale_terms:
            logger.warning(
                f"Re-indexing {url} leaves {len(stale_terms)} stale URL set "
                f"memberships: {sorted(stale_terms)[:10]}"
            )

        self.record_counts(term_counter)

        # All memberships for the page land together or not at all
        pipe = self.redis.pipeline(transaction=True)
        for term in term_counter.keys():
            self.add_membership(term, url, pipe=pipe)
        try:
            pipe.execute()
        except redis.exceptions.RedisError as e:
            logger.error(f"Error adding URL set memberships for {url}: {e}")
            raise

        logger.info(f"Indexed {url}: {len(term_counter)} distinct terms")

    def print_index(self, out=None):
        """Print every term with the pages where it appears.

        Should be used for development and testing, not production.
        """
        out = out or sys.stdout
        for term in sorted(self.term_set()):
            print(term, file=out)
            for url, count in sorted(self.get_counts(term).items()):
                print(f"    {url} {count}", file=out)

    def term_set(self):
        """Return the set of terms that have been indexed.

        Should be used for development and testing, not production.
        """
        return {term_from_url_set_key(key) for key in self.url_set_keys()}

    def url_set_keys(self):
        """Return URLSet keys for the terms that have been indexed."""
        return set(self.redis.keys(URL_SET_PREFIX + '*'))

    def term_counter_keys(self):
        """Return TermCounter keys for the URLs that have been indexed."""
        return set(self.redis.keys(TERM_COUNTER_PREFIX + '*'))

    def delete_url_sets(self):
        """Delete all URLSet records. Not safe alongside running indexers."""
        self._delete_keys(self.url_set_keys(), 'URL sets')

    def delete_term_counters(self):
        """Delete all TermCounter records. Not safe alongside running indexers."""
        self._delete_keys(self.term_counter_keys(), 'term counters')

    def delete_all_keys(self):
        """Delete every key in the database. Not safe alongside running indexers."""
        self._delete_keys(set(self.redis.keys('*')), 'keys')

    def _delete_keys(self, keys, kind):
        pipe = self.redis.pipeline(transaction=True)
        for key in keys:
            pipe.delete(key)
        try:
            pipe.execute()
        except redis.exceptions.RedisError as e:
            logger.error(f"Error deleting {kind}: {e}")
            raise
        logger.info(f"Deleted {len(keys)} {kind}")
