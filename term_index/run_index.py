"""
Demo script for the Redis-backed term index.
Indexes two fixed pages and prints how often a term appears on each.
"""
import argparse
import logging
import sys

import redis

from term_index.common.config import DEMO_PAGES, DEMO_TERM, LOG_FILE, LOG_LEVEL
from term_index.common.exceptions import TermIndexError
from term_index.common.connection import make_redis
from term_index.indexer.redis_index import RedisIndex

logger = logging.getLogger("indexer")


def configure_logging(level=LOG_LEVEL, log_file=LOG_FILE):
    """Send indexer logs to the console and to a log file."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] [Indexer] %(message)s',
        handlers=handlers
    )

def load_index(index, pages=None):
    """Store the demo pages in the index."""
    pages = pages or DEMO_PAGES
    for url, text in pages.items():
        index.index_page(url, text)

def main(argv=None, client=None):
    """Main function to run the demo."""
    parser = argparse.ArgumentParser(description='Index two pages in Redis and print term counts')
    parser.add_argument('--term', default=DEMO_TERM, help='Term to look up after indexing')
    parser.add_argument('--print-index', action='store_true', help='Print the whole index')
    parser.add_argument('--reset', action='store_true', help='Delete all keys before indexing')
    parser.add_argument('--redis-url', help='Redis URL, e.g. redis://localhost:6379/0')
    parser.add_argument('--log-file', default=LOG_FILE, help='Log file path (empty to disable)')
    args = parser.parse_args(argv)

    configure_logging(log_file=args.log_file)

    try:
        if client is None:
            client = make_redis(args.redis_url)
        index = RedisIndex(client)

        if args.reset:
            index.delete_all_keys()
        load_index(index)

        counts = index.get_counts(args.term)
        for url, count in sorted(counts.items()):
            print(f"{url}={count}")

        if args.print_index:
            index.print_index()
    except (redis.exceptions.RedisError, TermIndexError) as e:
        logger.critical(f"Demo failed: {e}", exc_info=True)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
