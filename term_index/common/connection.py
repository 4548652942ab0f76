"""
Redis connection factory for the term index.
"""
import logging

import redis

from term_index.common.config import (
    REDIS_URL, REDIS_HOST, REDIS_PORT, REDIS_PASSWORD, REDIS_DB,
    REDIS_SOCKET_TIMEOUT
)

logger = logging.getLogger("indexer")


def make_redis(url=None, ping=True):
    """Create a Redis client from a URL or the configured host settings."""
    url = url or REDIS_URL
    if url:
        logger.debug(f"Connecting to Redis at {url}")
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=REDIS_SOCKET_TIMEOUT
        )
    else:
        logger.debug(f"Connecting to Redis at {REDIS_HOST}:{REDIS_PORT}/{REDIS_DB}")
        client = redis.Redis(
            host=REDIS_HOST,
            port=REDIS_PORT,
            db=REDIS_DB,
            password=REDIS_PASSWORD,
            decode_responses=True,
            socket_timeout=REDIS_SOCKET_TIMEOUT
        )

    if ping:
        try:
            client.ping()
        except redis.exceptions.RedisError as e:
            logger.error(f"Could not connect to Redis: {e}")
            raise
        logger.info("Connected to Redis")
    return client
