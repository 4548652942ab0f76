"""
Configuration settings for the Redis-backed term index.
"""
import os

from dotenv import load_dotenv

# Pick up a local .env file if there is one
load_dotenv()

# Redis connection settings
REDIS_URL = os.environ.get('REDIS_URL')  # takes precedence over host/port when set
REDIS_HOST = os.environ.get('REDIS_HOST', 'localhost')
REDIS_PORT = int(os.environ.get('REDIS_PORT', 6379))
REDIS_PASSWORD = os.environ.get('REDIS_PASSWORD')
REDIS_DB = int(os.environ.get('REDIS_DB', 0))
REDIS_SOCKET_TIMEOUT = 5  # seconds

# Key prefixes, shared with any existing deployment
URL_SET_PREFIX = 'URLSet:'
TERM_COUNTER_PREFIX = 'TermCounter:'

# Logging settings
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
LOG_FILE = os.environ.get('LOG_FILE', 'indexer.log')

# Demo settings
DEMO_TERM = 'the'
DEMO_PAGES = {
    'https://en.wikipedia.org/wiki/Java_(programming_language)': (
        "Java is a high-level, class-based, object-oriented programming language "
        "that is designed to have as few implementation dependencies as possible. "
        "It is a general-purpose programming language intended to let programmers "
        "write once, run anywhere, meaning that compiled Java code can run on all "
        "platforms that support Java without the need to recompile."
    ),
    'https://en.wikipedia.org/wiki/Programming_language': (
        "A programming language is a system of notation for writing computer programs. "
        "Programming languages are described in terms of their syntax and semantics, "
        "usually defined by a formal language. The description of a programming "
        "language is usually split into the two components of syntax and semantics."
    ),
}
