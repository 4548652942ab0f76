"""
Term counting for a single page.
"""
import logging
import unicodedata

from nltk.probability import FreqDist
from nltk.tokenize import RegexpTokenizer

logger = logging.getLogger("indexer")

# Whitespace separates terms; symbols such as '+' or '$' stay inside them
_tokenizer = RegexpTokenizer(r"\s+", gaps=True)


def strip_punctuation(text):
    """Replace every Unicode punctuation character (category P*) with a space."""
    return ''.join(
        ' ' if unicodedata.category(ch).startswith('P') else ch
        for ch in text
    )

def tokenize(text):
    """Split text into lowercased terms."""
    if not text:
        return []
    return _tokenizer.tokenize(strip_punctuation(text).lower())


class TermCounter:
    """Map from term to the number of times it appears on one page."""
    def __init__(self, label):
        self.label = label
        self.counts = FreqDist()

    def get_label(self):
        return self.label

    def size(self):
        """Total number of terms counted."""
        return self.counts.N()

    def process_elements(self, paragraphs):
        """Count the terms in a sequence of paragraphs.

        Each paragraph is either a string or an element exposing get_text(),
        such as a parsed HTML node.
        """
        for paragraph in paragraphs:
            if hasattr(paragraph, 'get_text'):
                paragraph = paragraph.get_text()
            self.process_text(paragraph)

    def process_text(self, text):
        for term in tokenize(text):
            self.increment(term)

    def increment(self, term):
        self.counts[term] += 1

    def put(self, term, count):
        if count <= 0:
            # absence of a term already means zero
            self.counts.pop(term, None)
        else:
            self.counts[term] = count

    def get(self, term):
        return self.counts.get(term, 0)

    def keys(self):
        return set(self.counts.keys())

    def items(self):
        return self.counts.items()

    def __len__(self):
        return len(self.counts)

    def __repr__(self):
        return f"TermCounter({self.label!r}, {len(self.counts)} terms)"


def count_terms(url, content):
    """Build a TermCounter for a page from a string or a sequence of paragraphs."""
    counter = TermCounter(url)
    if isinstance(content, str):
        counter.process_text(content)
    else:
        counter.process_elements(content)
    logger.debug(f"Counted {counter.size()} terms ({len(counter)} distinct) for {url}")
    return counter
