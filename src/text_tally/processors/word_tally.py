"""
Word frequency counting across the discovered text files.
Streams each file line by line and accumulates lowercase word counts.
"""

import logging
from collections import Counter
from typing import Iterable, Optional

from ..core.http_client import HTTPClient
from ..core.text_utils import tokenize

logger = logging.getLogger(__name__)


def add_line(line: str, frequency: Counter) -> int:
    """Tokenize *line* into *frequency* and return how many tokens were added."""
    words = tokenize(line)
    frequency.update(words)
    return len(words)


def scrape_words(address: str, client: HTTPClient, frequency: Counter) -> int:
    """Add the words of one text file to *frequency* in place.

    Returns:
        Number of tokens counted from this file

    Raises:
        FetchError: If the file cannot be fetched
        ReadError: If the stream breaks while reading
    """
    logger.debug(f"Scraping words from {address}")
    added = 0
    with client.stream_lines(address) as lines:
        for line in lines:
            count = add_line(line, frequency)
            added += count
            if count:
                logger.debug(f"Added {count} words. There are now {len(frequency)} words in the table.")
    logger.info(f"Counted {added} words from {address}")
    return added


def count_words(
    urls: Iterable[str],
    client: HTTPClient,
    frequency: Optional[Counter] = None,
) -> Counter:
    """Tally the words of every URL, in order, into one shared table.

    Stops at the first failing URL and lets its error propagate; no partial
    table is returned in that case.

    Args:
        urls: Text-file URLs to process sequentially
        client: HTTP client used for each GET
        frequency: Existing table to extend; a new one is created if omitted

    Returns:
        The word frequency table
    """
    if frequency is None:
        frequency = Counter()
    for url in urls:
        scrape_words(url, client, frequency)
    return frequency


__all__ = ["add_line", "scrape_words", "count_words"]
