"""
Link discovery on the seed page.
Fetches one HTML page and builds the list of text-file URLs it links to.
"""

import logging
from typing import List

from ..core.html_utils import extract_hrefs
from ..core.http_client import HTTPClient

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".txt"


def select_links(address: str, hrefs: List[str], suffix: str = DEFAULT_SUFFIX) -> List[str]:
    """Build URLs from the hrefs that end with *suffix*.

    Each URL is ``address + href``, concatenated verbatim; no URL joining is
    applied. Order and duplicates follow *hrefs*.
    """
    urls = []
    for href in hrefs:
        if href.endswith(suffix):
            urls.append(address + href)
            logger.debug(f"Added url: {address}{href}")
        else:
            logger.debug(f"Did not create url from href: {href}")
    return urls


def collect_links(address: str, client: HTTPClient, suffix: str = DEFAULT_SUFFIX) -> List[str]:
    """Find all text-file URLs linked from the page at *address*.

    Args:
        address: Seed page URL; also used as the prefix of every result
        client: HTTP client used for the single GET
        suffix: Literal, case-sensitive ending an href must have

    Returns:
        URLs in document order, duplicates included

    Raises:
        FetchError: If the page cannot be fetched
        ParseError: If the page cannot be parsed
    """
    html = client.get_content(address)
    hrefs = extract_hrefs(html, address)
    logger.debug(f"Found {len(hrefs)} anchors with an href on {address}")
    return select_links(address, hrefs, suffix)


__all__ = ["collect_links", "select_links", "DEFAULT_SUFFIX"]
