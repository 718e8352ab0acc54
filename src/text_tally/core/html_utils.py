"""HTML helpers built on BeautifulSoup."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from bs4 import BeautifulSoup

from .errors import ParseError

logger = logging.getLogger(__name__)


def extract_hrefs(html: Union[str, bytes], url: Optional[str] = None) -> List[str]:
    """Return the ``href`` of every ``<a>`` element in document order.

    Values are returned exactly as written in the markup. Anchors without an
    ``href`` attribute are skipped.

    Raises:
        ParseError: If the markup cannot be parsed
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as e:
        raise ParseError(f"Could not parse HTML: {e}", url) from e

    hrefs: List[str] = []
    for anchor in soup.find_all("a"):
        href = anchor.get("href")
        if href is None:
            logger.debug("Skipping anchor without href: %s", anchor)
            continue
        hrefs.append(href)
    return hrefs


__all__ = ["extract_hrefs"]
