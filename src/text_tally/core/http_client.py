"""Shared HTTP client for fetching the seed page and the text files."""

import locale
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import requests

from .errors import FetchError, ReadError

logger = logging.getLogger(__name__)


class HTTPClient:
    """Thin wrapper around a ``requests.Session``.

    Every request is a single GET with no retries. Responses are opened,
    drained and closed before the caller moves on, on both the success and
    the error path.

    Args:
        timeout: Request timeout in seconds (default: None, i.e. no timeout)
        encoding: Codec used to decode text files (default: platform preferred encoding)
        session: Optional pre-built session, mainly for tests
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        encoding: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.session = session or requests.Session()
        self.timeout = timeout
        self.encoding = encoding or locale.getpreferredencoding(False)

    def get_content(self, url: str) -> bytes:
        """Fetch *url* and return the raw response body.

        Raises:
            FetchError: On network errors or a non-2xx status
        """
        try:
            with self.session.get(url, timeout=self.timeout) as r:
                r.raise_for_status()
                logger.info(f"Connected to {url}")
                return r.content
        except requests.RequestException as e:
            raise FetchError(str(e), url) from e

    @contextmanager
    def stream_lines(self, url: str) -> Iterator[Iterator[str]]:
        """Open *url* as a stream and yield an iterator over its decoded lines.

        Line terminators are stripped. Bytes that are invalid in the
        configured encoding are replaced rather than rejected.

        Raises:
            FetchError: If the request fails or returns a non-2xx status
            ReadError: If the connection breaks while the lines are consumed
        """
        try:
            response = self.session.get(url, stream=True, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(str(e), url) from e

        with response:
            try:
                response.raise_for_status()
            except requests.RequestException as e:
                raise FetchError(str(e), url) from e
            logger.debug(f"Connected to {url}")
            yield self._decode_lines(response, url)

    def _decode_lines(self, response: requests.Response, url: str) -> Iterator[str]:
        try:
            for raw in response.iter_lines():
                yield raw.decode(self.encoding, errors="replace")
        except requests.RequestException as e:
            raise ReadError(str(e), url) from e

    def close(self):
        """Close the underlying session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


__all__ = ["HTTPClient"]
