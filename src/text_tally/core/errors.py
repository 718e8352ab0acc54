"""Error kinds raised by the network and parsing steps.

The pipeline decides per step what to do with them: a failure on the seed
page is reported and treated as "no links", a failure on any text file ends
the run.
"""

from __future__ import annotations

from typing import Optional


class TallyError(Exception):
    """Base class for failures tied to a single URL."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class FetchError(TallyError):
    """The request could not be made or came back with a non-2xx status."""


class ParseError(TallyError):
    """The seed page could not be parsed as HTML."""


class ReadError(TallyError):
    """The text stream broke or could not be decoded while reading."""


__all__ = ["TallyError", "FetchError", "ParseError", "ReadError"]
