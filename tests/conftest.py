"""Shared fixtures: an in-memory stand-in for ``requests.Session``."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
import requests

# Ensure the repository's src/ directory is importable without installation.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


class FakeRaw(io.BytesIO):
    """Raw body that records when requests hands the connection back."""

    def __init__(self, body: bytes = b"") -> None:
        super().__init__(body)
        self.released = False

    def release_conn(self) -> None:
        self.released = True


class BrokenRaw(FakeRaw):
    """Raw body that delivers its first chunk and then drops the connection."""

    def __init__(self, first_chunk: bytes) -> None:
        super().__init__(first_chunk)
        self._sent = False

    def read(self, *args, **kwargs):
        if not self._sent:
            self._sent = True
            return super().read()
        raise requests.exceptions.ChunkedEncodingError("Connection broken: IncompleteRead")


def make_response(url: str, raw: io.BytesIO, status: int = 200) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.reason = "OK" if status < 400 else "Not Found"
    response.raw = raw
    return response


class FakeSession:
    """Serves canned bodies keyed by URL; unknown URLs refuse the connection.

    Values in *pages* may be ``bytes`` (served with status 200), a
    ``(status, bytes)`` tuple, or a raw object such as :class:`BrokenRaw`.
    """

    def __init__(self, pages=None) -> None:
        self.pages = dict(pages or {})
        self.requested = []
        self.raws = []
        self.closed = False

    def get(self, url, **kwargs):
        self.requested.append(url)
        if url not in self.pages:
            raise requests.exceptions.ConnectionError(f"Connection refused: {url}")
        page = self.pages[url]
        status = 200
        if isinstance(page, tuple):
            status, page = page
        raw = page if isinstance(page, io.BytesIO) else FakeRaw(page)
        self.raws.append(raw)
        return make_response(url, raw, status)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session():
    """Factory building a :class:`FakeSession` from a ``{url: body}`` mapping."""
    return FakeSession


@pytest.fixture
def broken_raw():
    return BrokenRaw


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the runtime data directory at a temp folder."""
    target = tmp_path / "data"
    monkeypatch.setenv("TEXT_TALLY_DATA_DIR", str(target))
    return target
