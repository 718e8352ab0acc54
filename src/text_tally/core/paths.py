"""Utilities for locating the runtime data directory."""

from __future__ import annotations

import os
from pathlib import Path

_ENV_VAR = "TEXT_TALLY_DATA_DIR"
_DEFAULT_DIRNAME = ".text_tally"


def get_data_dir() -> Path:
    """Return the configured runtime data directory.

    Honors the TEXT_TALLY_DATA_DIR environment variable; otherwise defaults
    to ~/.text_tally on the current platform. A blank override falls back to
    the default as well.
    """
    override = os.getenv(_ENV_VAR)
    if override is not None and override.strip():
        return Path(override.strip()).expanduser().resolve()
    return (Path.home() / _DEFAULT_DIRNAME).resolve()


def ensure_data_dir() -> Path:
    """Ensure the data directory exists on disk and return it."""
    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


__all__ = [
    "get_data_dir",
    "ensure_data_dir",
]
