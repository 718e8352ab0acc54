"""
Count command implementation.
Collects the text-file links on the seed page, tallies their words and
prints the frequency table.

Error policy
------------

- Seed page fetch/parse failures are reported and treated as "no links";
  the run continues and prints an empty report.
- Any failure on a text file propagates to the caller, which ends the run
  without printing a report.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import IO, Optional

import click

from ..core.config import ConfigManager
from ..core.errors import FetchError, ParseError
from ..core.http_client import HTTPClient
from ..processors.link_collector import collect_links
from ..processors.reporter import print_report
from ..processors.word_tally import count_words

logger = logging.getLogger(__name__)


def run(
    url: str,
    config_path: Optional[str] = None,
    *,
    config_manager: Optional[ConfigManager] = None,
    out: Optional[IO[str]] = None,
) -> Counter:
    """Run link discovery, word tally and report for *url*.

    Args:
        url: Seed page address
        config_path: Path to the config file (defaults to ~/.text_tally/config.yaml)
        config_manager: Already-loaded manager; takes precedence over *config_path*
        out: Stream for the report (standard output by default)

    Returns:
        The final word frequency table

    Raises:
        ValueError: If the configuration is invalid
        FetchError: If a text file cannot be fetched
        ReadError: If a text file stream breaks mid-read
    """
    cfg = config_manager or ConfigManager(config_path)
    if not cfg.validate_config():
        raise ValueError(f"Invalid configuration in {cfg.config_path}")

    suffix = cfg.get('links', 'suffix')
    with HTTPClient(
        timeout=cfg.get('http', 'timeout'),
        encoding=cfg.get('http', 'encoding'),
    ) as client:
        try:
            urls = collect_links(url, client, suffix)
        except (FetchError, ParseError) as e:
            logger.error(f"Could not collect links from {url}: {e}")
            click.echo(f"Could not collect links from {url}: {e}", err=True)
            urls = []
        logger.info(f"There are {len(urls)} urls in the list.")

        frequency = count_words(urls, client)
    logger.info(f"There are {len(frequency)} words in the table.")

    print_report(frequency, file=out)
    logger.info("Report has been printed.")
    return frequency
