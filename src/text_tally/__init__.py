from __future__ import annotations

import os
from collections import Counter
from typing import IO, Any, Dict, Optional

from .commands import count as count_cmd
from .core.config import ConfigManager, default_config_path
from .core.errors import FetchError, ParseError, ReadError, TallyError
from .core.text_utils import tokenize
from .processors.link_collector import collect_links
from .processors.reporter import format_report, print_report
from .processors.word_tally import count_words, scrape_words

__all__ = [
    'run',
    'status',
    'collect_links',
    'count_words',
    'scrape_words',
    'tokenize',
    'format_report',
    'print_report',
    'TallyError',
    'FetchError',
    'ParseError',
    'ReadError',
]


def run(url: str, config_path: Optional[str] = None, *, out: Optional[IO[str]] = None) -> Counter:
    """Count the words of every text file linked from *url* and print the report.

    Args:
        url: Seed page address.
        config_path: Path to the YAML config; defaults to ~/.text_tally/config.yaml.
        out: Stream for the report; standard output when omitted.

    Returns:
        The word frequency table.
    """
    return count_cmd.run(url, config_path, out=out)


def status(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Return configuration status for programmatic use."""
    cfg_path = str(config_path or default_config_path())
    info: Dict[str, Any] = {'config_path': cfg_path}
    if not os.path.exists(cfg_path):
        info.update({'valid': False, 'error': f'Config file not found: {cfg_path}'})
        return info
    try:
        cm = ConfigManager(cfg_path)
        info.update({'valid': cm.validate_config(), 'config': cm.load_config()})
        return info
    except Exception as e:
        info.update({'valid': False, 'error': str(e)})
        return info
