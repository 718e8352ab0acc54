"""Command-line entry point for text-tally."""

from __future__ import annotations

import logging
import sys

import click

from .commands import count as count_cmd
from .core.config import ConfigManager

# Setup logging early so submodules inherit sane defaults
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@click.command()
@click.argument("url", required=False)
@click.option(
    "--config",
    default=None,
    help="Path to config file (defaults to data_dir/config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(url: str | None, config: str | None, verbose: bool) -> None:
    """Count the words of every .txt file linked from the page at URL."""
    logger.info("Program started")
    if url is None:
        logger.error("Error reading url from command line: no url given")
        click.echo("Error reading url from command line: no url given", err=True)
        sys.exit(1)

    try:
        config_manager = ConfigManager(config)
        if verbose:
            logging.getLogger().setLevel(logging.DEBUG)
        else:
            level = config_manager.get("logging", "level", "INFO")
            if isinstance(getattr(logging, str(level).upper(), None), int):
                logging.getLogger().setLevel(str(level).upper())

        count_cmd.run(url, config_manager=config_manager)
    except Exception as exc:
        logger.error(str(exc))
        click.echo(f"❌ {exc}", err=True)
        sys.exit(1)

    logger.info("Exiting program")


if __name__ == "__main__":  # pragma: no cover - script entry
    cli()
