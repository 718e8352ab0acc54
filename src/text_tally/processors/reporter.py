"""Plain-text report of the word frequency table."""

from typing import IO, Mapping, Optional

import click

HEADER_TEMPLATE = "\n========There are {count} items in the map========\n"
LINE_TEMPLATE = "[{word}]\t{count}\n"


def format_report(frequency: Mapping[str, int]) -> str:
    """Render the header and one line per word, sorted ascending by word."""
    parts = [HEADER_TEMPLATE.format(count=len(frequency))]
    for word in sorted(frequency):
        parts.append(LINE_TEMPLATE.format(word=word, count=frequency[word]))
    return "".join(parts)


def print_report(frequency: Mapping[str, int], file: Optional[IO[str]] = None) -> None:
    """Write the report to *file* (standard output by default)."""
    click.echo(format_report(frequency), file=file, nl=False)


__all__ = ["format_report", "print_report"]
