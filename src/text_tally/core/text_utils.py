"""Tokenization rules shared by the word tally."""

import re
from typing import List

# One or more characters outside [a-zA-Z0-9_]
_NON_WORD = re.compile(r"\W+", re.ASCII)


def tokenize(line: str) -> List[str]:
    """Split *line* into lowercase word tokens.

    The line is split at every run of characters other than ASCII letters,
    digits and underscore, so accented letters and non-ASCII digits act as
    separators. Empty strings produced by leading/trailing separators are
    dropped and each remaining token is lowercased. Tokens are pure ASCII,
    so tokenizing a token again returns it unchanged.

    Args:
        line: One line of text, without its terminator

    Returns:
        Tokens in the order they appear

    Examples:
        >>> tokenize("The cat sat. The CAT ran!")
        ['the', 'cat', 'sat', 'the', 'cat', 'ran']
        >>> tokenize("café naïve")
        ['caf', 'na', 've']
        >>> tokenize("  --  ")
        []
    """
    return [token.lower() for token in _NON_WORD.split(line) if token]


__all__ = ["tokenize"]
