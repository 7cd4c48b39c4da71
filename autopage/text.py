"""
Text helpers for splitting paragraphs between words.
"""

from __future__ import annotations

import re
from typing import List, Sequence

_WHITESPACE_RUN = re.compile(r"(\s+)")


def split_words(text: str) -> List[str]:
    """Split text into words and the whitespace runs between them.

    Whitespace is kept as its own token so that joining the result
    reproduces ``text`` exactly.

    Example:
        >>> split_words("Hello,  big\\nworld ")
        ['Hello,', '  ', 'big', '\\n', 'world', ' ']
    """

    return [token for token in _WHITESPACE_RUN.split(text) if token]


def join_tokens(tokens: Sequence[str], start: int = 0, stop: int | None = None) -> str:
    """Return the text for ``tokens[start:stop]``."""

    return "".join(tokens[start:stop])
