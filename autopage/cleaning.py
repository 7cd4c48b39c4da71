"""
Small, focused text cleaning utilities for ingested HTML.
"""

import re

# U+200B is kept; runs of it mark the caret position and must survive.
_ZERO_WIDTH = re.compile("[\u200c\u200d\u2060\ufeff]")
_NON_BREAKING_SPACES = re.compile("[\u00a0\u202f]")
_LINE_SEPARATORS = re.compile("[\u2028\u2029]")


def normalize_whitespace(value: str) -> str:
    """Collapse unusual whitespace into single ASCII spaces.

    Example:
        >>> normalize_whitespace(" a\\u00a0b\\ufeffb\\n c ")
        'a bb c'
    """

    clean = _NON_BREAKING_SPACES.sub(" ", value)
    clean = _ZERO_WIDTH.sub("", clean)
    clean = _LINE_SEPARATORS.sub(" ", clean)
    clean = re.sub(r"\s+", " ", clean)
    return clean.strip()


def is_blank(value: str) -> bool:
    """Return True when ``value`` holds nothing but whitespace.

    Example:
        >>> is_blank("\\ufeff \\n")
        True
    """

    return not normalize_whitespace(value)
