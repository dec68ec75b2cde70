"""Punctuation stripping and whitespace tokenization."""

from __future__ import annotations

import re

# A single punctuation character preceded by a space. Only the space and
# that one character are removed, so "dog ." becomes "dog".
_PUNCT_RE = re.compile(r' [.!?,;:\-()"%#]')


def strip_punctuation(text: str) -> str:
    """Remove space-preceded punctuation marks from a sentence."""
    return _PUNCT_RE.sub("", text)


def tokenize(text: str) -> list[str]:
    """Strip punctuation and split on single spaces.

    Interior empty strings (from runs of spaces) keep their position so
    that offsets match the raw line; trailing empties are dropped.
    """
    words = strip_punctuation(text).split(" ")
    while len(words) > 1 and words[-1] == "":
        words.pop()
    return words
