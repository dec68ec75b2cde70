"""Line-oriented corpus access: one sentence per line."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator

import ahocorasick

from ._errors import CorpusError
from ._sentence import strip_punctuation
from ._stop_words import FREQUENCY_STOP_WORDS, PUNCTUATION_TOKENS

logger = logging.getLogger(__name__)


def _token_automaton(words: Iterable[str]) -> ahocorasick.Automaton:
    """Automaton matching each word as a space-delimited token.

    Patterns are padded with spaces and meant to run over a padded line,
    so a hit means the word is a whole token somewhere in the line.
    """
    ac = ahocorasick.Automaton()
    for w in words:
        ac.add_word(f" {w} ", w)
    ac.make_automaton()
    return ac


def _tokens_present(ac: ahocorasick.Automaton, line: str) -> set[str]:
    return {w for _, w in ac.iter(f" {line} ")}


class SentenceIndex:
    """Sentence queries over a single corpus file.

    Every query rescans the file; nothing is held in memory between calls.
    """

    __slots__ = ("_path", "_encoding", "_stop_words")

    def __init__(
        self,
        path: Path | str,
        *,
        encoding: str = "utf-8",
        stop_words: frozenset[str] = FREQUENCY_STOP_WORDS,
    ) -> None:
        self._path = Path(path)
        self._encoding = encoding
        self._stop_words = stop_words

    @property
    def path(self) -> Path:
        return self._path

    def lines(self) -> Iterator[str]:
        """Yield corpus lines without their line terminators."""
        try:
            with open(self._path, encoding=self._encoding) as f:
                for line in f:
                    yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusError(f"cannot read corpus {self._path}: {e}") from e

    def sentences_containing(self, word: str) -> list[str]:
        """Raw lines containing ``word`` as a space-delimited token."""
        ac = _token_automaton([word])
        found = [line for line in self.lines() if _tokens_present(ac, line)]
        logger.debug("Found %d sentences with %r", len(found), word)
        return found

    def sentences_containing_pair(
        self, w1: str, w2: str, distance: int
    ) -> list[str]:
        """Punctuation-stripped lines where ``w2`` sits ``distance`` tokens from ``w1``.

        Every occurrence of ``w1`` in a line is tried.
        """
        required = {w1, w2}
        ac = _token_automaton(required)
        found: list[str] = []
        for line in self.lines():
            record = strip_punctuation(line)
            if not required <= _tokens_present(ac, record):
                continue
            words = record.split(" ")
            n = len(words)
            for i, tok in enumerate(words):
                j = i + distance
                if tok == w1 and 0 <= j < n and words[j] == w2:
                    found.append(record)
                    break
        logger.debug(
            "Found %d sentences with %r at %+d from %r",
            len(found), w2, distance, w1,
        )
        return found

    def word_counts(self) -> Counter[str]:
        """Token counts over the whole corpus, minus punctuation and stop words."""
        counts: Counter[str] = Counter()
        for line in self.lines():
            for tok in line.split(" "):
                if not tok or tok in PUNCTUATION_TOKENS or tok in self._stop_words:
                    continue
                counts[tok] += 1
        return counts

    def word_frequencies(self, min_frequency: int) -> set[str]:
        """Words occurring at least ``min_frequency`` times."""
        return {
            w for w, c in self.word_counts().items() if c >= min_frequency
        }
