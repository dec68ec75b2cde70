"""BigramTable: positional histograms of every collocate of one anchor word."""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Iterator

from ._errors import AnchorNotFoundError
from ._sentence import tokenize
from ._stop_words import CLOSED_CLASS_WORDS
from ._types import WINDOW, CollocateRecord

logger = logging.getLogger(__name__)


class AnchorMatch(enum.Enum):
    """Which anchor occurrence(s) in a sentence serve as reference position."""

    FIRST = "first"
    LAST = "last"
    ALL = "all"


class BigramTable:
    """Per-anchor table of (collocate -> positional histogram).

    Built fresh for each scan and read-only once the scan is done.
    """

    __slots__ = (
        "_anchor", "_records", "_closed_class", "_anchor_match",
        "_skip_empty_tokens",
    )

    def __init__(
        self,
        anchor: str,
        *,
        closed_class: frozenset[str] = CLOSED_CLASS_WORDS,
        anchor_match: AnchorMatch = AnchorMatch.LAST,
        skip_empty_tokens: bool = False,
    ) -> None:
        self._anchor = anchor
        self._records: dict[str, CollocateRecord] = {}
        self._closed_class = closed_class
        self._anchor_match = anchor_match
        # Runs of spaces leave "" tokens, which are counted as collocates
        # unless this is set.
        self._skip_empty_tokens = skip_empty_tokens

    @property
    def anchor(self) -> str:
        return self._anchor

    @property
    def total_occurrences(self) -> int:
        """Sum of all record frequencies."""
        return sum(r.frequency for r in self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, collocate: object) -> bool:
        return collocate in self._records

    def __getitem__(self, collocate: str) -> CollocateRecord:
        return self._records[collocate]

    def records(self) -> Iterator[CollocateRecord]:
        """Iterate records in lexicographic collocate order."""
        for key in sorted(self._records):
            yield self._records[key]

    # -- Building --

    def _anchor_positions(self, words: list[str]) -> list[int]:
        positions = [i for i, tok in enumerate(words) if tok == self._anchor]
        if not positions or self._anchor_match is AnchorMatch.ALL:
            return positions
        if self._anchor_match is AnchorMatch.FIRST:
            return positions[:1]
        return positions[-1:]

    def add_sentence(self, sentence: str, include_closed_class: bool = False) -> None:
        """Record every collocate within +/-5 tokens of the anchor.

        Raises:
            AnchorNotFoundError: If the anchor is not a token of the
                punctuation-stripped sentence. The table is left unchanged.
        """
        words = tokenize(sentence)
        positions = self._anchor_positions(words)
        if not positions:
            raise AnchorNotFoundError(
                f"sentence does not contain word {self._anchor!r}: {sentence!r}"
            )

        last = len(words) - 1
        for center in positions:
            start = max(0, center - WINDOW)
            stop = min(last, center + WINDOW)
            for i in range(start, stop + 1):
                tok = words[i]
                if tok == self._anchor:
                    continue
                if not tok and self._skip_empty_tokens:
                    continue
                if not include_closed_class and tok in self._closed_class:
                    continue
                record = self._records.get(tok)
                if record is None:
                    record = self._records[tok] = CollocateRecord(tok)
                record.add_instance(i - center)

    def add_sentences(
        self, sentences: Iterable[str], include_closed_class: bool = False
    ) -> int:
        """Add many sentences, skipping those without the anchor.

        Returns the number of sentences actually added.
        """
        added = 0
        for s in sentences:
            try:
                self.add_sentence(s, include_closed_class)
            except AnchorNotFoundError as e:
                logger.warning("Skipping sentence: %s", e)
                continue
            added += 1
        logger.debug(
            "Table for %r: %d sentences, %d collocates, %d occurrences",
            self._anchor, added, len(self._records), self.total_occurrences,
        )
        return added
