"""Xtract: Stage 1 + Stage 2 over a corpus for one anchor word."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import TYPE_CHECKING

from ._config import XtractConfig
from ._errors import DeadlineExceededError, XtractError
from ._stage1 import select_candidates
from ._stage2 import consolidate
from ._table import BigramTable
from ._types import CollocationResult

if TYPE_CHECKING:
    from ._corpus import SentenceIndex
    from ._types import S1Candidate

logger = logging.getLogger(__name__)


class Deadline:
    """Wall-clock budget measured on the monotonic clock."""

    __slots__ = ("_expires",)

    def __init__(self, seconds: float) -> None:
        self._expires = time.monotonic() + seconds

    def remaining(self) -> float:
        return max(0.0, self._expires - time.monotonic())

    @property
    def expired(self) -> bool:
        return time.monotonic() >= self._expires

    def check(self, what: str) -> None:
        if self.expired:
            raise DeadlineExceededError(f"deadline exceeded during {what}")


class Xtract:
    """Collocation extractor bound to one corpus and one configuration."""

    __slots__ = ("_index", "_config")

    def __init__(
        self, index: SentenceIndex, config: XtractConfig | None = None
    ) -> None:
        self._index = index
        self._config = config if config is not None else XtractConfig()

    @property
    def config(self) -> XtractConfig:
        return self._config

    def _new_table(self, word: str) -> BigramTable:
        return BigramTable(
            word,
            closed_class=self._config.closed_class,
            anchor_match=self._config.anchor_match,
            skip_empty_tokens=self._config.skip_empty_tokens,
        )

    def normalize(self, word: str) -> str:
        return word.lower() if self._config.lowercase_anchor else word

    # -- Stages --

    def stage_one(self, word: str) -> tuple[BigramTable, list[S1Candidate]]:
        """Build the closed-class-free table for ``word`` and filter it."""
        word = self.normalize(word)
        table = self._new_table(word)
        table.add_sentences(self._index.sentences_containing(word))
        cfg = self._config
        return table, select_candidates(table, cfg.k0, cfg.k1, cfg.u0)

    def stage_two_table(
        self, candidate: S1Candidate, distance: int
    ) -> tuple[BigramTable, int]:
        """Table over sentences where the candidate sits at ``distance``.

        Closed-class words are kept so function words of fixed phrases
        can surface. Returns the table and the number of sentences in it.
        """
        sentences = self._index.sentences_containing_pair(
            candidate.anchor, candidate.collocate, distance,
        )
        table = self._new_table(candidate.anchor)
        added = table.add_sentences(sentences, include_closed_class=True)
        return table, added

    def stage_two(self, candidate: S1Candidate, distance: int) -> CollocationResult:
        """Consolidate one (anchor, collocate, distance) triple.

        Failures are reported in the result rather than raised.
        """
        n_sentences = 0
        try:
            table, n_sentences = self.stage_two_table(candidate, distance)
            template = consolidate(table, self._config.threshold)
        except XtractError as e:
            logger.warning(
                "Stage 2 failed for %r %r %+d: %s",
                candidate.anchor, candidate.collocate, distance, e,
            )
            return CollocationResult(
                candidate=candidate, distance=distance,
                n_sentences=n_sentences, error=str(e),
            )
        return CollocationResult(
            candidate=candidate, distance=distance,
            n_sentences=n_sentences, template=template,
        )

    def run_stage_two(
        self,
        candidates: list[S1Candidate],
        deadline: Deadline | None = None,
    ) -> list[CollocationResult]:
        """Stage 2 for every (candidate, distance), in Stage 1 order."""
        triples = [(c, d) for c in candidates for d in c.distances]
        if not triples:
            return []

        if self._config.workers == 1:
            results: list[CollocationResult] = []
            for c, d in triples:
                if deadline is not None:
                    deadline.check(f"stage 2 for {c.collocate!r} {d:+d}")
                results.append(self.stage_two(c, d))
            return results

        # Not a with-block: leaving one waits for running rescans, which
        # would overrun the deadline.
        pool = ThreadPoolExecutor(max_workers=self._config.workers)
        try:
            futures = [pool.submit(self.stage_two, c, d) for c, d in triples]
            results = []
            for fut in futures:
                timeout = deadline.remaining() if deadline is not None else None
                results.append(fut.result(timeout=timeout))
        except FutureTimeoutError:
            raise DeadlineExceededError("deadline exceeded during stage 2") from None
        finally:
            pool.shutdown(wait=False, cancel_futures=True)
        return results

    def collocations(
        self, word: str, deadline: Deadline | None = None
    ) -> list[CollocationResult]:
        """Run both stages for ``word``.

        If no deadline is given and the config sets a timeout, one is
        started here.
        """
        if deadline is None and self._config.timeout is not None:
            deadline = Deadline(self._config.timeout)
        _, candidates = self.stage_one(word)
        if deadline is not None:
            deadline.check(f"stage 1 for {word!r}")
        return self.run_stage_two(candidates, deadline)
