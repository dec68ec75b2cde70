"""Xtract: collocation extraction after Smadja (1993), Stages 1 and 2."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._config import XtractConfig
from ._corpus import SentenceIndex
from ._errors import (
    AnchorNotFoundError,
    CorpusError,
    DeadlineExceededError,
    DegenerateStatisticsError,
    OffsetOutOfRangeError,
    XtractError,
)
from ._extractor import Deadline, Xtract
from ._format import (
    format_candidates,
    format_histogram,
    format_result,
    format_table4,
    format_template,
)
from ._sentence import strip_punctuation, tokenize
from ._stage1 import distances_above_peak, select_candidates
from ._stage2 import consolidate
from ._statistics import StatisticsEngine
from ._stop_words import CLOSED_CLASS_WORDS
from ._table import AnchorMatch, BigramTable
from ._types import (
    ALL_OFFSETS,
    CollocateRecord,
    CollocationResult,
    NgramTemplate,
    RelativeOffset,
    S1Candidate,
)

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "open_corpus",
    "ALL_OFFSETS",
    "AnchorMatch",
    "AnchorNotFoundError",
    "BigramTable",
    "CLOSED_CLASS_WORDS",
    "CollocateRecord",
    "CollocationResult",
    "CorpusError",
    "Deadline",
    "DeadlineExceededError",
    "DegenerateStatisticsError",
    "NgramTemplate",
    "OffsetOutOfRangeError",
    "RelativeOffset",
    "S1Candidate",
    "SentenceIndex",
    "StatisticsEngine",
    "Xtract",
    "XtractConfig",
    "XtractError",
    "consolidate",
    "distances_above_peak",
    "format_candidates",
    "format_histogram",
    "format_result",
    "format_table4",
    "format_template",
    "select_candidates",
    "strip_punctuation",
    "tokenize",
]


def open_corpus(
    path: Path | str, config: XtractConfig | None = None
) -> Xtract:
    """Return a ready-to-use Xtract over the corpus file at ``path``.

    Args:
        path: Text file with one sentence per line.
        config: Thresholds and scan options. Defaults to XtractConfig().
    """
    if config is None:
        config = XtractConfig()
    index = SentenceIndex(path, encoding=config.encoding)
    return Xtract(index, config)
