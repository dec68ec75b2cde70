"""Stage 1: keep strong, peaked collocates and find their interesting distances."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from ._errors import DegenerateStatisticsError
from ._statistics import StatisticsEngine, spread
from ._types import ALL_OFFSETS, N_SLOTS, S1Candidate

if TYPE_CHECKING:
    from ._table import BigramTable
    from ._types import CollocateRecord

logger = logging.getLogger(__name__)


def distances_above_peak(record: CollocateRecord, k1: float) -> tuple[int, ...]:
    """Offsets where the collocate occurs anomalously often.

    A slot qualifies when its count is strictly greater than
    ``frequency // 10 + k1 * sqrt(spread)`` (Smadja's condition C3).
    """
    min_peak = record.frequency // N_SLOTS + k1 * math.sqrt(spread(record))
    return tuple(
        off.value for off in ALL_OFFSETS
        if record.histogram[off.slot] > min_peak
    )


def select_candidates(
    table: BigramTable, k0: float, k1: float, u0: float
) -> list[S1Candidate]:
    """Collocates with ``strength >= k0`` and ``spread >= u0``, in table order.

    Tables too small (or too uniform) for a z-score produce no candidates.
    """
    engine = StatisticsEngine(table)
    passed: list[S1Candidate] = []
    try:
        for record in table.records():
            strength = engine.strength(record)
            u = engine.spread(record)
            if strength >= k0 and u >= u0:
                passed.append(S1Candidate(
                    anchor=table.anchor,
                    collocate=record.collocate,
                    strength=strength,
                    spread=u,
                    distances=distances_above_peak(record, k1),
                ))
    except DegenerateStatisticsError as e:
        logger.warning("No Stage 1 candidates: %s", e)
        return []

    logger.info(
        "Stage 1 for %r: %d of %d collocates passed (k0=%s, U0=%s)",
        table.anchor, len(passed), len(table), k0, u0,
    )
    return passed
