"""Plain-text rendering of tables and templates (Smadja's Tables 2 and 4)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from ._errors import DegenerateStatisticsError
from ._stage1 import distances_above_peak
from ._statistics import StatisticsEngine
from ._types import ALL_OFFSETS

if TYPE_CHECKING:
    from ._table import BigramTable
    from ._types import CollocationResult, NgramTemplate, S1Candidate

logger = logging.getLogger(__name__)


def format_histogram(table: BigramTable) -> str:
    """Frequency and per-offset counts of every collocate."""
    header = ["Freq"] + [f"p{off.value}" for off in ALL_OFFSETS] + ["w, wi"]
    lines = ["\t".join(header)]
    for record in table.records():
        cells = [str(record.frequency)]
        cells += [str(c) for c in record.histogram]
        cells.append(f"{table.anchor}, {record.collocate}")
        lines.append("\t".join(cells))
    return "\n".join(lines) + "\n"


def format_table4(table: BigramTable) -> str:
    """Smadja's Table 4: bigrams with strength > 1 and spread > 3.

    Fixed cut-offs and k1 = 1, independent of the run's thresholds. Each
    distance is followed by a space. Tables too small for a z-score print
    the header only.
    """
    output = "distance\tstrength\tspread\t\twi\twj\n"
    engine = StatisticsEngine(table)
    try:
        for record in table.records():
            strength = engine.strength(record)
            u = engine.spread(record)
            if strength > 1 and u > 3:
                d_string = "".join(f"{d} " for d in distances_above_peak(record, 1))
                output += (
                    f"{d_string}\t\t{int(strength)}\t\t{u}\t\t"
                    f"{table.anchor}, {record.collocate}\n"
                )
    except DegenerateStatisticsError as e:
        logger.debug("Table 4 left empty: %s", e)
    return output


def format_candidates(candidates: Iterable[S1Candidate]) -> str:
    """Stage 1 survivors under the run's thresholds (not Table 4)."""
    lines = ["distance\tstrength\tspread\t\tw, wi"]
    for c in candidates:
        distances = " ".join(str(d) for d in c.distances)
        lines.append(
            f"{distances}\t\t{int(c.strength)}\t\t{c.spread}\t\t"
            f"{c.anchor}, {c.collocate}"
        )
    return "\n".join(lines) + "\n"


def format_template(template: NgramTemplate) -> str:
    return str(template)


def format_result(result: CollocationResult) -> str:
    if result.template is not None:
        return format_template(result.template)
    c = result.candidate
    return f"{c.anchor} {c.collocate} {result.distance:+d}: error: {result.error}"
