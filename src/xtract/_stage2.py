"""Stage 2: positional consensus around one significant bigram."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._types import N_SLOTS, NgramTemplate

if TYPE_CHECKING:
    from ._table import BigramTable


def slot_totals(table: BigramTable) -> list[int]:
    """Occurrences per slot summed over every collocate."""
    totals = [0] * N_SLOTS
    for record in table.records():
        for i, count in enumerate(record.histogram):
            totals[i] += count
    return totals


def consolidate(table: BigramTable, threshold: float) -> NgramTemplate:
    """Build the n-gram template for a Stage 2 table.

    A collocate fills a slot when it accounts for strictly more than
    ``threshold`` of all occurrences at that slot. Every such collocate is
    kept, in table order.
    """
    totals = slot_totals(table)
    records = list(table.records())

    slots: list[tuple[str, ...]] = []
    for i in range(N_SLOTS):
        total = totals[i]
        if total == 0:
            slots.append(())
            continue
        slots.append(tuple(
            r.collocate for r in records
            if r.histogram[i] / total > threshold
        ))

    return NgramTemplate(anchor=table.anchor, slots=tuple(slots))
