"""Data structures for xtract."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from ._errors import OffsetOutOfRangeError

WINDOW: int = 5
N_SLOTS: int = 2 * WINDOW
PLACEHOLDER: str = "_"


@dataclass(slots=True, frozen=True, order=True)
class RelativeOffset:
    """Signed distance from the anchor: -5..-1 or 1..5, never 0."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0 or not -WINDOW <= self.value <= WINDOW:
            raise OffsetOutOfRangeError(
                f"offset {self.value} out of range [-{WINDOW}, -1] U [1, {WINDOW}]"
            )

    @property
    def slot(self) -> int:
        """Histogram index 0..9 for this offset."""
        if self.value < 0:
            return self.value + WINDOW
        return self.value + WINDOW - 1

    @classmethod
    def from_slot(cls, slot: int) -> RelativeOffset:
        if not 0 <= slot < N_SLOTS:
            raise OffsetOutOfRangeError(f"slot {slot} out of range [0, {N_SLOTS - 1}]")
        if slot < WINDOW:
            return cls(slot - WINDOW)
        return cls(slot - WINDOW + 1)

    def __int__(self) -> int:
        return self.value


# -5..-1, 1..5 in slot order
ALL_OFFSETS: tuple[RelativeOffset, ...] = tuple(
    RelativeOffset.from_slot(i) for i in range(N_SLOTS)
)


@dataclass(slots=True)
class CollocateRecord:
    collocate: str
    histogram: list[int] = field(default_factory=lambda: [0] * N_SLOTS)
    frequency: int = 0

    def add_instance(self, offset: int | RelativeOffset) -> None:
        """Count one occurrence of the collocate at ``offset``."""
        if not isinstance(offset, RelativeOffset):
            offset = RelativeOffset(offset)
        self.histogram[offset.slot] += 1
        self.frequency += 1

    def count_at(self, offset: int | RelativeOffset) -> int:
        if not isinstance(offset, RelativeOffset):
            offset = RelativeOffset(offset)
        return self.histogram[offset.slot]


@dataclass(slots=True, frozen=True)
class S1Candidate:
    anchor: str
    collocate: str
    strength: float
    spread: float
    distances: tuple[int, ...]   # ascending, subset of -5..-1, 1..5


@dataclass(slots=True, frozen=True)
class NgramTemplate:
    """Consensus words per slot around the anchor.

    ``slots`` has one entry per histogram slot; an empty tuple means no
    collocate reached the threshold there.
    """

    anchor: str
    slots: tuple[tuple[str, ...], ...]

    def tokens(self) -> Iterator[str]:
        for i, words in enumerate(self.slots):
            if i == WINDOW:
                yield self.anchor
            if words:
                yield from words
            else:
                yield PLACEHOLDER

    def __str__(self) -> str:
        return " ".join(self.tokens())


@dataclass(slots=True, frozen=True)
class CollocationResult:
    candidate: S1Candidate
    distance: int
    n_sentences: int
    template: NgramTemplate | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
