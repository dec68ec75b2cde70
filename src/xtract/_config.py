"""Run configuration for collocation extraction."""

from __future__ import annotations

from dataclasses import dataclass, field

from ._stop_words import CLOSED_CLASS_WORDS
from ._table import AnchorMatch


@dataclass
class XtractConfig:
    """Thresholds and knobs for one extraction run.

    Defaults are the values Smadja recommends for Stage 1 (k0=1, k1=1,
    U0=10) and a 0.75 consensus threshold for Stage 2.
    """

    # === STAGE 1 ===
    k0: float = 1.0            # minimum strength
    k1: float = 1.0            # peak height, in sqrt(spread) units
    u0: float = 10.0           # minimum spread

    # === STAGE 2 ===
    threshold: float = 0.75    # share of a slot a word must exceed

    # === SCAN ===
    anchor_match: AnchorMatch = AnchorMatch.LAST
    closed_class: frozenset[str] = field(default=CLOSED_CLASS_WORDS)
    lowercase_anchor: bool = True
    skip_empty_tokens: bool = False

    # === CORPUS ===
    encoding: str = "utf-8"
    min_frequency: int = 1000

    # === EXECUTION ===
    workers: int = 1
    timeout: float | None = None   # seconds per anchor word

    def __post_init__(self) -> None:
        if isinstance(self.anchor_match, str):
            self.anchor_match = AnchorMatch(self.anchor_match)
        if not 0.0 <= self.threshold < 1.0:
            raise ValueError(f"threshold must be in [0.0, 1.0), got {self.threshold}")
        if self.u0 < 0:
            raise ValueError(f"u0 must be >= 0, got {self.u0}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.min_frequency < 1:
            raise ValueError(f"min_frequency must be >= 1, got {self.min_frequency}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")

    @classmethod
    def from_overrides(cls, **kwargs) -> "XtractConfig":
        """Build a config ignoring None values (for click integration)."""
        filtered = {k: v for k, v in kwargs.items() if v is not None}
        return cls(**filtered)
