"""Xtract error types."""


class XtractError(Exception):
    """Base error for all xtract failures."""


class AnchorNotFoundError(XtractError):
    """Sentence does not contain the anchor word as a token."""


class OffsetOutOfRangeError(XtractError, ValueError):
    """Relative offset outside -5..-1, 1..5."""


class DegenerateStatisticsError(XtractError):
    """Too few collocates (or no variation) to compute strength."""


class CorpusError(XtractError):
    """Corpus file could not be read."""


class DeadlineExceededError(XtractError):
    """Extraction ran past its deadline."""
