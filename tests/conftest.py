"""Shared fixtures for xtract tests."""

import pytest

from xtract import BigramTable, SentenceIndex

FILLERS = [
    "alpha", "bravo", "charlie", "delta", "echo", "foxtrot",
    "golf", "hotel", "india", "juliet", "kilo", "lima",
]

# "barked" follows "dog" in every line; each filler occurs once at +2.
BARK_LINES = [f"the dog barked {w} ." for w in FILLERS]

NOISE_LINES = [
    "cats sleep all day",
    "nothing to see here , move along",
    "the dogs are not the dog",
]


def build_table(anchor, frequencies, include_closed_class=False):
    """Table where each word sits at +1 from ``anchor`` ``n`` times."""
    table = BigramTable(anchor)
    for word, n in frequencies.items():
        for _ in range(n):
            table.add_sentence(f"{anchor} {word}", include_closed_class)
    return table


@pytest.fixture
def corpus_path(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("\n".join(BARK_LINES + NOISE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def index(corpus_path):
    return SentenceIndex(corpus_path)
