"""Tests for BigramTable construction."""

import pytest

from xtract import AnchorMatch, AnchorNotFoundError, BigramTable

DOG_SENTENCES = ["the dog ran fast", "a dog runs home", "my dog ran away"]


def _check_invariants(table):
    assert table.total_occurrences == sum(r.frequency for r in table.records())
    for r in table.records():
        assert sum(r.histogram) == r.frequency


def test_dog_scenario():
    table = BigramTable("dog")
    for s in DOG_SENTENCES:
        table.add_sentence(s, include_closed_class=False)

    assert table["ran"].frequency == 2
    assert table["ran"].count_at(1) == 2
    assert table["runs"].frequency == 1
    assert table["runs"].count_at(1) == 1
    for word in ("fast", "home", "away"):
        assert table[word].count_at(2) == 1
    for stop in ("the", "a", "my"):
        assert stop not in table
    assert table.total_occurrences == 6
    _check_invariants(table)


def test_closed_class_included():
    table = BigramTable("dog")
    for s in DOG_SENTENCES:
        table.add_sentence(s, include_closed_class=True)
    assert table["the"].count_at(-1) == 1
    assert table["a"].count_at(-1) == 1
    assert table["my"].count_at(-1) == 1
    _check_invariants(table)


def test_anchor_not_found():
    table = BigramTable("dog")
    table.add_sentence("the dog ran fast")
    before = [(r.collocate, list(r.histogram)) for r in table.records()]
    with pytest.raises(AnchorNotFoundError):
        table.add_sentence("cat sat on mat")
    after = [(r.collocate, list(r.histogram)) for r in table.records()]
    assert before == after


def test_anchor_match_is_case_sensitive():
    table = BigramTable("dog")
    with pytest.raises(AnchorNotFoundError):
        table.add_sentence("Dog ran home")


def test_anchor_must_be_whole_token():
    table = BigramTable("dog")
    with pytest.raises(AnchorNotFoundError):
        table.add_sentence("dogs ran home")


def test_window_is_five_each_side():
    table = BigramTable("x")
    table.add_sentence("w1 w2 w3 w4 w5 w6 x v1 v2 v3 v4 v5 v6")
    assert "w1" not in table
    assert "v6" not in table
    assert table["w2"].count_at(-5) == 1
    assert table["w6"].count_at(-1) == 1
    assert table["v1"].count_at(1) == 1
    assert table["v5"].count_at(5) == 1
    assert len(table) == 10


def test_window_clipped_at_sentence_edges():
    table = BigramTable("x")
    table.add_sentence("x v1 v2")
    assert len(table) == 2
    assert table["v2"].count_at(2) == 1


def test_punctuation_removed_before_scan():
    table = BigramTable("dog")
    table.add_sentence("the dog , ran .")
    assert table["ran"].count_at(1) == 1
    assert "," not in table
    assert "." not in table


def test_last_match_default():
    table = BigramTable("dog")
    table.add_sentence("dog chased the dog home")
    assert table["chased"].count_at(-2) == 1
    assert table["home"].count_at(1) == 1
    assert table["chased"].frequency == 1


def test_first_match():
    table = BigramTable("dog", anchor_match=AnchorMatch.FIRST)
    table.add_sentence("dog chased the dog home")
    assert table["chased"].count_at(1) == 1
    assert table["home"].count_at(4) == 1


def test_all_matches():
    table = BigramTable("dog", anchor_match=AnchorMatch.ALL)
    table.add_sentence("dog chased the dog home")
    assert table["chased"].frequency == 2
    assert table["chased"].count_at(1) == 1
    assert table["chased"].count_at(-2) == 1
    assert table["home"].count_at(4) == 1
    assert table["home"].count_at(1) == 1
    _check_invariants(table)


def test_injected_closed_class():
    table = BigramTable("dog", closed_class=frozenset({"ran"}))
    table.add_sentence("the dog ran fast")
    assert "ran" not in table
    assert "the" in table


def test_empty_tokens_recorded_by_default():
    table = BigramTable("dog")
    table.add_sentence(" dog ran")
    assert "" in table
    assert table[""].count_at(-1) == 1
    table.add_sentence("big  dog")
    assert table[""].count_at(-1) == 2
    assert table["big"].count_at(-2) == 1
    _check_invariants(table)


def test_empty_tokens_skipped_when_asked():
    table = BigramTable("dog", skip_empty_tokens=True)
    table.add_sentence(" dog ran")
    table.add_sentence("big  dog")
    assert "" not in table
    assert table["ran"].count_at(1) == 1
    assert table["big"].count_at(-2) == 1
    assert table.total_occurrences == 2


def test_records_sorted():
    table = BigramTable("dog")
    table.add_sentence("zebra yak dog beta alpha")
    assert [r.collocate for r in table.records()] == ["alpha", "beta", "yak", "zebra"]


def test_add_sentences_skips_missing_anchor(caplog):
    table = BigramTable("dog")
    added = table.add_sentences(
        ["the dog ran fast", "cat sat on mat", "my dog ran away"]
    )
    assert added == 2
    assert table["ran"].frequency == 2
    assert "Skipping sentence" in caplog.text
    _check_invariants(table)


def test_empty_table():
    table = BigramTable("dog")
    assert len(table) == 0
    assert table.total_occurrences == 0
    assert list(table.records()) == []
