"""Tests for Stage 1 candidate selection."""

import pytest

from xtract import BigramTable, CollocateRecord, StatisticsEngine, distances_above_peak, select_candidates

from conftest import BARK_LINES, FILLERS, build_table


def _bark_table():
    table = BigramTable("dog")
    table.add_sentences(BARK_LINES)
    return table


def test_bark_candidate():
    table = _bark_table()
    candidates = select_candidates(table, k0=1, k1=1, u0=10)
    assert len(candidates) == 1
    c = candidates[0]
    assert c.anchor == "dog"
    assert c.collocate == "barked"
    assert c.spread == pytest.approx(13.0)
    assert c.strength > 1
    assert c.distances == (1,)


def test_fillers_are_weak():
    table = _bark_table()
    engine = StatisticsEngine(table)
    for w in FILLERS:
        assert engine.strength(table[w]) < 1


def test_selection_is_exact_filter():
    table = build_table("dog", {
        "alpha": 1, "bravo": 2, "charlie": 3, "delta": 9, "echo": 14, "foxtrot": 30,
    })
    k0, u0 = 0.5, 5.0
    engine = StatisticsEngine(table)
    expected = [
        r.collocate for r in table.records()
        if engine.strength(r) >= k0 and engine.spread(r) >= u0
    ]
    candidates = select_candidates(table, k0=k0, k1=1, u0=u0)
    assert [c.collocate for c in candidates] == expected
    assert len(set(expected)) == len(expected)
    for c in candidates:
        assert c.strength >= k0
        assert c.spread >= u0


def test_candidates_follow_table_order():
    table = build_table("dog", {"zulu": 20, "alpha": 20, "bravo": 1, "charlie": 1})
    candidates = select_candidates(table, k0=0, k1=1, u0=0)
    names = [c.collocate for c in candidates]
    assert names == sorted(names)


def test_single_collocate_gives_no_candidates(caplog):
    table = build_table("dog", {"alpha": 20})
    assert select_candidates(table, k0=1, k1=1, u0=10) == []
    assert "No Stage 1 candidates" in caplog.text


def test_empty_table_gives_no_candidates():
    assert select_candidates(BigramTable("dog"), k0=1, k1=1, u0=10) == []


def test_equal_frequencies_give_no_candidates():
    table = build_table("dog", {"alpha": 3, "bravo": 3})
    assert select_candidates(table, k0=-10, k1=1, u0=0) == []


def _record(histogram):
    rec = CollocateRecord("w")
    rec.histogram = list(histogram)
    rec.frequency = sum(histogram)
    return rec


def test_distances_single_peak():
    rec = _record([0, 0, 0, 0, 0, 12, 0, 0, 0, 0])
    assert distances_above_peak(rec, k1=1) == (1,)


def test_distances_two_peaks_ascending():
    rec = _record([10, 0, 0, 0, 0, 0, 0, 0, 0, 10])
    # freq 20, mean 2, spread (64 * 2 + 4 * 8) / 10 = 16, peak 2 + 4 = 6
    assert distances_above_peak(rec, k1=1) == (-5, 5)


def test_distances_strictly_above_peak():
    rec = _record([0, 0, 0, 0, 0, 0, 0, 0, 0, 0])
    assert distances_above_peak(rec, k1=0) == ()
    # freq 10, mean 1, spread 0 -> peak 1; slots equal to 1 do not qualify
    assert distances_above_peak(_record([1] * 10), k1=1) == ()


def test_distances_negative_k1_admits_more():
    rec = _record([3, 1, 0, 0, 0, 0, 0, 0, 0, 0])
    assert distances_above_peak(rec, k1=1) == (-5,)
    assert distances_above_peak(rec, k1=-10) == (-5, -4, -3, -2, -1, 1, 2, 3, 4, 5)


@pytest.mark.parametrize("histogram", [
    [5, 4, 3, 2, 1, 1, 2, 3, 4, 5],
    [0, 0, 9, 0, 0, 0, 0, 1, 0, 0],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
])
@pytest.mark.parametrize("k1", [-5.0, 0.0, 1.0, 2.0])
def test_distances_domain(histogram, k1):
    distances = distances_above_peak(_record(histogram), k1)
    assert 0 not in distances
    assert all(-5 <= d <= 5 for d in distances)
    assert list(distances) == sorted(set(distances))
