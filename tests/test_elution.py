import pytest

from glycoseq.elution import CoElution
from glycoseq.result import SearchResult


def test_singleton_sequence_scaled_down():
    results = [SearchResult(sequence="A", retention=5.0, score=1.0)]
    CoElution().update(results)
    assert results[0].score == pytest.approx(0.3)


def test_repeated_sequence_in_same_bucket_unchanged():
    results = [
        SearchResult(sequence="A", retention=5.0, score=2.0),
        SearchResult(sequence="A", retention=5.2, score=4.0),
        SearchResult(sequence="B", retention=5.1, score=1.0),
    ]
    CoElution().update(results)
    assert results[0].score == pytest.approx(2.0)
    assert results[1].score == pytest.approx(4.0)
    assert results[2].score == pytest.approx(0.3)


def test_scores_never_increase():
    results = [SearchResult(sequence=s, retention=t, score=1.0)
               for s, t in [("A", 1.0), ("A", 30.0), ("B", 10.0), ("B", 11.0), ("C", 20.0)]]
    CoElution(range=2.0).update(results)
    assert all(0.0 < r.score <= 1.0 for r in results)


def test_empty_results_left_empty():
    results = []
    CoElution().update(results)
    assert results == []