"""Per-spectrum decoy significance tests with Benjamini-Hochberg style selection."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Sequence

from glycoseq.result import SearchResult


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean."""
    return sum(values) / len(values)


def stdev(values: Sequence[float]) -> float:
    """Sample standard deviation; NaN for fewer than two values."""
    if len(values) < 2:
        return math.nan
    avg = mean(values)
    return math.sqrt(sum((v - avg) ** 2 for v in values) / (len(values) - 1))


def p_value(values: Sequence[float], q: float) -> float:
    """Upper-tail normal p-value of q against the distribution of values."""
    m, s = mean(values), stdev(values)
    if math.isnan(s):
        return math.nan
    if s == 0:
        if q > m:
            return 0.0
        if q < m:
            return 1.0
        return math.nan
    return 0.5 * math.erfc((q - m) / (s * math.sqrt(2)))


class MultiComparison:
    """Selects target results that stand out from decoys of the same scan."""

    def __init__(self, fdr: float) -> None:
        self.fdr = fdr

    def tests(self, targets: Sequence[SearchResult], decoys: Sequence[SearchResult]) -> list[SearchResult]:
        """Targets without decoys plus those whose p-value is significant, ordered by scan."""
        decoy_scores: dict[int, list[float]] = defaultdict(list)
        for d in decoys:
            decoy_scores[d.scan].append(d.score)

        results: list[SearchResult] = []
        candidates: dict[int, SearchResult] = {}
        p_values: dict[int, float] = {}
        for t in targets:
            scores = decoy_scores.get(t.scan)
            if scores is None:
                results.append(t)
                continue
            if mean(scores) > t.score:
                continue
            p_values[t.scan] = p_value(scores, t.score)
            candidates[t.scan] = t

        ordered = sorted(p_values.values())
        size = len(ordered)
        max_p = 0.0
        for rank, p in enumerate(ordered):
            if p < rank / size * self.fdr:
                max_p = max(max_p, p)

        results.extend(candidates[scan] for scan in sorted(p_values) if max_p >= p_values[scan])
        return sorted(results, key=lambda r: r.scan)