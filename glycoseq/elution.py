"""Co-elution rescoring of search results along retention time."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import MutableSequence

from glycoseq.result import SearchResult

_INT_MAX = 2**31 - 1
_SINGLETON_FACTOR = 0.3


class CoElution:
    """Scales scores by how often a peptide is seen in neighbouring retention buckets."""

    def __init__(self, range: float = 1.0) -> None:
        self.range = range

    def _index(self, retention: float, start: int, end: int) -> int:
        return int(math.floor(retention - start) * self.range / (end - start + 1))

    def update(self, results: MutableSequence[SearchResult]) -> None:
        """Rescore the results in place."""
        if not results:
            return
        start = min(float(_INT_MAX), *(r.retention for r in results))
        end = max(0.0, *(r.retention for r in results))
        total = Counter(r.sequence for r in results)

        size = math.ceil((end - start + 1.0) / self.range)
        buckets: list[Counter[str]] = [Counter() for _ in range(size)]
        int_start, int_end = int(start), int(end)
        for r in results:
            buckets[self._index(r.retention, int_start, int_end)][r.sequence] += 1

        for r in results:
            index = self._index(r.retention, int_start, int_end)
            seq = r.sequence
            count = buckets[index][seq]
            if index > 0:
                count += buckets[index - 1][seq]
            if index < size - 1:
                count += buckets[index + 1][seq]
            factor = _SINGLETON_FACTOR if total[seq] == 1 else count / total[seq]
            r.score = r.score * factor