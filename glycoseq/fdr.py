"""Target-decoy false discovery rate filtering."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable

from glycoseq.result import SearchResult

NO_CUTOFF = -1.0
UNREACHABLE_CUTOFF = float(2**63 - 1)


class FDRFilter:
    """Finds the lowest score cutoff that keeps the estimated FDR within bounds."""

    def __init__(self, fdr: float) -> None:
        self.fdr = fdr
        self.cutoff = NO_CUTOFF
        self.targets: list[SearchResult] = []
        self.decoys: list[SearchResult] = []

    def set_data(self, targets: Iterable[SearchResult], decoys: Iterable[SearchResult]) -> None:
        """Add results, keeping only those with the best score of their scan."""
        targets, decoys = list(targets), list(decoys)
        best: dict[int, float] = {}
        for r in [*targets, *decoys]:
            if r.scan not in best or best[r.scan] < r.score:
                best[r.scan] = r.score
        self.targets.extend(r for r in targets if best[r.scan] <= r.score)
        self.decoys.extend(r for r in decoys if best[r.scan] <= r.score)

    def compute_cutoff(self) -> float:
        """Compute and store the score cutoff; -1 means no filtering."""
        self.cutoff = NO_CUTOFF
        n_target, n_decoy = len(self.targets), len(self.decoys)
        if n_decoy == 0 or n_target == 0 or n_decoy / (n_decoy + n_target) < self.fdr:
            return self.cutoff

        self.targets.sort(key=lambda r: r.score)
        self.decoys.sort(key=lambda r: r.score)
        target_scores = [r.score for r in self.targets]
        decoy_scores = [r.score for r in self.decoys]

        for score in sorted(target_scores + decoy_scores):
            i = bisect_left(target_scores, score)
            j = bisect_left(decoy_scores, score)
            rate = (n_decoy - j) / (n_target + n_decoy - i - j + 1)
            rate *= 1.0 + n_target / n_decoy
            if rate <= self.fdr:
                self.cutoff = score
                return self.cutoff
        self.cutoff = UNREACHABLE_CUTOFF
        return self.cutoff

    def filter(self) -> list[SearchResult]:
        """Targets scoring at or above the cutoff, ordered by scan."""
        if self.cutoff < 0:
            return list(self.targets)
        kept = [r for r in self.targets if r.score >= self.cutoff]
        return sorted(kept, key=lambda r: r.scan)