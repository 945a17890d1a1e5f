"""Hybrid-type N-glycans."""

from __future__ import annotations

from glycoseq.glycan import Glycan, Monosaccharide


class NGlycanHybrid(Glycan):
    """Hybrid-type N-glycan.

    Table layout: GlcNAc core (0), Man core (1), core Fuc (2), bisecting
    GlcNAc (3), then two branches each of Man (4-5), GlcNAc (6-7),
    Gal (8-9), Fuc (10-11), NeuAc (12-13) and NeuGc (14-15).
    """

    TABLE_SIZE = 16
    _BRANCHES = 2

    def _ordered(self, i: int, base: int) -> bool:
        t = self.table
        return i == 0 or t[base + i] < t[base + i - 1]

    def _sialic_ready(self, i: int) -> bool:
        t = self.table
        return t[i + 6] > 0 and t[i + 6] == t[i + 8] and t[i + 12] == 0 and t[i + 14] == 0

    def _core_complete(self) -> bool:
        return self.table[0] == 2 and self.table[1] == 3

    def grow(self, sugar: Monosaccharide) -> list[Glycan]:
        """Glycans made by adding one sugar where the hybrid rules allow it."""
        t = self.table
        branches = range(self._BRANCHES)
        children: list[Glycan] = []
        if sugar is Monosaccharide.GLCNAC:
            if t[0] < 2:
                children.append(self._derive({0: t[0] + 1}, sugar))
            elif self._core_complete():
                if t[3] == 0 and t[4] == 0:
                    children.append(self._derive({3: 1}, sugar))
                children.extend(
                    self._derive({i + 6: t[i + 6] + 1}, sugar)
                    for i in branches
                    if self._ordered(i, 6)
                    and t[i + 6] == t[i + 8]
                    and t[i + 10] == 0
                    and t[i + 12] == 0
                    and t[i + 14] == 0
                )
        elif sugar is Monosaccharide.MAN:
            if t[0] == 2 and t[1] < 3:
                children.append(self._derive({1: t[1] + 1}, sugar))
            elif self._core_complete():
                children.extend(
                    self._derive({i + 4: t[i + 4] + 1}, sugar)
                    for i in branches
                    if self._ordered(i, 4)
                )
        elif sugar is Monosaccharide.GAL:
            children.extend(
                self._derive({i + 8: t[i + 8] + 1}, sugar)
                for i in branches
                if self._ordered(i, 8) and t[i + 6] == t[i + 8] + 1
            )
        elif sugar is Monosaccharide.FUC:
            if t[2] == 0:
                children.append(self._derive({2: 1}, sugar))
            children.extend(
                self._derive({i + 10: 1}, sugar)
                for i in branches
                if self._ordered(i, 10) and t[i + 10] == 0 and t[i + 6] > 0
            )
        elif sugar is Monosaccharide.NEUAC:
            children.extend(
                self._derive({i + 12: 1}, sugar)
                for i in branches
                if self._ordered(i, 12) and self._sialic_ready(i)
            )
        elif sugar is Monosaccharide.NEUGC:
            children.extend(
                self._derive({i + 14: 1}, sugar)
                for i in branches
                if self._ordered(i, 14) and self._sialic_ready(i)
            )
        return children