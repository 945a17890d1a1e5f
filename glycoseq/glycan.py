"""N-glycan structures that grow one monosaccharide at a time."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class Monosaccharide(Enum):
    """Monosaccharide building blocks of N-glycans."""

    GLCNAC = "GlcNAc"
    MAN = "Man"
    GAL = "Gal"
    FUC = "Fuc"
    NEUAC = "NeuAc"
    NEUGC = "NeuGc"


class Glycan:
    """A glycan described by a position table and a monosaccharide composition.

    Subclasses fix the table layout through ``TABLE_SIZE`` and supply the
    growth rules in ``grow``.
    """

    TABLE_SIZE = 0

    def __init__(
        self,
        table: list[int] | None = None,
        composition: Mapping[Monosaccharide, int] | None = None,
    ) -> None:
        if table is None:
            table = [0] * self.TABLE_SIZE
        elif len(table) != self.TABLE_SIZE:
            raise ValueError(f"table must have {self.TABLE_SIZE} entries, got {len(table)}")
        self.table: list[int] = list(table)
        self.composition: dict[Monosaccharide, int] = dict(composition or {})

    @property
    def identifier(self) -> str:
        """Table entries, each followed by a space."""
        return "".join(f"{value} " for value in self.table)

    def grow(self, sugar: Monosaccharide) -> list[Glycan]:
        """Glycans made by adding one sugar; a bare glycan has no growth rules."""
        return []

    def _derive(self, updates: Mapping[int, int], sugar: Monosaccharide) -> Glycan:
        """A copy of this glycan with table updates applied and one sugar added."""
        table = list(self.table)
        for position, value in updates.items():
            table[position] = value
        composition = dict(self.composition)
        composition[sugar] = composition.get(sugar, 0) + 1
        return type(self)(table, composition)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Glycan):
            return NotImplemented
        return type(self) is type(other) and self.table == other.table

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self.table)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r})"


class NGlycanComplex(Glycan):
    """Complex-type N-glycan.

    Table layout: GlcNAc core (0), Man core (1), core Fuc (2), bisecting
    GlcNAc (3), then four branches each of GlcNAc (4-7), Gal (8-11),
    Fuc (12-15), NeuAc (16-19) and NeuGc (20-23).
    """

    TABLE_SIZE = 24

    def _ordered(self, i: int, base: int) -> bool:
        t = self.table
        return i == 0 or t[base + i] < t[base + i - 1]

    def _sialic_ready(self, i: int) -> bool:
        t = self.table
        return t[i + 4] > 0 and t[i + 4] == t[i + 8] and t[i + 16] == 0 and t[i + 20] == 0

    def grow(self, sugar: Monosaccharide) -> list[Glycan]:
        """Glycans made by adding one sugar where the complex rules allow it."""
        t = self.table
        children: list[Glycan] = []
        if sugar is Monosaccharide.GLCNAC:
            if t[0] < 2:
                children.append(self._derive({0: t[0] + 1}, sugar))
            elif t[0] == 2 and t[1] == 3:
                if t[3] == 0 and t[4] == 0:
                    children.append(self._derive({3: 1}, sugar))
                children.extend(
                    self._derive({i + 4: t[i + 4] + 1}, sugar)
                    for i in range(4)
                    if self._ordered(i, 4)
                    and t[i + 4] == t[i + 8]
                    and t[i + 12] == 0
                    and t[i + 16] == 0
                    and t[i + 20] == 0
                )
        elif sugar is Monosaccharide.MAN:
            if t[0] == 2 and t[1] < 3:
                children.append(self._derive({1: t[1] + 1}, sugar))
        elif sugar is Monosaccharide.GAL:
            children.extend(
                self._derive({i + 8: t[i + 8] + 1}, sugar)
                for i in range(4)
                if self._ordered(i, 8) and t[i + 4] == t[i + 8] + 1
            )
        elif sugar is Monosaccharide.FUC:
            if t[2] == 0:
                children.append(self._derive({2: 1}, sugar))
            children.extend(
                self._derive({i + 12: 1}, sugar)
                for i in range(4)
                if self._ordered(i, 12) and t[i + 12] == 0 and t[i + 4] > 0
            )
        elif sugar is Monosaccharide.NEUAC:
            children.extend(
                self._derive({i + 16: 1}, sugar)
                for i in range(4)
                if self._ordered(i, 16) and self._sialic_ready(i)
            )
        elif sugar is Monosaccharide.NEUGC:
            children.extend(
                self._derive({i + 20: 1}, sugar)
                for i in range(4)
                if self._ordered(i, 20) and self._sialic_ready(i)
            )
        return children


class HighMannose(Glycan):
    """High-mannose N-glycan.

    Table layout: GlcNAc core (0), Man core (1), core Fuc (2), then three
    mannose branches (3-5).
    """

    TABLE_SIZE = 6

    def grow(self, sugar: Monosaccharide) -> list[Glycan]:
        """Glycans made by adding one sugar where the high-mannose rules allow it."""
        t = self.table
        children: list[Glycan] = []
        if sugar is Monosaccharide.GLCNAC:
            if t[0] < 2:
                children.append(self._derive({0: t[0] + 1}, sugar))
        elif sugar is Monosaccharide.MAN:
            if t[0] == 2 and t[1] < 3:
                children.append(self._derive({1: t[1] + 1}, sugar))
            elif t[0] == 2 and t[1] == 3:
                children.extend(
                    self._derive({i + 3: t[i + 3] + 1}, sugar)
                    for i in range(3)
                    if i == 0 or t[i + 3] < t[i + 2]
                )
        elif sugar is Monosaccharide.FUC:
            if t[1] == 0 and t[2] == 0:
                children.append(self._derive({2: 1}, sugar))
        return children