import pytest

from glycoseq.glycan import Glycan, HighMannose, Monosaccharide, NGlycanComplex

G = Monosaccharide.GLCNAC
M = Monosaccharide.MAN


def build(glycan, sugars):
    for sugar in sugars:
        glycan = glycan.grow(sugar)[0]
    return glycan


CORE = [G, G, M, M, M]


def test_base_glycan_has_no_growth():
    assert Glycan().grow(G) == []
    assert Glycan().identifier == ""


def test_complex_identifier_matches_y1_format():
    child = NGlycanComplex().grow(G)
    assert len(child) == 1
    assert child[0].identifier == "1 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 "
    assert len(NGlycanComplex().identifier) == 48


def test_high_mannose_identifier_matches_y1_format():
    child = HighMannose().grow(G)[0]
    assert child.identifier == "1 0 0 0 0 0 "
    assert child.composition == {G: 1}


def test_wrong_table_size_rejected():
    with pytest.raises(ValueError):
        NGlycanComplex([0] * 6)


def test_mannose_needs_core_glcnac():
    assert NGlycanComplex().grow(M) == []
    assert HighMannose().grow(M) == []


def test_grow_leaves_parent_unchanged():
    parent = build(NGlycanComplex(), [G])
    before = list(parent.table)
    parent.grow(G)
    assert parent.table == before
    assert parent.composition == {G: 1}


def test_complex_core_then_bisect_and_branch():
    core = build(NGlycanComplex(), CORE)
    assert core.table[:2] == [2, 3]
    assert core.composition == {G: 2, M: 3}
    children = core.grow(G)
    tables = [c.table for c in children]
    assert len(children) == 2
    assert any(t[3] == 1 for t in tables)
    assert any(t[4] == 1 for t in tables)


def test_complex_galactose_then_sialic_acid():
    core = build(NGlycanComplex(), CORE)
    branched = next(c for c in core.grow(G) if c.table[4] == 1)
    assert branched.grow(Monosaccharide.NEUAC) == []
    galactosylated = branched.grow(Monosaccharide.GAL)
    assert [c.table[8] for c in galactosylated] == [1]
    sialylated = galactosylated[0].grow(Monosaccharide.NEUAC)
    assert [c.table[16] for c in sialylated] == [1]
    assert sialylated[0].grow(Monosaccharide.NEUGC) == []


def test_complex_core_fucose_only_once():
    fucosylated = NGlycanComplex().grow(Monosaccharide.FUC)
    assert len(fucosylated) == 1
    assert fucosylated[0].table[2] == 1
    assert fucosylated[0].grow(Monosaccharide.FUC) == []


def test_complex_composition_counts_table():
    frontier = {NGlycanComplex()}
    for _ in range(8):
        frontier = {child for g in frontier for sugar in Monosaccharide for child in g.grow(sugar)}
        for glycan in frontier:
            assert sum(glycan.composition.values()) == sum(glycan.table)


def test_high_mannose_branches_are_ordered():
    core = build(HighMannose(), CORE)
    first = core.grow(M)
    assert [c.table for c in first] == [[2, 3, 0, 1, 0, 0]]
    second = first[0].grow(M)
    assert [c.table for c in second] == [[2, 3, 0, 2, 0, 0], [2, 3, 0, 1, 1, 0]]


def test_high_mannose_fucose_before_mannose_only():
    assert len(HighMannose().grow(Monosaccharide.FUC)) == 1
    core = build(HighMannose(), CORE)
    assert core.grow(Monosaccharide.FUC) == []
    assert core.grow(Monosaccharide.GAL) == []


def test_equality_follows_table():
    a = build(NGlycanComplex(), [G])
    b = build(NGlycanComplex(), [G])
    assert a == b
    assert len({a, b}) == 1
    assert build(HighMannose(), [G]) != a