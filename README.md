# glycoseq

Building blocks for N-glycopeptide identification: enumerating N-glycan
structures, and filtering and rescoring glycopeptide search results.
It has no dependencies outside the standard library.

## What is in the package

- `glycoseq.glycan`: the `Monosaccharide` enum and the `Glycan` base class,
  with `NGlycanComplex` (24-entry table, four branches) and `HighMannose`
  (6-entry table, three mannose branches). `grow(sugar)` returns the list of
  glycans made by adding one monosaccharide where the structure's rules
  allow it. Each glycan has a `table`, a `composition` (a dict from
  `Monosaccharide` to count) and an `identifier`: the table entries, each
  followed by a space.
- `glycoseq.hybrid`: `NGlycanHybrid`, the hybrid-type N-glycan (16-entry
  table, two branches), with the same `grow` interface.
- `glycoseq.protein`: `Protein`, a dataclass with `sequence` and `identifier`.
- `glycoseq.result`: `SearchResult`, a dataclass holding `scan`, `retention`,
  `sequence`, `glycan`, `site` and `score`.
- `glycoseq.fdr`: `FDRFilter`, target-decoy filtering. `set_data(targets,
  decoys)` keeps, per scan, only the results with the best score of that
  scan; `compute_cutoff()` finds the lowest score at which the estimated FDR
  is within the requested rate (it returns -1 when no filtering is needed);
  `filter()` returns the targets at or above the cutoff, ordered by scan.
- `glycoseq.multi_comparison`: `MultiComparison(fdr).tests(targets, decoys)`
  keeps targets with no decoy in their scan, plus targets whose normal
  upper-tail p-value against their scan's decoy scores passes a
  Benjamini-Hochberg style threshold; results are ordered by scan. The
  helpers `mean`, `stdev` and `p_value` are exposed as well.
- `glycoseq.elution`: `CoElution(range=1.0).update(results)` rescales scores
  in place by how often the same peptide sequence appears in the same and
  neighbouring retention-time buckets; a sequence seen only once has its
  score multiplied by 0.3.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Build the N-glycan core (two GlcNAc, three Man) and list its one-step
extensions with a GlcNAc:

```python
from glycoseq.glycan import Monosaccharide, NGlycanComplex

glycan = NGlycanComplex()
for sugar in [Monosaccharide.GLCNAC] * 2 + [Monosaccharide.MAN] * 3:
    (glycan,) = glycan.grow(sugar)

for child in glycan.grow(Monosaccharide.GLCNAC):
    print(child.identifier, child.composition)
```

Keep the target identifications that pass a false discovery rate of 1%:

```python
from glycoseq.fdr import FDRFilter

fdr = FDRFilter(0.01)
fdr.set_data(targets, decoys)   # lists of SearchResult
fdr.compute_cutoff()
accepted = fdr.filter()
```

Rescore results by co-elution:

```python
from glycoseq.elution import CoElution

CoElution(range=1.0).update(results)
```

## What the package does not do

It does not read spectrum or sequence files, digest proteins, compute
peptide or glycan masses, match precursors or fragment peaks, or run a
search; there is no command-line program. It works on `SearchResult`
objects and glycan structures that the caller supplies.