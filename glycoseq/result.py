"""A glycopeptide identification of one spectrum."""

from dataclasses import dataclass


@dataclass
class SearchResult:
    """Peptide, glycan, glycosylation site and score found for a scan."""

    scan: int = 0
    retention: float = 0.0
    sequence: str = ""
    glycan: str = ""
    site: int = 0
    score: float = 0.0