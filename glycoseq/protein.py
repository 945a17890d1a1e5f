"""Protein records."""

from dataclasses import dataclass


@dataclass
class Protein:
    """A protein sequence with its identifier."""

    sequence: str = ""
    identifier: str = ""