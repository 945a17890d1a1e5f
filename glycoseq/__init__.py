"""N-glycan structure enumeration and filtering of glycopeptide search results."""

__version__ = "0.1.0"