from __future__ import annotations


class PolyRepError(RuntimeError):
    """Base exception for polyrep."""


class ConfigurationError(PolyRepError):
    """Repeat/total length combination rejected before scanning."""


class UnsupportedUnitLengthError(PolyRepError):
    """No subpattern filter exists for the requested unit length."""


class FastaFormatError(PolyRepError):
    """FASTA input could not be split into named chromosomes."""


class ScannerStateError(PolyRepError):
    """A symbol was pushed into a scanner that already finished its chromosome."""
