from __future__ import annotations

from ..config import ScanOptions
from .homopolymer_scanner import HomopolymerScanner
from .line_scanner import LineScanner
from .repeat_scanner import RepeatScanner


def make_scanner(chrom: str, options: ScanOptions) -> LineScanner:
    if options.is_homopolymer:
        return HomopolymerScanner(chrom, options)
    return RepeatScanner(chrom, options)
