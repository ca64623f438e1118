from __future__ import annotations

from typing import Optional

from ..config import ScanOptions
from ..models.data_schemas import RepeatRecord
from .line_scanner import LineScanner


class HomopolymerScanner(LineScanner):
    """Report runs of one repeated symbol.

    Only the previous symbol is kept. A run of the ambiguous symbol is
    counted like any other run but never reported.
    """

    def __init__(self, chrom: str, options: ScanOptions) -> None:
        super().__init__(chrom, options)
        self._last = self.ambiguous_symbol
        self._run = 1

    def _consume(self, symbol: str) -> Optional[RepeatRecord]:
        if symbol == self._last:
            self._run += 1
            return None
        record = self._flush()
        self._last = symbol
        self._run = 1
        return record

    def _flush(self) -> Optional[RepeatRecord]:
        if self._run < self.min_length or self._last == self.ambiguous_symbol:
            return None
        return RepeatRecord(
            chrom=self.chrom,
            start=self._pos - self._run,
            end=self._pos,
            unit=self._last,
        )
