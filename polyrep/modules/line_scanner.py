from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional

from ..config import HEADER_PREFIX, NEWLINE_SYMBOLS, ScanOptions
from ..models.data_schemas import RepeatRecord
from ..utils.exceptions import ScannerStateError


class LineScanner(ABC):
    """Single forward pass over one chromosome, one symbol at a time.

    Newlines are skipped without advancing the position. The header prefix
    ends the chromosome exactly like running out of input does.
    """

    def __init__(self, chrom: str, options: ScanOptions) -> None:
        self.chrom = chrom
        self.min_length = options.min_length
        self.ambiguous_symbol = options.ambiguous_symbol
        self._pos = 0
        self._finished = False

    @property
    def position(self) -> int:
        return self._pos

    @property
    def finished(self) -> bool:
        return self._finished

    def push(self, symbol: str) -> Optional[RepeatRecord]:
        if self._finished:
            raise ScannerStateError(f"scanner for {self.chrom} already finished at position {self._pos}")
        if symbol in NEWLINE_SYMBOLS:
            return None
        if symbol == HEADER_PREFIX:
            return self.finish()
        record = self._consume(symbol)
        self._pos += 1
        return record

    def finish(self) -> Optional[RepeatRecord]:
        if self._finished:
            return None
        self._finished = True
        return self._flush()

    def scan(self, symbols: Iterable[str]) -> Iterator[RepeatRecord]:
        for symbol in symbols:
            record = self.push(symbol)
            if record is not None:
                yield record
            if self._finished:
                return
        record = self.finish()
        if record is not None:
            yield record

    @abstractmethod
    def _consume(self, symbol: str) -> Optional[RepeatRecord]:
        """Consume one ordinary symbol at the current position."""

    @abstractmethod
    def _flush(self) -> Optional[RepeatRecord]:
        """Return the current run if it is long enough to report."""
