from __future__ import annotations

from typing import Optional

from ..config import ScanOptions
from ..models.data_schemas import RepeatRecord
from ..utils.ring_buffer import RingBuffer
from ..utils.seq_utils import get_subpattern_filter
from .line_scanner import LineScanner


class RepeatScanner(LineScanner):
    """Report tandem repeats with a unit of 2-4 symbols.

    The last ``unit_length`` symbols live in a ring buffer keyed by
    position. While a run is confirmed, each symbol is compared against the
    slot it is about to occupy, which still holds the symbol one unit back.
    On a mismatch the run is flushed and a new candidate is seeded from the
    current window: a full unit if the window is not degenerate, one less
    otherwise, so a degenerate window needs another symbol before it counts.
    The ambiguous symbol flushes and restarts from an empty window.
    """

    def __init__(self, chrom: str, options: ScanOptions) -> None:
        super().__init__(chrom, options)
        self.window = RingBuffer(options.unit_length)
        self._is_degenerate = get_subpattern_filter(options.unit_length)
        self._last_index = options.unit_length - 1
        self._run = 0

    def _consume(self, symbol: str) -> Optional[RepeatRecord]:
        if symbol == self.ambiguous_symbol:
            record = self._flush()
            self._run = 0
            return record

        if self._run < self._last_index:
            self.window.write(self._pos, symbol)
            self._run += 1
            return None

        if self._run > self._last_index:
            if self.window.read(self._pos) == symbol:
                self._run += 1
                return None
            record = self._flush()
            self._run = self._seed(symbol)
            return record

        # window filled for the first time
        self._run = self._seed(symbol)
        return None

    def _seed(self, symbol: str) -> int:
        self.window.write(self._pos, symbol)
        if self._is_degenerate(self.window.slots):
            return self.window.capacity - 1
        return self.window.capacity

    def _flush(self) -> Optional[RepeatRecord]:
        if self._run < self.min_length:
            return None
        start = self._pos - self._run
        return RepeatRecord(
            chrom=self.chrom,
            start=start,
            end=self._pos,
            unit=self.window.rotated(start),
        )
