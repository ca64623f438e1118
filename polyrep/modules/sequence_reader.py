from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, TextIO

from ..config import HEADER_PREFIX
from ..utils.exceptions import FastaFormatError


logger = logging.getLogger(__name__)


def parse_chromosome_name(title: str) -> str:
    fields = title.split(None, 1)
    if not fields:
        raise FastaFormatError("Error when parsing chromosome header: empty header line")
    return fields[0]


class ChromosomeFeed:
    """Symbols of one FASTA record, read from the shared handle on demand.

    Lines are passed through unchanged, newlines and spaces included, so
    positions count every character the scanner accepts. A header prefix
    anywhere in a line ends the record and starts the next header.
    """

    def __init__(self, lines: Iterator[str]) -> None:
        self._lines = lines
        self._symbols = self._read()
        self.next_header: Optional[str] = None

    def __iter__(self) -> Iterator[str]:
        return self._symbols

    def _read(self) -> Iterator[str]:
        for line in self._lines:
            cut = line.find(HEADER_PREFIX)
            if cut >= 0:
                yield from line[:cut]
                self.next_header = line[cut:]
                return
            yield from line

    def drain(self) -> None:
        for _ in self._symbols:
            pass


def iter_chromosomes(handle: TextIO) -> Iterator[tuple[str, ChromosomeFeed]]:
    """Yield ``(name, feed)`` for each FASTA record in ``handle``.

    Only one line is held at a time. Anything before the first header is
    skipped. A feed the caller leaves unfinished is drained before the next
    record is read.
    """
    lines = iter(handle)
    header = None
    for line in lines:
        cut = line.find(HEADER_PREFIX)
        if cut >= 0:
            header = line[cut:]
            break

    while header is not None:
        name = parse_chromosome_name(header[len(HEADER_PREFIX):])
        logger.debug("Reading %s", name)
        feed = ChromosomeFeed(lines)
        yield name, feed
        feed.drain()
        header = feed.next_header


def iter_symbols(symbols: Iterable[str], fold_case: bool = False) -> Iterator[str]:
    if fold_case:
        return (symbol.upper() for symbol in symbols)
    return iter(symbols)
