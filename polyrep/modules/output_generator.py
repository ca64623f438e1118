from __future__ import annotations

from typing import TextIO

from ..config import HEADER_REPEAT_LENGTH_KEY, HEADER_TOTAL_LENGTH_KEY, ScanOptions
from ..models.data_schemas import RepeatRecord


def format_header(options: ScanOptions) -> list[str]:
    return [
        f"#{HEADER_REPEAT_LENGTH_KEY}: {options.unit_length}",
        f"#{HEADER_TOTAL_LENGTH_KEY}: {options.min_length}",
    ]


def format_record(record: RepeatRecord) -> str:
    return f"{record.chrom}\t{record.start}\t{record.end}\tunit={record.unit}"


class RepeatWriter:
    """Tab-separated repeat lines, two ``#`` comment lines first."""

    def __init__(self, handle: TextIO) -> None:
        self.handle = handle
        self.n_written = 0

    def write_header(self, options: ScanOptions) -> None:
        for line in format_header(options):
            self.handle.write(line + "\n")

    def write(self, record: RepeatRecord) -> None:
        self.handle.write(format_record(record) + "\n")
        self.n_written += 1

    def __call__(self, record: RepeatRecord) -> None:
        self.write(record)
