from __future__ import annotations

from dataclasses import dataclass

from .utils.exceptions import ConfigurationError


AMBIGUOUS_SYMBOL = "N"
HEADER_PREFIX = ">"
NEWLINE_SYMBOLS = frozenset({"\n", "\r"})

SUPPORTED_UNIT_LENGTHS = (1, 2, 3, 4)
HOMOPOLYMER_UNIT_LENGTH = 1
DEFAULT_MIN_LENGTH = 10

HEADER_REPEAT_LENGTH_KEY = "repeat_length"
HEADER_TOTAL_LENGTH_KEY = "total_length"

LOGGER_NAME = "polyrep"
VERSION = "1.0.0"


@dataclass(frozen=True)
class ScanOptions:
    unit_length: int
    min_length: int = DEFAULT_MIN_LENGTH
    ambiguous_symbol: str = AMBIGUOUS_SYMBOL
    fold_case: bool = False

    def __post_init__(self) -> None:
        if self.unit_length not in SUPPORTED_UNIT_LENGTHS:
            raise ConfigurationError(
                f"Repeat length must be in [{SUPPORTED_UNIT_LENGTHS[0]},{SUPPORTED_UNIT_LENGTHS[-1]}], "
                f"got {self.unit_length}"
            )
        if self.min_length <= self.unit_length:
            raise ConfigurationError(
                f"Repeat length must be less than total length "
                f"(repeat_length={self.unit_length}, total_length={self.min_length})"
            )
        if len(self.ambiguous_symbol) != 1:
            raise ConfigurationError(f"Ambiguous symbol must be a single character, got {self.ambiguous_symbol!r}")
        if self.ambiguous_symbol in NEWLINE_SYMBOLS or self.ambiguous_symbol == HEADER_PREFIX:
            raise ConfigurationError(f"Ambiguous symbol {self.ambiguous_symbol!r} is reserved")

    @property
    def is_homopolymer(self) -> bool:
        return self.unit_length == HOMOPOLYMER_UNIT_LENGTH
