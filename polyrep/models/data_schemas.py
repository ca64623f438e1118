from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class RepeatRecord(BaseModel):
    chrom: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    unit: str = Field(min_length=1)

    @model_validator(mode="after")
    def _check_span(self) -> "RepeatRecord":
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) is before start ({self.start})")
        return self

    @property
    def length(self) -> int:
        return self.end - self.start


class ChromosomeSummary(BaseModel):
    chrom: str
    n_symbols: int = 0
    n_repeats: int = 0
