from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Lint:
    """A diagnostic produced by a step, 1-based inclusive line span."""
    code: str
    detail: str
    line_start: int
    line_end: int

    def __post_init__(self) -> None:
        if self.line_start < 1:
            raise ValueError(f'line_start must be >= 1 (got {self.line_start})')
        if self.line_end < self.line_start:
            raise ValueError(
                f'line_end ({self.line_end}) must be >= line_start ({self.line_start})'
            )

    @classmethod
    def create(cls, code: str, detail: str, line_start: int, line_end: int | None = None) -> 'Lint':
        return cls(code=code, detail=detail, line_start=line_start,
                   line_end=line_start if line_end is None else line_end)

    def __str__(self) -> str:
        if self.line_start == self.line_end:
            span = f'L{self.line_start}'
        else:
            span = f'L{self.line_start}-{self.line_end}'
        return f'{span} {self.code}: {self.detail}'


@dataclass(frozen=True)
class Region:
    """One capture-group match: its text, its span in the scanned text and its ordinal."""
    index: int
    text: str
    start: int
    end: int
