from __future__ import annotations
"""Step and sub-pipeline protocol definitions."""

from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable

from pipestep.core.models import Lint


@runtime_checkable
class FormatterStepProtocol(Protocol):
    """A single named text transformation.

    Implementations are expected to:
      * Return the transformed text from `format` (or None for "unchanged").
      * Return zero or more findings from `lint` without modifying anything.
      * Release held resources in `close`.
    """

    @property
    def name(self) -> str:
        ...

    def format(self, text: str, file: Optional[Path]) -> Optional[str]:
        ...

    def lint(self, text: str, file: Optional[Path]) -> List[Lint]:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class FormatterProtocol(Protocol):
    """An ordered, immutable sequence of steps run as one sub-pipeline."""

    def compute(self, text: str, file: Optional[Path]) -> str:
        ...

    def lint(self, text: str, file: Optional[Path]) -> List[Lint]:
        ...
