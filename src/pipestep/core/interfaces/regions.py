from __future__ import annotations
"""Region function protocol definitions."""

import re
from pathlib import Path
from typing import List, Optional, Protocol

from pipestep.core.interfaces.step import FormatterProtocol
from pipestep.core.models import Lint


class RegionFuncProtocol(Protocol):
    """Strategy that runs a sub-pipeline relative to the regions of a pattern.

    Methods:
        apply: Transform `text`, raising on a structural mismatch.
        lint: Collect findings for `text`.
    """

    regex: re.Pattern[str]

    def apply(self, formatter: FormatterProtocol, text: str, file: Optional[Path]) -> str:
        ...

    def lint(self, formatter: FormatterProtocol, text: str, file: Optional[Path]) -> List[Lint]:
        ...
