from __future__ import annotations

"""Public surface for pipestep.core: data records and protocol types."""

from pipestep.core.models import Lint, Region
from pipestep.core.interfaces import (
    FormatterProtocol,
    FormatterStepProtocol,
    RegionFuncProtocol,
)

__all__ = [
    "Lint",
    "Region",
    "FormatterProtocol",
    "FormatterStepProtocol",
    "RegionFuncProtocol",
]
