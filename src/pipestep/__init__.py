from __future__ import annotations

from pipestep.constants import DEFAULT_TOGGLE_NAME, DEFAULT_TOGGLE_OFF, DEFAULT_TOGGLE_ON, TOGGLE_REMOVED_CODE
from pipestep.core.models import Lint, Region
from pipestep.errors import IntermediateStepRemovedError, PipeConfigError
from pipestep.pipeline import Formatter, FormatterStep, LineEnding
from pipestep.pipe_step_pair import PipeStepPair
from pipestep.regions import (
    ApplyWithin,
    AssemblyResult,
    PreserveWithin,
    Reassembler,
    RegionExtractor,
    describe_pattern,
    open_close_pattern,
)
from pipestep.logging.helpers import get_logger

__version__ = '0.1.0'


def toggle_off_on(root_path=None, steps=(), *, name: str = DEFAULT_TOGGLE_NAME,
                  off: str = DEFAULT_TOGGLE_OFF, on: str = DEFAULT_TOGGLE_ON) -> FormatterStep:
    """Factory helper: run `steps` everywhere except between the off/on markers."""
    return PipeStepPair.named(name).open_close(off, on).preserve_within(root_path, steps)


__all__ = [
    'ApplyWithin',
    'AssemblyResult',
    'DEFAULT_TOGGLE_NAME',
    'DEFAULT_TOGGLE_OFF',
    'DEFAULT_TOGGLE_ON',
    'Formatter',
    'FormatterStep',
    'IntermediateStepRemovedError',
    'LineEnding',
    'Lint',
    'PipeConfigError',
    'PipeStepPair',
    'PreserveWithin',
    'Reassembler',
    'Region',
    'RegionExtractor',
    'TOGGLE_REMOVED_CODE',
    'describe_pattern',
    'get_logger',
    'open_close_pattern',
    'toggle_off_on',
]
