from __future__ import annotations

"""
PipeStepPair

Builder for region steps: name the step, choose the region pattern (either
two literal markers or a single-capture regex), then wrap a list of steps:

    step = (PipeStepPair.named('toggle')
            .open_close('spotless:off', 'spotless:on')
            .preserve_within(root, [fmt_step]))

The returned object is a `FormatterStep`, so it can itself be placed inside
another sub-pipeline.
"""

import re
from pathlib import Path
from typing import Iterable, List, Optional

from pipestep.constants import DEFAULT_TOGGLE_NAME, DEFAULT_TOGGLE_OFF, DEFAULT_TOGGLE_ON
from pipestep.core.interfaces.regions import RegionFuncProtocol
from pipestep.core.interfaces.step import FormatterStepProtocol
from pipestep.core.models import Lint
from pipestep.errors import PipeConfigError
from pipestep.pipeline.formatter import Formatter
from pipestep.pipeline.step import FormatterStep
from pipestep.regions.patterns import PatternLike, compile_single_group, open_close_pattern
from pipestep.regions.within import ApplyWithin, PreserveWithin


class PipeStepPair:
    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise PipeConfigError('step name must be a non-empty string')
        self._name = name
        self._regex: Optional[re.Pattern[str]] = None

    @classmethod
    def named(cls, name: str) -> 'PipeStepPair':
        """Declares the name of the step."""
        return cls(name)

    @staticmethod
    def default_toggle_name() -> str:
        return DEFAULT_TOGGLE_NAME

    @staticmethod
    def default_toggle_off() -> str:
        return DEFAULT_TOGGLE_OFF

    @staticmethod
    def default_toggle_on() -> str:
        return DEFAULT_TOGGLE_ON

    @property
    def name(self) -> str:
        return self._name

    @property
    def pattern(self) -> Optional[re.Pattern[str]]:
        return self._regex

    def open_close(self, open_marker: str, close_marker: str) -> 'PipeStepPair':
        """Defines the opening and closing markers."""
        self._regex = open_close_pattern(open_marker, close_marker)
        return self

    def regex(self, regex: PatternLike, flags: int = 0) -> 'PipeStepPair':
        """Defines the regions via regex. Must have *exactly one* capturing group."""
        self._regex = compile_single_group(regex, flags)
        return self

    def _require_regex(self) -> re.Pattern[str]:
        if self._regex is None:
            raise PipeConfigError('must call regex() or open_close()')
        return self._regex

    def preserve_within(self, root_path: Optional[Path], steps: Iterable[FormatterStepProtocol]) -> FormatterStep:
        """Apply `steps` to the whole text but keep the content selected by the pattern."""
        return self._lazy_step(PreserveWithin, root_path, steps)

    def apply_within(self, root_path: Optional[Path], steps: Iterable[FormatterStepProtocol]) -> FormatterStep:
        """Apply `steps` only within the regions selected by the pattern.

        Linting within the substeps is not supported.
        """
        return self._lazy_step(ApplyWithin, root_path, steps)

    def _lazy_step(self, kind, root_path: Optional[Path], steps: Iterable[FormatterStepProtocol]) -> FormatterStep:
        regex = self._require_regex()
        frozen = tuple(steps)
        return FormatterStep.create_lazy(
            self._name,
            lambda: kind(regex, frozen),
            lambda state: _BoundRegionFunc(state, state.build_formatter(root_path)),
        )


class _BoundRegionFunc:
    """A region strategy paired with the formatter it owns."""

    def __init__(self, func: RegionFuncProtocol, formatter: Formatter) -> None:
        self._func = func
        self._formatter = formatter

    def __call__(self, text: str, file: Optional[Path]) -> str:
        return self._func.apply(self._formatter, text, file)

    def lint(self, text: str, file: Optional[Path]) -> List[Lint]:
        return self._func.lint(self._formatter, text, file)

    def close(self) -> None:
        self._formatter.close()
