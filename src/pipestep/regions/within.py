from __future__ import annotations

"""Preserve-within and apply-within region strategies.

Both share `RegionFunc`: a compiled single-capture pattern, the immutable
sub-pipeline steps, and the extract/reassemble pair. Region lists are built
per call and never stored on the instance. Input is normalized to LF line
endings first, the same text a `Formatter` hands to its steps.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from pipestep.core.interfaces.step import FormatterProtocol, FormatterStepProtocol
from pipestep.core.models import Lint
from pipestep.logging.helpers import get_logger
from pipestep.pipeline.formatter import Formatter
from pipestep.pipeline.line_endings import LineEnding
from pipestep.regions.extractor import RegionExtractor
from pipestep.regions.patterns import PatternLike
from pipestep.regions.reassembly import AssemblyResult, Reassembler


class RegionFunc:
    def __init__(
        self,
        regex: PatternLike,
        steps: Iterable[FormatterStepProtocol],
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('regions.within')
        self._extractor = RegionExtractor(regex, logger=self._log)
        self._reassembler = Reassembler(self._extractor, logger=self._log)
        self.regex = self._extractor.regex
        self.steps: Tuple[FormatterStepProtocol, ...] = tuple(steps)

    @property
    def extractor(self) -> RegionExtractor:
        return self._extractor

    def build_formatter(self, root_dir: Optional[Path]) -> Formatter:
        """Sub-pipeline over `steps`; LF-only since it only ever sees normalized text."""
        return Formatter(self.steps, root_dir=root_dir, line_ending=LineEnding.UNIX)

    def assemble(self, text: str, values: List[str]) -> AssemblyResult:
        return self._reassembler.assemble(text, values)

    def apply(self, formatter: FormatterProtocol, text: str, file: Optional[Path]) -> str:
        raise NotImplementedError

    def lint(self, formatter: FormatterProtocol, text: str, file: Optional[Path]) -> List[Lint]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.regex.pattern!r}, steps={[s.name for s in self.steps]!r})'


class PreserveWithin(RegionFunc):
    """Run the sub-pipeline over the whole text, then restore every region verbatim."""

    def try_apply(self, formatter: FormatterProtocol, text: str, file: Optional[Path]) -> AssemblyResult:
        unix = LineEnding.to_unix(text)
        originals = self._extractor.captures(unix)
        formatted = formatter.compute(unix, file)
        self._log.debug('preserving %d region(s) of %s', len(originals), self.regex.pattern)
        return self.assemble(formatted, originals)

    def apply(self, formatter: FormatterProtocol, text: str, file: Optional[Path]) -> str:
        return self.try_apply(formatter, text, file).unwrap()

    def lint(self, formatter: FormatterProtocol, text: str, file: Optional[Path]) -> List[Lint]:
        result = self.try_apply(formatter, text, file)
        if not result.ok:
            return [result.lint]
        # Markers survived; forward the wrapped steps' findings.
        return formatter.lint(text, file)


class ApplyWithin(RegionFunc):
    """Run the sub-pipeline over each region alone; text outside regions is untouched.

    Linting within the regions is not supported.
    """

    def apply(self, formatter: FormatterProtocol, text: str, file: Optional[Path]) -> str:
        unix = LineEnding.to_unix(text)
        transformed = [formatter.compute(region.text, file) for region in self._extractor.iter_regions(unix)]
        self._log.debug('applied steps within %d region(s) of %s', len(transformed), self.regex.pattern)
        return self.assemble(unix, transformed).unwrap()

    def lint(self, formatter: FormatterProtocol, text: str, file: Optional[Path]) -> List[Lint]:
        return []
