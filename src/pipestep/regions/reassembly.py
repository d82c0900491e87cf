from __future__ import annotations

"""
Reassembly of region values into a text, with structural verification.

`Reassembler.assemble` walks the pattern over a text, copies literal spans
between regions verbatim and splices the Nth stored value into the Nth
region. With no stored values the text is returned as is; otherwise the
number of regions found must equal the number of values. If it does not,
the result carries a `toggleOffOnRemoved` lint instead of text:

    start_line = 1 + newlines in the text assembled before the divergence
    end_line   = 1 + newlines in the whole scanned text

Callers pick the consumption: `AssemblyResult.unwrap()` raises
`IntermediateStepRemovedError`, lint collection reads `AssemblyResult.lint`.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from pipestep.constants import TOGGLE_REMOVED_CODE
from pipestep.core.models import Lint
from pipestep.errors import IntermediateStepRemovedError
from pipestep.logging.helpers import get_logger, trace_regions
from pipestep.regions.extractor import RegionExtractor
from pipestep.regions.patterns import describe_pattern


@dataclass(frozen=True)
class AssemblyResult:
    text: str = ''
    lint: Optional[Lint] = None

    @property
    def ok(self) -> bool:
        return self.lint is None

    def unwrap(self) -> str:
        if self.lint is not None:
            raise IntermediateStepRemovedError(self.lint)
        return self.text


class Reassembler:
    def __init__(self, extractor: RegionExtractor, *, logger: Optional[logging.Logger] = None) -> None:
        self._extractor = extractor
        self._log = logger or get_logger('regions.reassembly')

    def assemble(self, text: str, values: Sequence[str]) -> AssemblyResult:
        if not values:
            # Nothing was captured, nothing to restore.
            return AssemblyResult(text=text)
        parts: List[str] = []
        cursor = 0
        found = 0
        for region in self._extractor.iter_regions(text):
            parts.append(text[cursor:region.start])
            if found == len(values):
                # One region more than stored values; stop at the extra marker.
                found += 1
                break
            parts.append(values[found])
            cursor = region.end
            found += 1

        if found == len(values):
            parts.append(text[cursor:])
            trace_regions(self._log, 'reassembled regions', count=found)
            return AssemblyResult(text=''.join(parts))

        assembled = ''.join(parts)
        lint = self.mismatch_lint(assembled, text)
        self._log.warning('region count mismatch (expected %d): %s', len(values), lint)
        return AssemblyResult(lint=lint)

    def mismatch_lint(self, assembled: str, scanned: str) -> Lint:
        end_line = 1 + scanned.count('\n')
        # Restored values may span more lines than the scanned text.
        start_line = min(1 + assembled.count('\n'), end_line)
        pattern = describe_pattern(self._extractor.regex)
        return Lint.create(
            TOGGLE_REMOVED_CODE,
            f'An intermediate step removed a match of {pattern}',
            start_line,
            end_line,
        )
