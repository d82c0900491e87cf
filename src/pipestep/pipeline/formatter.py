from __future__ import annotations

"""Sequential sub-pipeline engine.

`Formatter` runs an immutable, ordered tuple of steps over a text. Input and
every step output are normalized to LF line endings; the configured
`line_ending` is applied only by `render`.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from pipestep.core.interfaces.step import FormatterStepProtocol
from pipestep.core.models import Lint
from pipestep.logging.helpers import get_logger
from pipestep.pipeline.line_endings import LineEnding


class Formatter:
    def __init__(
        self,
        steps: Iterable[FormatterStepProtocol],
        *,
        root_dir: Optional[Path] = None,
        line_ending: LineEnding = LineEnding.UNIX,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._steps: Tuple[FormatterStepProtocol, ...] = tuple(steps)
        self._root_dir = Path(root_dir) if root_dir is not None else None
        self._line_ending = line_ending
        self._log = logger or get_logger('pipeline.formatter')

    @property
    def steps(self) -> Tuple[FormatterStepProtocol, ...]:
        return self._steps

    @property
    def root_dir(self) -> Optional[Path]:
        return self._root_dir

    def relative_path(self, file: Optional[Path]) -> Optional[str]:
        """Return `file` relative to `root_dir` as a POSIX string when possible."""
        if file is None:
            return None
        path = Path(file)
        if self._root_dir is not None:
            try:
                return path.relative_to(self._root_dir).as_posix()
            except ValueError:
                pass
        return path.as_posix()

    def compute(self, text: str, file: Optional[Path]) -> str:
        """Apply every step in order and return the LF-normalized result."""
        unix = LineEnding.to_unix(text)
        for step in self._steps:
            out = step.format(unix, file)
            if out is None:
                continue
            unix = LineEnding.to_unix(out)
        return unix

    def lint(self, text: str, file: Optional[Path]) -> List[Lint]:
        """Lint with every step, each one seeing the text its predecessors produced."""
        lints: List[Lint] = []
        unix = LineEnding.to_unix(text)
        for step in self._steps:
            found = step.lint(unix, file)
            if found:
                self._log.debug('%d lint(s) from step %r on %s', len(found), step.name,
                                self.relative_path(file) or '<memory>')
                lints.extend(found)
            out = step.format(unix, file)
            if out is not None:
                unix = LineEnding.to_unix(out)
        return lints

    def render(self, text: str, file: Optional[Path]) -> str:
        """Run `compute` and apply the configured line ending to the result."""
        return self._line_ending.apply(self.compute(text, file))

    def close(self) -> None:
        for step in self._steps:
            step.close()

    def __enter__(self) -> 'Formatter':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
