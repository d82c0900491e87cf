from __future__ import annotations

"""
FormatterStep

A named, single text transformation. Steps are the units a `Formatter`
chains together; a region step built by `PipeStepPair` is itself a
`FormatterStep`, so region steps nest inside other sub-pipelines.

Factories:
    - FormatterStep.create: wrap `fn(text) -> str`.
    - FormatterStep.create_needs_file: wrap `fn(text, file) -> str`.
    - FormatterStep.create_lazy: build state and function on first use.

A wrapped function may also expose `lint(text, file)` and `close()`; both
are forwarded when present.
"""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional

from pipestep.core.models import Lint
from pipestep.logging.helpers import get_logger

TextFunc = Callable[[str], Optional[str]]
FileTextFunc = Callable[[str, Optional[Path]], Optional[str]]


class FormatterStep:
    def __init__(self, name: str, *, logger: Optional[logging.Logger] = None) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError('step name must be a non-empty string')
        self._name = name
        self._log = logger or get_logger('pipeline.step')

    @property
    def name(self) -> str:
        return self._name

    def format(self, text: str, file: Optional[Path]) -> Optional[str]:
        raise NotImplementedError

    def lint(self, text: str, file: Optional[Path]) -> List[Lint]:
        return []

    def close(self) -> None:
        return None

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._name!r})'

    @staticmethod
    def create(name: str, fn: TextFunc) -> 'FormatterStep':
        return _FunctionStep(name, lambda text, _file: fn(text), source=fn)

    @staticmethod
    def create_needs_file(name: str, fn: FileTextFunc) -> 'FormatterStep':
        return _FunctionStep(name, fn, source=fn)

    @staticmethod
    def create_lazy(name: str, state_supplier: Callable[[], Any],
                    func_builder: Callable[[Any], FileTextFunc]) -> 'FormatterStep':
        return _LazyStep(name, state_supplier, func_builder)


class _FunctionStep(FormatterStep):
    def __init__(self, name: str, fn: FileTextFunc, *, source: Any) -> None:
        super().__init__(name)
        self._fn = fn
        self._source = source

    def format(self, text: str, file: Optional[Path]) -> Optional[str]:
        return self._fn(text, file)

    def lint(self, text: str, file: Optional[Path]) -> List[Lint]:
        linter = getattr(self._source, 'lint', None)
        if linter is None:
            return []
        return list(linter(text, file))

    def close(self) -> None:
        closer = getattr(self._source, 'close', None)
        if closer is not None:
            closer()


class _LazyStep(FormatterStep):
    """Step whose state and function are built once, on first use."""

    def __init__(self, name: str, state_supplier: Callable[[], Any],
                 func_builder: Callable[[Any], FileTextFunc]) -> None:
        super().__init__(name)
        self._state_supplier = state_supplier
        self._func_builder = func_builder
        self._state: Any = None
        self._func: Optional[FileTextFunc] = None

    @property
    def state(self) -> Any:
        if self._state is None:
            self._state = self._state_supplier()
        return self._state

    def _delegate(self) -> FileTextFunc:
        if self._func is None:
            self._func = self._func_builder(self.state)
            self._log.debug('built lazy step %r', self.name)
        return self._func

    def format(self, text: str, file: Optional[Path]) -> Optional[str]:
        return self._delegate()(text, file)

    def lint(self, text: str, file: Optional[Path]) -> List[Lint]:
        linter = getattr(self._delegate(), 'lint', None)
        if linter is None:
            return []
        return list(linter(text, file))

    def close(self) -> None:
        if self._func is None:
            return
        closer = getattr(self._func, 'close', None)
        self._func = None
        if closer is not None:
            closer()
