from __future__ import annotations

"""Pattern construction and description for region steps.

Two construction surfaces exist:
    - open_close_pattern: two literal delimiters around a non-greedy
      any-character capture.
    - compile_single_group: a caller-supplied regex (str or compiled).

Both enforce exactly one capture group. `describe_pattern` renders the
open/close construction as "<open> <close>" and anything else as its raw
source; it recognizes only the shape `open_close_pattern` produces.
"""

import re
from typing import Optional, Tuple, Union

from pipestep.constants import ANY_CAPTURE
from pipestep.errors import PipeConfigError

PatternLike = Union[str, re.Pattern[str]]

# An escaped literal: backslash pairs or characters re.escape never leaves bare.
_LITERAL = r'(?:\\.|[^\\.^$*+?{}\[\]|()])*'
_OPEN_CLOSE_RE = re.compile(
    '(' + _LITERAL + ')' + re.escape(ANY_CAPTURE) + '(' + _LITERAL + ')',
    re.DOTALL,
)
_UNESCAPE_RE = re.compile(r'\\(.)', re.DOTALL)


def compile_single_group(regex: PatternLike, flags: int = 0) -> re.Pattern[str]:
    """Compile `regex` (if needed) and require exactly one capture group."""
    if regex is None:
        raise PipeConfigError('regex must not be None')
    if isinstance(regex, re.Pattern):
        if flags:
            raise PipeConfigError('flags cannot be combined with a compiled pattern')
        compiled = regex
    else:
        try:
            compiled = re.compile(regex, flags)
        except re.error as exc:
            raise PipeConfigError(f'invalid regex {regex!r}: {exc}') from exc
    if compiled.groups != 1:
        raise PipeConfigError(
            f'regex must have exactly one capturing group, '
            f'{compiled.pattern!r} has {compiled.groups}'
        )
    return compiled


def open_close_pattern(open_marker: str, close_marker: str) -> re.Pattern[str]:
    """Build the pattern matching `open_marker ... close_marker`, capturing the inside."""
    if not open_marker or not close_marker:
        raise PipeConfigError('open and close markers must be non-empty strings')
    return compile_single_group(re.escape(open_marker) + ANY_CAPTURE + re.escape(close_marker))


def split_open_close(pattern: re.Pattern[str]) -> Optional[Tuple[str, str]]:
    """Return the (open, close) literals if `pattern` is an open/close construction."""
    m = _OPEN_CLOSE_RE.fullmatch(pattern.pattern)
    if not m:
        return None
    open_marker = _UNESCAPE_RE.sub(r'\1', m.group(1))
    close_marker = _UNESCAPE_RE.sub(r'\1', m.group(2))
    # Only sources re.escape itself would produce, e.g. not \d or \w.
    if re.escape(open_marker) + ANY_CAPTURE + re.escape(close_marker) != pattern.pattern:
        return None
    return open_marker, close_marker


def describe_pattern(pattern: re.Pattern[str]) -> str:
    pair = split_open_close(pattern)
    if pair is None:
        return pattern.pattern
    return f'{pair[0]} {pair[1]}'
