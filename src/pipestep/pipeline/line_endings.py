from __future__ import annotations

from enum import Enum


class LineEnding(Enum):
    """Line-ending policies understood by `Formatter`."""
    UNIX = '\n'
    WINDOWS = '\r\n'

    @staticmethod
    def to_unix(text: str) -> str:
        """Convert CRLF and lone CR to LF."""
        if '\r' not in text:
            return text
        return text.replace('\r\n', '\n').replace('\r', '\n')

    def apply(self, text: str) -> str:
        """Render `text` (any line endings) with this policy's separator."""
        unix = self.to_unix(text)
        if self is LineEnding.UNIX:
            return unix
        return unix.replace('\n', self.value)
