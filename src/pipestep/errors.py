from __future__ import annotations

"""Exception types raised by pipestep."""

from pipestep.core.models import Lint


class PipeConfigError(ValueError):
    """Raised eagerly when a step is configured incorrectly.

    Covers a pattern with zero or several capture groups and a step requested
    before any pattern was set.
    """


class IntermediateStepRemovedError(Exception):
    """An intermediate step removed or added a region marker.

    The structured finding is available as ``lint``.
    """

    def __init__(self, lint: Lint) -> None:
        super().__init__(str(lint))
        self.lint = lint
