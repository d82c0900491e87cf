"""Public API surface for pipestep.pipeline."""
from .formatter import Formatter
from .line_endings import LineEnding
from .step import FormatterStep

__all__ = ["Formatter", "FormatterStep", "LineEnding"]
