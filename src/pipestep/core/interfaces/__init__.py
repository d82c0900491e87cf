from .regions import RegionFuncProtocol
from .step import FormatterProtocol, FormatterStepProtocol

__all__ = [
    'FormatterProtocol',
    'FormatterStepProtocol',
    'RegionFuncProtocol',
]
