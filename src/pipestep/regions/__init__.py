"""Public API surface for pipestep.regions."""
from .extractor import RegionExtractor
from .patterns import compile_single_group, describe_pattern, open_close_pattern, split_open_close
from .reassembly import AssemblyResult, Reassembler
from .within import ApplyWithin, PreserveWithin, RegionFunc

__all__ = [
    "ApplyWithin",
    "AssemblyResult",
    "PreserveWithin",
    "Reassembler",
    "RegionExtractor",
    "RegionFunc",
    "compile_single_group",
    "describe_pattern",
    "open_close_pattern",
    "split_open_close",
]
