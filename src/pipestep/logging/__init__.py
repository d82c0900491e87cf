"""Logging helpers for pipestep (standard library `logging`)."""
from .helpers import JsonLogFormatter, enable_trace_regions, get_logger, setup_base_logger, trace_regions

__all__ = ["JsonLogFormatter", "enable_trace_regions", "get_logger", "setup_base_logger", "trace_regions"]
