from __future__ import annotations

"""Logging helpers that standardize pipestep logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'pipestep' logger.
    - get_logger: Namespaced logger factory ('pipestep.*').
    - trace_regions utilities gated by PIPESTEP_TRACE_REGIONS or
      enable_trace_regions.
"""

import logging
import os
from typing import Optional, TextIO

TRACE_ENV_VAR = "PIPESTEP_TRACE_REGIONS"
_TRUE = {"1", "true", "yes", "on"}
_trace_override: Optional[bool] = None


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'pipestep.regions').
        - msg: Formatted message string.
        - version: pipestep.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        """Resolve the pipestep version without importing at module load.

        Returns:
            str: Version string or 'unknown' if it cannot be determined.
        """
        try:
            from pipestep import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("PIPESTEP_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None,
    force: bool = False,
) -> logging.Logger:
    """Configure the base 'pipestep' logger once and return it.

    Once a handler is installed, later calls only update the level unless
    `force` is set, which replaces the handlers with a new one.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).
        force: Drop existing handlers and reconfigure.

    Returns:
        The configured base logger.
    """
    base = logging.getLogger("pipestep")
    if base.handlers and not force:
        base.setLevel(level)
        return base

    import sys as _sys

    for old in list(base.handlers):
        base.removeHandler(old)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'pipestep'."""
    if not name or name == "pipestep":
        return logging.getLogger("pipestep")
    if name.startswith("pipestep"):
        return logging.getLogger(name)
    return logging.getLogger(f"pipestep.{name}")


def env_flag(value: Optional[str]) -> bool:
    """Truthiness rule shared by every PIPESTEP_* boolean variable."""
    return (value or "").strip().lower() in _TRUE


def enable_trace_regions(enabled: Optional[bool]) -> None:
    """Force region tracing on or off; None defers to the environment again."""
    global _trace_override
    _trace_override = enabled


def is_trace_regions_enabled() -> bool:
    """Check if region tracing is enabled by override or env flag."""
    if _trace_override is not None:
        return _trace_override
    return env_flag(os.getenv(TRACE_ENV_VAR))


def trace_regions(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity region trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context appended in debug format.
    """
    if not is_trace_regions_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx)
    else:
        logger.debug("%s", message)
