from __future__ import annotations

"""Environment-driven settings for pipestep logging and tracing.

Variables:
    PIPESTEP_LOG_LEVEL: Level name for the 'pipestep' logger (default WARNING).
    PIPESTEP_JSON_LOGS: '1' to emit JSON log lines.
    PIPESTEP_TRACE_REGIONS: '1' to trace every region at DEBUG.

Boolean variables accept 1, true, yes or on.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

from pipestep.logging.helpers import TRACE_ENV_VAR, enable_trace_regions, env_flag, setup_base_logger


@dataclass(frozen=True)
class PipeStepSettings:
    """Immutable settings blob read once from the environment."""
    log_level: int = logging.WARNING
    json_logs: bool = False
    trace_regions: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'PipeStepSettings':
        src = os.environ if env is None else env
        level_name = (src.get('PIPESTEP_LOG_LEVEL') or 'WARNING').strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f'PIPESTEP_LOG_LEVEL: unknown level {level_name!r}')
        return cls(
            log_level=level,
            json_logs=env_flag(src.get('PIPESTEP_JSON_LOGS')),
            trace_regions=env_flag(src.get(TRACE_ENV_VAR)),
        )

    def configure_logging(self, *, stream: Optional[TextIO] = None) -> logging.Logger:
        """Apply these settings to the base 'pipestep' logger, replacing its handler."""
        enable_trace_regions(self.trace_regions)
        level = min(self.log_level, logging.DEBUG) if self.trace_regions else self.log_level
        return setup_base_logger(json_logs=self.json_logs, level=level, stream=stream, force=True)
