from __future__ import annotations

"""Project-wide constants used across modules.

Toggle defaults are plain literal delimiters for the open/close construction;
they carry no runtime behavior of their own.
"""

DEFAULT_TOGGLE_NAME: str = 'toggle'
DEFAULT_TOGGLE_OFF: str = 'spotless:off'
DEFAULT_TOGGLE_ON: str = 'spotless:on'

# Stable lint category for a region marker that an intermediate step removed or added.
TOGGLE_REMOVED_CODE: str = 'toggleOffOnRemoved'

# Non-greedy any-character capture placed between the open/close literals.
ANY_CAPTURE: str = r'([\s\S]*?)'
