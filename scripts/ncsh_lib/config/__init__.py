"""
ncsh_lib.config - Shell settings for ncsh.

This package contains:
- constants: Path constants and environment overrides (SCHEMA_DIR, RUNNING_FILE, etc.)
"""

from .constants import (
    SCHEMA_DIR,
    RUNNING_FILE,
    STATE_FILE,
    HISTORY_FILE,
    DEFAULT_HOSTNAME,
    get_pager_command,
    paging_enabled,
)

__all__ = [
    'SCHEMA_DIR',
    'RUNNING_FILE',
    'STATE_FILE',
    'HISTORY_FILE',
    'DEFAULT_HOSTNAME',
    'get_pager_command',
    'paging_enabled',
]
