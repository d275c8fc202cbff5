"""
ncsh_lib.common - Shared utilities for ncsh

This module provides:
- colors: ANSI color codes and session notices
"""

from .colors import Colors, paint, log, warn, error, info, banner

__all__ = [
    'Colors', 'paint', 'log', 'warn', 'error', 'info', 'banner',
]
