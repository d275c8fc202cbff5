"""
ncsh_lib.repl - REPL components for ncsh

This package contains the modular components for the ncsh interactive shell:
- context: Shell modes and session state tracking
- menu: Internal command tree and command trie construction
- navigation: Mode transitions and configuration nesting
- completer: Tab completion
- display/: Configuration and state display functions
- commands/: Command handlers
- dispatcher: Command matching and dispatch
"""

from .context import (
    Operational,
    Configure,
    PathSegment,
    Datastore,
    ShellContext,
    get_prompt_text,
    data_path,
)
from .menu import build_command_tree, build_commands
from .navigation import mode_roots, mode_token
from .completer import CommandCompleter
from .dispatcher import create_context, handle_command

__all__ = [
    'Operational',
    'Configure',
    'PathSegment',
    'Datastore',
    'ShellContext',
    'get_prompt_text',
    'data_path',
    'build_command_tree',
    'build_commands',
    'mode_roots',
    'mode_token',
    'CommandCompleter',
    'create_context',
    'handle_command',
]
