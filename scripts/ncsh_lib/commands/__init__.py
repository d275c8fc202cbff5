"""
ncsh_lib.commands - Command token trie for ncsh.

This package contains:
- token: The token arena (Commands, Token, TokenKind) and enumerate_commands
- builder: Registration of declarative and schema-derived command trees
- parser: Matching command lines against the trie
"""

from .token import (
    TokenKind,
    Token,
    Commands,
    render_token,
    enumerate_commands,
)

from .builder import (
    register_tree,
    register_schema_commands,
)

from .parser import (
    CommandError,
    ParsedCommand,
    match_word,
    check_abbreviations,
    walk_tokens,
    match_command,
)

__all__ = [
    # Tokens
    'TokenKind',
    'Token',
    'Commands',
    'render_token',
    'enumerate_commands',
    # Builder
    'register_tree',
    'register_schema_commands',
    # Parser
    'CommandError',
    'ParsedCommand',
    'match_word',
    'check_abbreviations',
    'walk_tokens',
    'match_command',
]
