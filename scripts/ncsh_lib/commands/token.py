"""
Command token trie for ncsh.

All tokens live in a flat arena (Commands.arena) and refer to each other
by integer id. A path of tokens from one of the roots to a token carrying
an action is one complete executable command.

The arena holds four roots:
- exec_root: operational-mode commands
- config_dflt_internal: commands valid at every configuration level
- config_root_internal: commands valid at the top configuration level
- config_root: configuration commands derived from the schema
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple


class TokenKind(Enum):
    """Category of a command token."""
    ROOT = "root"  # Arena root, never typed
    KEYWORD = "keyword"  # Fixed literal the operator types verbatim
    WORD = "word"  # Placeholder the operator replaces with a value


@dataclass
class Token:
    """A node of the command trie."""
    id: int
    name: str
    kind: TokenKind
    help: str = ""
    action: Optional[Callable[..., bool]] = None
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)
    # Schema-derived tokens only
    schema_path: Optional[Tuple[str, ...]] = None
    key: Optional[str] = None  # Set on list key placeholders


class Commands:
    """Arena of command tokens."""

    def __init__(self):
        self.arena: List[Token] = []
        self.exec_root = self._add_root("exec")
        self.config_dflt_internal = self._add_root("config-default")
        self.config_root_internal = self._add_root("config-internal")
        self.config_root = self._add_root("config")
        # Schema path -> token a configuration context resolves to
        self.schema_tokens: Dict[Tuple[str, ...], int] = {}

    def _add_root(self, name: str) -> int:
        token = Token(id=len(self.arena), name=name, kind=TokenKind.ROOT)
        self.arena.append(token)
        return token.id

    def add_token(
        self,
        parent_id: int,
        name: str,
        kind: TokenKind,
        action: Optional[Callable[..., bool]] = None,
        help: str = "",
        **attrs: Any
    ) -> int:
        """Register a token under parent_id and return its id."""
        token = Token(id=len(self.arena), name=name, kind=kind, help=help,
                      action=action, parent=parent_id, **attrs)
        self.arena.append(token)
        self.arena[parent_id].children.append(token.id)
        return token.id

    def get_token(self, token_id: int) -> Token:
        return self.arena[token_id]

    def children(self, token_id: int) -> List[Token]:
        return [self.arena[i] for i in self.arena[token_id].children]

    def descendants(self, token_id: int) -> Iterator[int]:
        """Pre-order ids of every token below token_id, in registration order."""
        stack = list(reversed(self.arena[token_id].children))
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self.arena[current].children))


def render_token(token: Token) -> str:
    """Keywords upper-case, placeholders as declared."""
    if token.kind == TokenKind.KEYWORD:
        return token.name.upper()
    return token.name


def enumerate_commands(commands: Commands, root_id: int) -> Iterator[str]:
    """
    Yield every executable command reachable below root_id.

    Commands are produced in registration order, one line per token that
    carries an action. Each line is the path from root_id (excluded) to
    the token, rendered with render_token() and joined with spaces, with
    a trailing space.

    The walk up from a token stops when it reaches root_id itself, so the
    result doesn't depend on how token ids were assigned.
    """
    for token_id in commands.descendants(root_id):
        token = commands.get_token(token_id)
        if token.action is None:
            continue

        path = []
        current: Optional[int] = token_id
        while current is not None and current != root_id:
            ancestor = commands.get_token(current)
            path.append(render_token(ancestor))
            current = ancestor.parent

        yield " ".join(reversed(path)) + " "
