"""
Command line matching for ncsh.

Walks the command trie word by word. At each step a keyword that matches
exactly wins, then a keyword that the word is a unique prefix of, then
the first placeholder (WORD) child, which accepts any value. An
abbreviation must be unique across every root active in the mode.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .token import Commands, Token, TokenKind


class CommandError(Exception):
    """Raised when a command line doesn't match the command trie."""
    pass


@dataclass
class ParsedCommand:
    """A matched command line."""
    token: Token  # Final token, carries the action
    path: List[Tuple[Token, str]] = field(default_factory=list)  # (token, typed word)

    def get(self, name: str) -> Optional[str]:
        """Value typed for the placeholder with this name, or None."""
        for token, word in self.path:
            if token.kind == TokenKind.WORD and token.name == name:
                return word
        return None

    def has(self, name: str) -> bool:
        return any(token.name == name for token, _ in self.path)


def match_word(commands: Commands, token_id: int, word: str) -> Token:
    """
    Match one word against the children of token_id.

    Raises:
        CommandError: If no child matches, or the word is an ambiguous prefix
    """
    children = commands.children(token_id)
    keywords = [t for t in children if t.kind == TokenKind.KEYWORD]

    for token in keywords:
        if token.name == word:
            return token

    prefixed = [t for t in keywords if t.name.startswith(word)]
    if len(prefixed) == 1:
        return prefixed[0]
    if len(prefixed) > 1:
        raise CommandError("ambiguous command")

    for token in children:
        if token.kind == TokenKind.WORD:
            return token

    raise CommandError("unknown command")


def walk_tokens(commands: Commands, root_id: int, words: List[str]) -> List[Tuple[Token, str]]:
    """Match every word starting from root_id, returning the matched path."""
    path = []
    token_id = root_id
    for word in words:
        token = match_word(commands, token_id, word)
        path.append((token, word))
        token_id = token.id
    return path


def check_abbreviations(commands: Commands, root_ids: List[int], words: List[str]) -> None:
    """
    Walk every root in step and reject abbreviations of different keywords.

    A word that isn't a keyword under any root the walk has reached must
    abbreviate at most one keyword name across all of them.

    Raises:
        CommandError: If a word is an ambiguous abbreviation
    """
    token_ids = list(root_ids)
    for word in words:
        keywords = [
            t for token_id in token_ids for t in commands.children(token_id)
            if t.kind == TokenKind.KEYWORD
        ]
        if not any(t.name == word for t in keywords):
            if len({t.name for t in keywords if t.name.startswith(word)}) > 1:
                raise CommandError("ambiguous command")

        reached = []
        for token_id in token_ids:
            try:
                reached.append(match_word(commands, token_id, word).id)
            except CommandError:
                continue
        token_ids = reached


def match_command(commands: Commands, root_ids: List[int], line: str) -> ParsedCommand:
    """
    Match a command line against several roots, in order.

    The first root under which the whole line reaches a token with an
    action wins.

    Raises:
        CommandError: With the most specific failure across all roots
    """
    words = line.split()
    if not words:
        raise CommandError("incomplete command")
    check_abbreviations(commands, root_ids, words)

    failure = CommandError("unknown command")
    for root_id in root_ids:
        try:
            path = walk_tokens(commands, root_id, words)
        except CommandError as e:
            if str(e) != "unknown command":
                failure = e
            continue

        token = path[-1][0]
        if token.action is None:
            failure = CommandError("incomplete command")
            continue
        return ParsedCommand(token=token, path=path)

    raise failure
