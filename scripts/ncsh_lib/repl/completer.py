"""
Tab completion for ncsh.

This module provides mode-aware command completion using prompt_toolkit.
"""

from prompt_toolkit.completion import Completer, Completion

from ncsh_lib.commands import CommandError, Token, TokenKind, walk_tokens

from .context import ShellContext
from .navigation import mode_roots


class CommandCompleter(Completer):
    """Completes keywords from the command trie roots active in the current mode."""

    def __init__(self, ctx: ShellContext):
        self.ctx = ctx

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        words = text.split()

        # Determine what we're completing
        if not words or text.endswith(' '):
            # Complete the next word
            candidates = self._get_candidates(words)
            word = ""
        else:
            # User is typing a word - complete from the words before it
            candidates = self._get_candidates(words[:-1])
            word = words[-1].lower()

        for token in candidates:
            if token.name.startswith(word):
                yield Completion(token.name, start_position=-len(word), display_meta=token.help)

    def _get_candidates(self, words: list[str]) -> list[Token]:
        """Keywords that may follow the given words."""
        commands = self.ctx.commands
        candidates = []
        seen = set()
        for root_id in mode_roots(commands, self.ctx.mode):
            try:
                path = walk_tokens(commands, root_id, words)
            except CommandError:
                continue
            token_id = path[-1][0].id if path else root_id
            for token in commands.children(token_id):
                if token.kind == TokenKind.KEYWORD and token.name not in seen:
                    seen.add(token.name)
                    candidates.append(token)
        return candidates
