"""
Command dispatcher for ncsh.

Matches a command line against the trie roots of the current mode and
runs the handler attached to the matched token. Errors are reported to
the operator and never end the session.
"""

from pathlib import Path
from typing import Optional

from ncsh_lib.commands import CommandError, match_command
from ncsh_lib.config import DEFAULT_HOSTNAME, STATE_FILE
from ncsh_lib.schema import SchemaContext, build_tree

from .context import ShellContext
from .menu import build_commands
from .navigation import mode_roots


def create_context(
    schema: SchemaContext,
    running: Optional[dict] = None,
    state_file: Path = STATE_FILE,
    hostname: str = DEFAULT_HOSTNAME,
    use_pager: bool = False
) -> ShellContext:
    """
    Create a session context with the candidate initialized from running.

    Raises:
        DataValidationError: If the running configuration is invalid
    """
    running = running or {}
    build_tree(schema, running, config_only=True)
    ctx = ShellContext(
        schema=schema,
        commands=build_commands(schema),
        state_file=state_file,
        hostname=hostname,
        use_pager=use_pager,
    )
    ctx.running = running
    ctx.candidate_discard()
    return ctx


def handle_command(cmd: str, ctx: ShellContext) -> bool:
    """
    Handle a command. Returns False if should exit REPL.
    """
    line = cmd.strip()
    # Blank lines and "!" comments
    if not line or line.startswith("!"):
        return True

    try:
        parsed = match_command(ctx.commands, mode_roots(ctx.commands, ctx.mode), line)
    except CommandError as e:
        print(f"% {e}")
        return True

    return not parsed.token.action(ctx, parsed)
