"""
Internal commands for the REPL.

Mode transitions (configure, exit, end), command listing, hostname, pwd
and candidate management (discard, commit, validate).

Every handler takes the shell context and the matched command, and
returns True when the REPL should exit.
"""

from ncsh_lib.commands import ParsedCommand, enumerate_commands
from ncsh_lib.schema import DataValidationError

from ..context import Configure, Datastore, Operational, ShellContext, data_path
from ..navigation import mode_config_exit, mode_set, mode_token


# ===== "configure" =====

def cmd_config(ctx: ShellContext, args: ParsedCommand) -> bool:
    """Enter configuration mode at the top level."""
    mode_set(ctx, Configure())
    return False


# ===== "exit" =====

def cmd_exit_exec(ctx: ShellContext, args: ParsedCommand) -> bool:
    """Leave the shell."""
    return True


def cmd_exit_config(ctx: ShellContext, args: ParsedCommand) -> bool:
    """Leave one configuration level."""
    mode_config_exit(ctx)
    return False


# ===== "end" =====

def cmd_end(ctx: ShellContext, args: ParsedCommand) -> bool:
    """Return to operational mode."""
    mode_set(ctx, Operational())
    return False


# ===== "list" =====

def cmd_list(ctx: ShellContext, args: ParsedCommand) -> bool:
    """List every command available in the current mode."""
    commands = ctx.commands
    if isinstance(ctx.mode, Configure):
        # Internal configuration commands first.
        list_root(ctx, commands.config_dflt_internal)
        print("---")
        list_root(ctx, commands.config_root_internal)
        print("---")
        # Schema-derived configuration commands.
        list_root(ctx, mode_token(commands, ctx.mode))
    else:
        list_root(ctx, commands.exec_root)
    return False


def list_root(ctx: ShellContext, root_id: int) -> None:
    for line in enumerate_commands(ctx.commands, root_id):
        print(line)


# ===== "hostname" =====

def cmd_hostname(ctx: ShellContext, args: ParsedCommand) -> bool:
    ctx.hostname = args.get("hostname")
    return False


# ===== "pwd" =====

def cmd_pwd(ctx: ShellContext, args: ParsedCommand) -> bool:
    """Show the data path of the current configuration level."""
    print(data_path(ctx.mode) or "/")
    return False


# ===== "discard" =====

def cmd_discard(ctx: ShellContext, args: ParsedCommand) -> bool:
    """Reset the candidate to the running configuration."""
    ctx.candidate_discard()
    return False


# ===== "commit" =====

def cmd_commit(ctx: ShellContext, args: ParsedCommand) -> bool:
    try:
        ctx.candidate_commit(args.get("comment"))
        print("% configuration committed successfully")
    except DataValidationError as e:
        print(f"% {e}")
    return False


# ===== "validate" =====

def cmd_validate(ctx: ShellContext, args: ParsedCommand) -> bool:
    try:
        ctx.get_configuration(Datastore.CANDIDATE)
        print("% candidate configuration validated successfully")
    except DataValidationError as e:
        print(f"% {e}")
    return False
