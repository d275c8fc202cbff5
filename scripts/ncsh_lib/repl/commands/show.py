"""
Show commands for the REPL.

This module provides the configuration, state and schema "show" commands.
"""

import yaml
from rich.console import Console

from ncsh_lib.commands import ParsedCommand
from ncsh_lib.schema import DataValidationError

from ..context import Datastore, ShellContext
from ..display import (
    OUTPUT_FORMATS,
    diff_config,
    flatten_config,
    new_table,
    page_output,
    render_document,
)


def _check_format(fmt) -> bool:
    """Print an error for unknown output formats."""
    if fmt is not None and fmt not in OUTPUT_FORMATS:
        print(f"% unknown format: {fmt} (expected {', '.join(OUTPUT_FORMATS)})")
        return False
    return True


# ===== "show <candidate|running>" =====

def cmd_show_config(ctx: ShellContext, args: ParsedCommand) -> bool:
    datastore = Datastore.CANDIDATE if args.has("candidate") else Datastore.RUNNING
    with_defaults = args.has("with-defaults")
    fmt = args.get("format")
    if not _check_format(fmt):
        return False

    try:
        config = ctx.get_configuration(datastore)
    except DataValidationError as e:
        print(f"% failed to load configuration: {e}")
        return False

    if fmt is None:
        data = flatten_config(config.root, with_defaults)
    else:
        data = render_document(config.to_document(with_defaults), fmt)

    try:
        page_output(ctx, data)
    except OSError as e:
        print(f"% failed to print configuration: {e}")
    return False


# ===== "show changes" =====

def cmd_show_config_changes(ctx: ShellContext, args: ParsedCommand) -> bool:
    try:
        running = ctx.get_configuration(Datastore.RUNNING)
        candidate = ctx.get_configuration(Datastore.CANDIDATE)
    except DataValidationError as e:
        print(f"% failed to load configuration: {e}")
        return False

    print(diff_config(running.root, candidate.root), end="")
    return False


# ===== "show state" =====

def cmd_show_state(ctx: ShellContext, args: ParsedCommand) -> bool:
    xpath = args.get("xpath")
    fmt = args.get("format") or "json"
    if not _check_format(fmt):
        return False

    try:
        state = ctx.fetch_state()
    except (OSError, yaml.YAMLError, DataValidationError) as e:
        print(f"% failed to fetch state data: {e}")
        return False

    if xpath:
        try:
            nodes = state.find_path(xpath)
        except ValueError as e:
            print(f"% {e}")
            return False
        document = [{node.name: node.to_document(True)} for node in nodes]
    else:
        document = state.to_document(True)

    try:
        page_output(ctx, render_document(document, fmt))
    except OSError as e:
        print(f"% failed to print state data: {e}")
    return False


# ===== "show schema modules" =====

def cmd_show_schema_modules(ctx: ShellContext, args: ParsedCommand) -> bool:
    table = new_table("Module", "Revision", "Flags", "Namespace")
    for module in ctx.schema.modules:
        flags = "I" if module.implemented else ""
        table.add_row(module.name, module.revision or "-", flags, module.namespace)

    console = Console()
    print(" Flags: I - Implemented")
    print()
    console.print(table)
    print()
    return False
