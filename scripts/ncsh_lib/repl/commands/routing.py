"""
OSPFv2 show commands for the REPL.

Each command fetches a fresh state snapshot and pages the rendered
table or detail listing.
"""

import yaml

from ncsh_lib.commands import ParsedCommand
from ncsh_lib.schema import DataValidationError

from ..context import ShellContext
from ..display import (
    ospf_interface_detail,
    ospf_interface_table,
    ospf_neighbor_detail,
    ospf_neighbor_table,
    ospf_route_table,
    page_output,
    page_table,
)


def _fetch_state(ctx: ShellContext):
    """State snapshot, or None after printing the failure."""
    try:
        return ctx.fetch_state()
    except (OSError, yaml.YAMLError, DataValidationError) as e:
        print(f"% failed to fetch state data: {e}")
        return None


def _display(ctx: ShellContext, table=None, text=None) -> None:
    try:
        if table is not None:
            page_table(ctx, table)
        elif text:
            page_output(ctx, text)
    except OSError as e:
        print(f"% failed to display data: {e}")


def cmd_show_ospf_interface(ctx: ShellContext, args: ParsedCommand) -> bool:
    state = _fetch_state(ctx)
    if state is None:
        return False

    name = args.get("name")
    if args.has("detail"):
        _display(ctx, text=ospf_interface_detail(state, name))
    else:
        _display(ctx, table=ospf_interface_table(state, name))
    return False


def cmd_show_ospf_neighbor(ctx: ShellContext, args: ParsedCommand) -> bool:
    state = _fetch_state(ctx)
    if state is None:
        return False

    router_id = args.get("router-id")
    if args.has("detail"):
        _display(ctx, text=ospf_neighbor_detail(state, router_id))
    else:
        _display(ctx, table=ospf_neighbor_table(state, router_id))
    return False


def cmd_show_ospf_route(ctx: ShellContext, args: ParsedCommand) -> bool:
    state = _fetch_state(ctx)
    if state is None:
        return False

    _display(ctx, table=ospf_route_table(state, args.get("prefix")))
    return False
