"""
Schema-derived configuration commands for the REPL.

Entering a container or list entry descends into it; a leaf command sets
the leaf in the candidate configuration and a leaf-list command adds a
value to it.
"""

from ncsh_lib.commands import ParsedCommand
from ncsh_lib.schema import canonical_value

from ..context import Configure, ShellContext
from ..navigation import find_config_node, mode_set, target_segments


def cmd_config_enter(ctx: ShellContext, args: ParsedCommand) -> bool:
    """Enter a container or list entry, creating it in the candidate if needed."""
    segments = target_segments(ctx, args)
    snode = ctx.schema.find([s.name for s in segments])

    # Non-presence containers only exist once they hold something.
    create = not snode.is_np_container
    find_config_node(ctx, segments, create=create)

    mode_set(ctx, Configure(tuple(segments)))
    return False


def cmd_config_leaf(ctx: ShellContext, args: ParsedCommand) -> bool:
    """Set a leaf value, or add a leaf-list value, in the candidate."""
    segments = target_segments(ctx, args)
    leaf = segments.pop()
    snode = ctx.schema.find([s.name for s in segments] + [leaf.name])
    value = args.path[-1][1]

    parent = find_config_node(ctx, segments, create=True)
    if snode.kind == "leaf-list":
        values = parent.get(leaf.name)
        if values is None:
            values = []
        elif not isinstance(values, list):
            values = [values]
        if value not in [canonical_value(v) for v in values]:
            values.append(value)
        parent[leaf.name] = values
    else:
        parent[leaf.name] = value
    return False
