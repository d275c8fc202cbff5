"""
Navigation utilities for ncsh.

This module handles mode transitions, resolves which command trie roots
are active in a mode, and locates configuration nodes inside the
candidate document.
"""

from typing import List, Optional

from ncsh_lib.commands import Commands, ParsedCommand, TokenKind
from ncsh_lib.schema import canonical_value

from .context import Configure, Mode, Operational, PathSegment, ShellContext


def mode_token(commands: Commands, mode: Mode) -> int:
    """Token holding the schema-derived commands for the current mode."""
    if isinstance(mode, Configure):
        if not mode.nodes:
            return commands.config_root
        return commands.schema_tokens[tuple(segment.name for segment in mode.nodes)]
    return commands.exec_root


def mode_roots(commands: Commands, mode: Mode) -> List[int]:
    """Command trie roots matched against input, in priority order."""
    if isinstance(mode, Configure):
        roots = [commands.config_dflt_internal]
        if not mode.nodes:
            roots.append(commands.config_root_internal)
        roots.append(mode_token(commands, mode))
        return roots
    return [commands.exec_root]


def mode_set(ctx: ShellContext, mode: Mode) -> None:
    ctx.mode = mode


def mode_config_exit(ctx: ShellContext) -> None:
    """Leave one nesting level, or configuration mode at the top level."""
    if isinstance(ctx.mode, Configure) and ctx.mode.nodes:
        ctx.mode = Configure(ctx.mode.nodes[:-1])
    else:
        ctx.mode = Operational()


def target_segments(ctx: ShellContext, parsed: ParsedCommand) -> List[PathSegment]:
    """
    Full configuration path addressed by a schema-derived command.

    Starts from the current nesting and appends one segment per schema
    keyword in the command, filling list keys from the typed placeholders.
    """
    segments = list(ctx.mode.nodes) if isinstance(ctx.mode, Configure) else []
    for token, word in parsed.path:
        if token.schema_path is None:
            continue
        if token.kind == TokenKind.KEYWORD:
            segments.append(PathSegment(token.name))
        elif token.key is not None:
            last = segments[-1]
            segments[-1] = PathSegment(last.name, last.keys + ((token.key, word),))
    return segments


def find_config_node(ctx: ShellContext, segments: List[PathSegment], create: bool = False) -> Optional[dict]:
    """
    Locate the candidate document mapping for a container or list entry.

    Args:
        ctx: Shell context owning the candidate document
        segments: Configuration path, from the top level
        create: Create missing containers and list entries on the way

    Returns:
        The mapping holding the node's children, or None if absent
    """
    current = ctx.candidate
    snodes = ctx.schema.nodes
    for segment in segments:
        snode = next(s for s in snodes if s.name == segment.name)
        snodes = snode.children

        if snode.kind == "container":
            if current.get(segment.name) is None:
                if not create:
                    return None
                current[segment.name] = {}
            current = current[segment.name]

        elif snode.kind == "list":
            entries = current.get(segment.name)
            if entries is None:
                if not create:
                    return None
                entries = current[segment.name] = []
            wanted = dict(segment.keys)
            entry = next(
                (e for e in entries
                 if all(e.get(k) is not None and canonical_value(e[k]) == v for k, v in wanted.items())),
                None
            )
            if entry is None:
                if not create:
                    return None
                entry = dict(wanted)
                entries.append(entry)
            current = entry

    return current
