"""
Configuration display functions for ncsh.

These functions render configuration snapshots as command lines, as
JSON/YAML documents, and as a unified diff between two snapshots.
"""

import difflib
import json

import yaml

from ncsh_lib.schema import DataNode, NodeKind


# Node kinds that correspond to a command line
COMMAND_KINDS = (NodeKind.CONTAINER, NodeKind.LEAF, NodeKind.LEAF_LIST, NodeKind.LIST)

DIFF_CONTEXT = 9
RUNNING_LABEL = "running configuration"
CANDIDATE_LABEL = "candidate configuration"

OUTPUT_FORMATS = ("json", "yaml")


def flatten_config(root: DataNode, with_defaults: bool) -> str:
    """
    Render a configuration subtree as canonical command lines.

    Every presence container, non-key leaf, leaf-list value and list entry
    below root becomes one line. A line holds the names and values of the
    node and its ancestors up to the nearest enclosing list entry, and is
    indented by one space per enclosing list entry. Each list entry is
    preceded by an indented "!" line, and the output always ends with "!".

    Args:
        root: Subtree to render (not rendered itself)
        with_defaults: Include nodes holding default values
    """
    lines = []

    nodes = root.traverse()
    next(nodes)
    for dnode in nodes:
        if dnode.kind not in COMMAND_KINDS:
            continue
        if dnode.is_default and not with_defaults:
            continue

        indent = " " * sum(1 for a in dnode.ancestors() if a.kind == NodeKind.LIST)

        path = [dnode]
        for ancestor in dnode.ancestors():
            if ancestor.kind == NodeKind.LIST:
                break
            path.append(ancestor)

        tokens = []
        for node in reversed(path):
            tokens.append(node.name)
            if node.kind == NodeKind.LIST:
                tokens.extend(key.value for key in node.list_keys())
            elif node.value is not None:
                tokens.append(node.value)

        if dnode.kind == NodeKind.LIST:
            lines.append(f"{indent}!")
        lines.append(indent + " ".join(tokens))

    # Footer
    lines.append("!")

    return "\n".join(lines) + "\n"


def diff_config(running_root: DataNode, candidate_root: DataNode) -> str:
    """
    Unified diff between the running and candidate configurations.

    Both snapshots are rendered without default values so that only
    explicit configuration is compared. Returns an empty string when
    they're identical.
    """
    running = flatten_config(running_root, False)
    candidate = flatten_config(candidate_root, False)

    diff = difflib.unified_diff(
        running.splitlines(keepends=True),
        candidate.splitlines(keepends=True),
        fromfile=RUNNING_LABEL,
        tofile=CANDIDATE_LABEL,
        n=DIFF_CONTEXT,
    )
    return "".join(diff)


def render_document(document, fmt: str) -> str:
    """
    Serialize a document as JSON or YAML.

    Raises:
        ValueError: If the format is unknown
    """
    if fmt == "json":
        return json.dumps(document, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, default_flow_style=False).rstrip("\n")
    raise ValueError(f"unknown format: {fmt}")
