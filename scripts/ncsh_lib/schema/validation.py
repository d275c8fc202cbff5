"""
Schema validation for ncsh.

Functions for validating schema module definitions, and the errors raised
when a schema or a data document is invalid.
"""

import re
from typing import List

from .dataclasses import SCHEMA_KINDS


class SchemaError(Exception):
    """Raised when a schema module definition is invalid."""
    pass


class DataValidationError(Exception):
    """Raised when a data document does not conform to the schema."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


NAME_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_.-]*$')


def validate_schema_module(data: dict) -> List[str]:
    """
    Validate a schema module YAML structure.
    Returns list of error messages (empty if valid).
    """
    errors = []

    if 'module' not in data:
        errors.append("Missing required field: module")
    elif not NAME_RE.match(str(data['module'])):
        errors.append(f"Invalid module name '{data['module']}'")

    nodes = data.get('nodes', [])
    if not isinstance(nodes, list):
        errors.append("nodes must be a list")
        return errors

    _validate_nodes(nodes, "", True, errors)
    return errors


def _validate_nodes(nodes: list, path: str, config: bool, errors: List[str]) -> None:
    """Validate sibling schema nodes recursively."""
    seen = set()
    for i, node in enumerate(nodes):
        if not isinstance(node, dict):
            errors.append(f"{path or '/'}: node #{i} must be a dict")
            continue

        name = node.get('name')
        if not name or not NAME_RE.match(str(name)):
            errors.append(f"{path or '/'}: node #{i} has an invalid or missing name")
            continue
        node_path = f"{path}/{name}"
        if name in seen:
            errors.append(f"{node_path}: duplicate node name")
        seen.add(name)

        kind = node.get('kind')
        if kind not in SCHEMA_KINDS:
            errors.append(f"{node_path}: invalid kind '{kind}' (expected one of {', '.join(SCHEMA_KINDS)})")
            continue

        node_config = node.get('config', config)
        if node_config and not config:
            errors.append(f"{node_path}: configuration node under a state node")

        children = node.get('children', [])
        if kind in ("leaf", "leaf-list", "anydata"):
            if children:
                errors.append(f"{node_path}: {kind} cannot have children")
            if 'keys' in node:
                errors.append(f"{node_path}: only lists can declare keys")
            continue

        if kind == "container" and 'keys' in node:
            errors.append(f"{node_path}: only lists can declare keys")

        if kind == "list":
            keys = node.get('keys', [])
            if node_config and not keys:
                errors.append(f"{node_path}: configuration list must declare keys")
            child_names = {c.get('name'): c for c in children if isinstance(c, dict)}
            for key in keys:
                key_node = child_names.get(key)
                if key_node is None:
                    errors.append(f"{node_path}: key '{key}' is not a child node")
                elif key_node.get('kind') != "leaf":
                    errors.append(f"{node_path}: key '{key}' must be a leaf")
                elif 'default' in key_node:
                    errors.append(f"{node_path}: key '{key}' cannot have a default")

        if 'default' in node:
            errors.append(f"{node_path}: {kind} cannot have a default")

        _validate_nodes(children, node_path, node_config, errors)
