"""
Schema and data loader for ncsh.

Functions for loading schema modules from YAML files and for building
schema-typed data trees from plain documents.
"""

from pathlib import Path
from typing import Any, List

import yaml

from .dataclasses import SchemaContext, SchemaModule, SchemaNode
from .tree import DataNode, DataTree, NodeKind
from .validation import DataValidationError, SchemaError, validate_schema_module


# =============================================================================
# Schema modules
# =============================================================================

def parse_schema_node(data: dict, module: str, config: bool = True) -> SchemaNode:
    """Parse a schema node (and its children) from YAML data dict."""
    node_config = data.get('config', config)
    return SchemaNode(
        name=data['name'],
        kind=data['kind'],
        module=module,
        description=data.get('description', ''),
        presence=data.get('presence', False),
        keys=list(data.get('keys', [])),
        default=data.get('default'),
        config=node_config,
        children=[parse_schema_node(c, module, node_config) for c in data.get('children', [])],
    )


def parse_schema_module(data: dict) -> SchemaModule:
    """Parse a schema module from YAML data dict."""
    name = data['module']
    revision = data.get('revision')
    return SchemaModule(
        name=name,
        # YAML reads unquoted dates as datetime.date
        revision=str(revision) if revision is not None else None,
        namespace=data.get('namespace', ''),
        implemented=data.get('implemented', True),
        description=data.get('description', ''),
        nodes=[parse_schema_node(n, name) for n in data.get('nodes', [])],
    )


def load_schema_module(yaml_path: Path) -> SchemaModule:
    """
    Load a schema module from a YAML file.

    Args:
        yaml_path: Path to the module YAML

    Returns:
        Parsed SchemaModule

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        SchemaError: If the YAML is invalid
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Schema module not found: {yaml_path}")

    with open(yaml_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SchemaError(f"YAML syntax error in {yaml_path}: {e}")

    if not isinstance(data, dict):
        raise SchemaError(f"Schema module YAML must be a dict, got {type(data).__name__}")

    errors = validate_schema_module(data)
    if errors:
        raise SchemaError(f"Schema module '{yaml_path.stem}' validation failed:\n  " + "\n  ".join(errors))

    return parse_schema_module(data)


def load_schema(schema_dir: Path) -> SchemaContext:
    """
    Load every schema module in a directory, in file name order.

    Raises:
        FileNotFoundError: If the directory doesn't exist
        SchemaError: If a module is invalid or two modules define the same top-level node
    """
    if not schema_dir.is_dir():
        raise FileNotFoundError(f"Schema directory not found: {schema_dir}")

    ctx = SchemaContext()
    seen = {}
    for yaml_path in sorted(schema_dir.glob("*.yaml")):
        module = load_schema_module(yaml_path)
        for node in module.nodes:
            if node.name in seen:
                raise SchemaError(
                    f"Top-level node '{node.name}' defined by both {seen[node.name]} and {module.name}"
                )
            seen[node.name] = module.name
        ctx.modules.append(module)
    return ctx


# =============================================================================
# Documents
# =============================================================================

def load_document(path: Path) -> dict:
    """
    Load a YAML data document. A missing or empty file is an empty document.

    Raises:
        OSError: If the file can't be read
        yaml.YAMLError: If the file isn't valid YAML
        DataValidationError: If the top level isn't a mapping
    """
    if not path.exists():
        return {}
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DataValidationError([f"{path}: top level must be a mapping, got {type(data).__name__}"])
    return data


def canonical_value(value: Any) -> str:
    """Convert a scalar document value to its canonical text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise TypeError(f"expected a scalar value, got {type(value).__name__}")


# =============================================================================
# Tree building
# =============================================================================

def build_tree(schema: SchemaContext, document: dict, config_only: bool = False) -> DataTree:
    """
    Build a data tree snapshot from a plain document.

    Children are created in schema order, list keys first in key order.
    Absent leaves with a schema default are created with is_default set,
    and non-presence containers are always instantiated.

    Args:
        schema: Loaded schema modules
        document: Nested dict keyed by node names
        config_only: Reject state (config false) nodes and skip their defaults

    Returns:
        The built DataTree

    Raises:
        DataValidationError: With every problem found in the document
    """
    errors: List[str] = []
    tree = DataTree()
    _build_children(tree, tree.root, schema.nodes, document or {}, "", config_only, errors)
    if errors:
        raise DataValidationError(errors)
    return tree


def _build_children(
    tree: DataTree,
    parent: DataNode,
    snodes: List[SchemaNode],
    data: Any,
    path: str,
    config_only: bool,
    errors: List[str],
    skip: tuple = ()
) -> None:
    if not isinstance(data, dict):
        errors.append(f"{path or '/'}: expected a mapping, got {type(data).__name__}")
        return

    known = {s.name for s in snodes}
    for name in data:
        if name not in known:
            errors.append(f"{path}/{name}: unknown node")

    for snode in snodes:
        if snode.name not in skip:
            _build_node(tree, parent, snode, data, path, config_only, errors)


def _build_node(
    tree: DataTree,
    parent: DataNode,
    snode: SchemaNode,
    data: dict,
    path: str,
    config_only: bool,
    errors: List[str]
) -> None:
    node_path = f"{path}/{snode.name}"
    present = snode.name in data

    if config_only and not snode.config:
        if present:
            errors.append(f"{node_path}: state data not allowed in configuration")
        return

    if snode.kind == "container":
        if snode.presence:
            if not present:
                return
            node = tree.add_node(parent, snode.name, NodeKind.CONTAINER)
            _build_children(tree, node, snode.children, data[snode.name] or {}, node_path, config_only, errors)
        else:
            node = tree.add_node(parent, snode.name, NodeKind.NP_CONTAINER)
            _build_children(tree, node, snode.children, data.get(snode.name) or {}, node_path, config_only, errors)
            tree.set_default(node, all(c.is_default for c in node.children()))

    elif snode.kind == "list":
        entries = data.get(snode.name) or []
        if not isinstance(entries, list):
            errors.append(f"{node_path}: expected a list of entries")
            return
        seen = set()
        for entry in entries:
            _build_list_entry(tree, parent, snode, entry, node_path, config_only, errors, seen)

    elif snode.kind == "leaf":
        if present:
            value = _canonical(data[snode.name], node_path, errors)
            if value is not None:
                tree.add_node(parent, snode.name, NodeKind.LEAF, value)
        elif snode.default is not None:
            tree.add_node(parent, snode.name, NodeKind.LEAF, canonical_value(snode.default), is_default=True)

    elif snode.kind == "leaf-list":
        if present:
            values = data[snode.name]
            is_default = False
        elif snode.default is not None:
            values = snode.default
            is_default = True
        else:
            return
        if not isinstance(values, list):
            values = [values]
        for value in values:
            value = _canonical(value, node_path, errors)
            if value is not None:
                tree.add_node(parent, snode.name, NodeKind.LEAF_LIST, value, is_default=is_default)

    elif snode.kind == "anydata":
        if present:
            tree.add_node(parent, snode.name, NodeKind.OTHER)


def _build_list_entry(
    tree: DataTree,
    parent: DataNode,
    snode: SchemaNode,
    entry: Any,
    path: str,
    config_only: bool,
    errors: List[str],
    seen: set
) -> None:
    if not isinstance(entry, dict):
        errors.append(f"{path}: list entry must be a mapping")
        return

    missing = [k for k in snode.keys if entry.get(k) is None]
    if missing:
        errors.append(f"{path}: list entry missing key(s): {', '.join(missing)}")
        return

    key_values = []
    for key in snode.keys:
        value = _canonical(entry[key], f"{path}/{key}", errors)
        if value is None:
            return
        key_values.append(value)

    if snode.keys:
        key_tuple = tuple(key_values)
        if key_tuple in seen:
            errors.append(f"{path}: duplicate list entry {list(key_tuple)}")
            return
        seen.add(key_tuple)
        predicates = "".join(f"[{k}='{v}']" for k, v in zip(snode.keys, key_values))
        entry_path = f"{path}{predicates}"
    else:
        entry_path = path

    node = tree.add_node(parent, snode.name, NodeKind.LIST)
    for key, value in zip(snode.keys, key_values):
        tree.add_node(node, key, NodeKind.LIST_KEY_LEAF, value)
    _build_children(tree, node, snode.children, entry, entry_path, config_only, errors, skip=tuple(snode.keys))


def _canonical(value: Any, path: str, errors: List[str]):
    try:
        return canonical_value(value)
    except TypeError as e:
        errors.append(f"{path}: {e}")
        return None
