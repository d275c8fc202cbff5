"""
Schema-typed data trees for ncsh.

A DataTree is an arena of node records addressed by integer index. Each
record knows its parent index and the ordered indices of its children, so
upward navigation never needs an owning back-reference. DataNode is a
lightweight handle (tree + index) exposing read-only navigation and the
accessor helpers used by the show commands.

Trees are built once by the loader and then only read.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class NodeKind(Enum):
    """Structural category of a data node."""
    CONTAINER = "container"  # Presence container
    NP_CONTAINER = "np-container"  # Non-presence container
    LEAF = "leaf"
    LIST_KEY_LEAF = "list-key-leaf"
    LEAF_LIST = "leaf-list"
    LIST = "list"
    OTHER = "other"


# Placeholder returned by child_value() for absent children
NO_VALUE = "-"


@dataclass
class _NodeRecord:
    name: str
    kind: NodeKind
    value: Optional[str]
    is_default: bool
    parent: Optional[int]
    children: List[int] = field(default_factory=list)


class DataTree:
    """Arena holding every node of one data snapshot."""

    def __init__(self):
        # Index 0 is the root; it has no parent and is never rendered.
        self._records: List[_NodeRecord] = [
            _NodeRecord(name="/", kind=NodeKind.OTHER, value=None, is_default=False, parent=None)
        ]

    def __len__(self) -> int:
        return len(self._records)

    @property
    def root(self) -> "DataNode":
        return DataNode(self, 0)

    def add_node(
        self,
        parent: "DataNode",
        name: str,
        kind: NodeKind,
        value: Optional[str] = None,
        is_default: bool = False
    ) -> "DataNode":
        """Append a node under parent and return its handle."""
        index = len(self._records)
        self._records.append(_NodeRecord(name, kind, value, is_default, parent.index))
        self._records[parent.index].children.append(index)
        return DataNode(self, index)

    def set_default(self, node: "DataNode", is_default: bool) -> None:
        self._records[node.index].is_default = is_default

    def traverse(self) -> Iterator["DataNode"]:
        """All nodes in document order, root excluded."""
        nodes = self.root.traverse()
        next(nodes)
        yield from nodes

    def find_path(self, path: str) -> List["DataNode"]:
        return self.root.find_path(path)

    def to_document(self, with_defaults: bool = False) -> dict:
        """Convert the tree back to a plain nested document."""
        return self.root.to_document(with_defaults)


@dataclass(frozen=True)
class DataNode:
    """Read-only handle to one node of a DataTree."""
    tree: DataTree
    index: int

    @property
    def _record(self) -> _NodeRecord:
        return self.tree._records[self.index]

    @property
    def name(self) -> str:
        return self._record.name

    @property
    def kind(self) -> NodeKind:
        return self._record.kind

    @property
    def value(self) -> Optional[str]:
        """Canonical scalar value (leaf, list key and leaf-list nodes only)."""
        return self._record.value

    @property
    def is_default(self) -> bool:
        return self._record.is_default

    @property
    def is_root(self) -> bool:
        return self._record.parent is None

    @property
    def parent(self) -> Optional["DataNode"]:
        parent = self._record.parent
        return None if parent is None else DataNode(self.tree, parent)

    def children(self) -> List["DataNode"]:
        return [DataNode(self.tree, i) for i in self._record.children]

    def ancestors(self) -> Iterator["DataNode"]:
        """Strict ancestors, nearest first, excluding the tree root."""
        node = self.parent
        while node is not None and not node.is_root:
            yield node
            node = node.parent

    def inclusive_ancestors(self) -> Iterator["DataNode"]:
        yield self
        yield from self.ancestors()

    def traverse(self) -> Iterator["DataNode"]:
        """Pre-order traversal of this subtree, including this node."""
        stack = [self.index]
        records = self.tree._records
        while stack:
            index = stack.pop()
            yield DataNode(self.tree, index)
            stack.extend(reversed(records[index].children))

    def list_keys(self) -> List["DataNode"]:
        """Key leaves of a list entry, in key order."""
        return [c for c in self.children() if c.kind == NodeKind.LIST_KEY_LEAF]

    # =========================================================================
    # Accessors
    # =========================================================================

    def child_opt_value(self, name: str) -> Optional[str]:
        """Canonical value of the named child, or None if absent."""
        for child in self.children():
            if child.name == name:
                return child.value
        return None

    def child_value(self, name: str) -> str:
        """Canonical value of the named child, or '-' if absent."""
        value = self.child_opt_value(name)
        return NO_VALUE if value is None else value

    def find_path(self, path: str) -> List["DataNode"]:
        """
        Find descendant nodes matching a simple path expression.

        Segments are separated by '/', may carry a module prefix
        ("ietf-ospf:ospf") which is ignored, and may be filtered by one or
        more key predicates ("interface[name='eth0']"). A leading '/'
        starts from the tree root.

        Args:
            path: Path expression, e.g. "areas/area[area-id='0.0.0.0']"

        Returns:
            Matching nodes in document order (empty if none)

        Raises:
            ValueError: If the path expression is malformed
        """
        nodes = [self.tree.root] if path.startswith("/") else [self]
        for segment in _split_path(path):
            name, predicates = _parse_segment(segment)
            matched = []
            for node in nodes:
                for child in node.children():
                    if child.name != name:
                        continue
                    if all(child.child_opt_value(k) == v for k, v in predicates):
                        matched.append(child)
            nodes = matched
        return nodes

    def to_document(self, with_defaults: bool = False):
        """
        Convert this subtree to plain Python data.

        The root and containers become dicts keyed by child name, lists
        become lists of dicts, leaf-lists become lists of values.
        """
        if self.kind in (NodeKind.LEAF, NodeKind.LIST_KEY_LEAF, NodeKind.LEAF_LIST, NodeKind.OTHER) \
                and not self.is_root:
            return self.value
        doc = {}
        for child in self.children():
            if child.is_default and not with_defaults:
                continue
            if child.kind == NodeKind.LIST:
                doc.setdefault(child.name, []).append(child.to_document(with_defaults))
            elif child.kind == NodeKind.LEAF_LIST:
                doc.setdefault(child.name, []).append(child.value)
            else:
                doc[child.name] = child.to_document(with_defaults)
        return doc


SEGMENT_RE = re.compile(r'^(?:[\w.-]+:)?([\w.-]+)((?:\[[^\]]*\])*)$')
PREDICATE_RE = re.compile(r'\[(?:[\w.-]+:)?([\w.-]+)\s*=\s*(?:\'([^\']*)\'|"([^"]*)")\]')


def _split_path(path: str) -> List[str]:
    """Split a path on '/' outside of predicates."""
    segments = []
    depth = 0
    current = ""
    for char in path:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        if char == "/" and depth == 0:
            if current:
                segments.append(current)
            current = ""
        else:
            current += char
    if current:
        segments.append(current)
    return segments


def _parse_segment(segment: str) -> tuple:
    match = SEGMENT_RE.match(segment.strip())
    if not match:
        raise ValueError(f"invalid path segment: {segment}")
    name, predicate_text = match.groups()
    predicates = []
    for pmatch in PREDICATE_RE.finditer(predicate_text):
        key, single, double = pmatch.groups()
        predicates.append((key, single if single is not None else double))
    if len(predicates) != predicate_text.count("["):
        raise ValueError(f"invalid predicate in path segment: {segment}")
    return name, predicates
