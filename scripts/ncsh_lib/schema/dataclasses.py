"""
Schema definition dataclasses for ncsh.

These define the structure of schema modules (from YAML): the nodes a
configuration or state document may contain and how each node is typed.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


# Node kinds accepted in schema YAML
SCHEMA_KINDS = ("container", "list", "leaf", "leaf-list", "anydata")


@dataclass
class SchemaNode:
    """A single schema node (container, list, leaf, leaf-list or anydata)."""
    name: str
    kind: str
    module: str = ""
    description: str = ""
    presence: bool = False  # Containers only
    keys: List[str] = field(default_factory=list)  # Lists only
    default: Any = None  # Leaf default, or list of defaults for leaf-lists
    config: bool = True  # False for operational state
    children: List["SchemaNode"] = field(default_factory=list)

    @property
    def is_np_container(self) -> bool:
        return self.kind == "container" and not self.presence


@dataclass
class SchemaModule:
    """A schema module as loaded from YAML."""
    name: str
    revision: Optional[str] = None
    namespace: str = ""
    implemented: bool = True
    description: str = ""
    nodes: List[SchemaNode] = field(default_factory=list)


@dataclass
class SchemaContext:
    """All loaded schema modules, in load order."""
    modules: List[SchemaModule] = field(default_factory=list)

    @property
    def nodes(self) -> List[SchemaNode]:
        """Top-level schema nodes across all modules."""
        return [node for module in self.modules for node in module.nodes]

    def find(self, path) -> Optional[SchemaNode]:
        """
        Find a schema node by its path of node names.

        Args:
            path: Sequence of node names from the top level, e.g.
                ("interfaces", "interface", "mtu")

        Returns:
            The schema node, or None if the path does not exist
        """
        candidates = self.nodes
        snode = None
        for name in path:
            snode = next((c for c in candidates if c.name == name), None)
            if snode is None:
                return None
            candidates = snode.children
        return snode
