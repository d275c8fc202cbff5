"""
ncsh_lib.schema - Schema modules and schema-typed data trees for ncsh.

This package contains:
- dataclasses: Schema definition structures (SchemaNode, SchemaModule, SchemaContext)
- validation: Schema validation and the SchemaError/DataValidationError exceptions
- tree: Arena-backed data trees (DataTree, DataNode, NodeKind) and accessors
- loader: YAML loading for schema modules and data documents, tree building
"""

from .dataclasses import (
    SchemaNode,
    SchemaModule,
    SchemaContext,
)

from .validation import (
    SchemaError,
    DataValidationError,
    validate_schema_module,
)

from .tree import (
    NodeKind,
    DataTree,
    DataNode,
    NO_VALUE,
)

from .loader import (
    parse_schema_module,
    load_schema_module,
    load_schema,
    load_document,
    canonical_value,
    build_tree,
)

__all__ = [
    # Dataclasses
    'SchemaNode',
    'SchemaModule',
    'SchemaContext',
    # Validation
    'SchemaError',
    'DataValidationError',
    'validate_schema_module',
    # Trees
    'NodeKind',
    'DataTree',
    'DataNode',
    'NO_VALUE',
    # Loading
    'parse_schema_module',
    'load_schema_module',
    'load_schema',
    'load_document',
    'canonical_value',
    'build_tree',
]
