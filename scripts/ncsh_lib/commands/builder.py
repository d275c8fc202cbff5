"""
Command trie construction for ncsh.

Internal commands are declared as nested dicts (see repl/menu.py) and
registered with register_tree(). Configuration commands are derived from
the schema by register_schema_commands():

- container: KEYWORD that enters the container
- list: KEYWORD followed by one WORD per key; the last key enters the entry
- leaf / leaf-list: KEYWORD followed by a WORD that sets (adds) the value

State nodes (config false) don't produce commands.
"""

from typing import Callable, Tuple

from ncsh_lib.schema import SchemaContext, SchemaNode

from .token import Commands, TokenKind


def register_tree(commands: Commands, parent_id: int, tree: dict) -> None:
    """
    Register a declarative command tree under parent_id.

    Each key is a token name and each value a dict with optional fields:
    "kind" ("keyword" or "word", default keyword), "help", "action" and
    "children" (nested tree). Tokens are registered in dict order.
    """
    for name, spec in tree.items():
        kind = TokenKind.WORD if spec.get("kind") == "word" else TokenKind.KEYWORD
        token_id = commands.add_token(
            parent_id,
            name,
            kind,
            action=spec.get("action"),
            help=spec.get("help", ""),
        )
        register_tree(commands, token_id, spec.get("children", {}))


def register_schema_commands(
    commands: Commands,
    schema: SchemaContext,
    enter_action: Callable[..., bool],
    leaf_action: Callable[..., bool]
) -> None:
    """Derive configuration commands from every configuration schema node."""
    for snode in schema.nodes:
        _register_schema_node(commands, commands.config_root, snode, (), enter_action, leaf_action)


def _register_schema_node(
    commands: Commands,
    parent_id: int,
    snode: SchemaNode,
    parent_path: Tuple[str, ...],
    enter_action: Callable[..., bool],
    leaf_action: Callable[..., bool]
) -> None:
    if not snode.config or snode.kind == "anydata":
        return

    path = parent_path + (snode.name,)

    if snode.kind == "container":
        token_id = commands.add_token(parent_id, snode.name, TokenKind.KEYWORD,
                                      action=enter_action, help=snode.description,
                                      schema_path=path)
        commands.schema_tokens[path] = token_id
        for child in snode.children:
            _register_schema_node(commands, token_id, child, path, enter_action, leaf_action)

    elif snode.kind == "list":
        token_id = commands.add_token(parent_id, snode.name, TokenKind.KEYWORD,
                                      help=snode.description, schema_path=path)
        for i, key in enumerate(snode.keys):
            last = i == len(snode.keys) - 1
            token_id = commands.add_token(token_id, key, TokenKind.WORD,
                                          action=enter_action if last else None,
                                          schema_path=path, key=key)
        commands.schema_tokens[path] = token_id
        for child in snode.children:
            if child.name not in snode.keys:
                _register_schema_node(commands, token_id, child, path, enter_action, leaf_action)

    else:
        token_id = commands.add_token(parent_id, snode.name, TokenKind.KEYWORD,
                                      help=snode.description, schema_path=path)
        commands.add_token(token_id, snode.name, TokenKind.WORD,
                           action=leaf_action, schema_path=path)
