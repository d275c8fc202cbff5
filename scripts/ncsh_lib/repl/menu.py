"""
Command tree definition for ncsh.

This module contains the hierarchical internal command structure and
builds the full command trie, including the commands derived from the
schema.
"""

from ncsh_lib.commands import Commands, register_schema_commands, register_tree
from ncsh_lib.schema import SchemaContext

from .commands import (
    cmd_commit,
    cmd_config,
    cmd_config_enter,
    cmd_config_leaf,
    cmd_discard,
    cmd_end,
    cmd_exit_config,
    cmd_exit_exec,
    cmd_hostname,
    cmd_list,
    cmd_pwd,
    cmd_show_config,
    cmd_show_config_changes,
    cmd_show_ospf_interface,
    cmd_show_ospf_neighbor,
    cmd_show_ospf_route,
    cmd_show_schema_modules,
    cmd_show_state,
    cmd_validate,
)


def _format_option(action, then: dict = None) -> dict:
    """Build the "format FORMAT" option, followed by optional further options."""
    return {
        "format": {
            "help": "Output format",
            "children": {
                "format": {"kind": "word", "help": "json or yaml", "action": action, "children": then or {}},
            },
        },
    }


def _show_config_options() -> dict:
    """Options of "show running" and "show candidate", in either order."""
    with_defaults = {"help": "Include default values", "action": cmd_show_config}
    return {
        "with-defaults": dict(with_defaults, children=_format_option(cmd_show_config)),
        **_format_option(cmd_show_config, {"with-defaults": with_defaults}),
    }


def _show_config_tree() -> dict:
    return {
        "running": {
            "help": "Running configuration",
            "action": cmd_show_config,
            "children": _show_config_options(),
        },
        "candidate": {
            "help": "Candidate configuration",
            "action": cmd_show_config,
            "children": _show_config_options(),
        },
        "changes": {
            "help": "Uncommitted changes",
            "action": cmd_show_config_changes,
        },
    }


def _show_ospf_tree() -> dict:
    detail = {"detail": {"help": "Detailed information", "action": cmd_show_ospf_interface}}
    nbr_detail = {"detail": {"help": "Detailed information", "action": cmd_show_ospf_neighbor}}
    return {
        "interface": {
            "help": "OSPF interfaces",
            "action": cmd_show_ospf_interface,
            "children": {
                **detail,
                "name": {"kind": "word", "help": "Interface name",
                         "action": cmd_show_ospf_interface, "children": detail},
            },
        },
        "neighbor": {
            "help": "OSPF neighbors",
            "action": cmd_show_ospf_neighbor,
            "children": {
                **nbr_detail,
                "router-id": {"kind": "word", "help": "Neighbor router ID",
                              "action": cmd_show_ospf_neighbor, "children": nbr_detail},
            },
        },
        "route": {
            "help": "OSPF local RIB",
            "action": cmd_show_ospf_route,
            "children": {
                "prefix": {"kind": "word", "help": "Route prefix", "action": cmd_show_ospf_route},
            },
        },
    }


def build_command_tree() -> dict:
    """Build the hierarchical internal command structure, one tree per trie root."""
    return {
        # Operational mode
        "exec": {
            "configure": {"help": "Enter configuration mode", "action": cmd_config},
            "exit": {"help": "Exit the shell", "action": cmd_exit_exec},
            "list": {"help": "List available commands", "action": cmd_list},
            "show": {
                "help": "Show information",
                "children": {
                    **_show_config_tree(),
                    "state": {
                        "help": "Operational state",
                        "action": cmd_show_state,
                        "children": {
                            "xpath": {
                                "help": "Restrict output to a path",
                                "children": {
                                    "xpath": {"kind": "word", "help": "Data path", "action": cmd_show_state,
                                              "children": _format_option(cmd_show_state)},
                                },
                            },
                            **_format_option(cmd_show_state),
                        },
                    },
                    "schema": {
                        "help": "Schema information",
                        "children": {
                            "modules": {"help": "Loaded schema modules", "action": cmd_show_schema_modules},
                        },
                    },
                    "ospf": {
                        "help": "OSPFv2 information",
                        "children": _show_ospf_tree(),
                    },
                },
            },
        },
        # Configuration mode, every level
        "config-default": {
            "exit": {"help": "Exit the current configuration level", "action": cmd_exit_config},
            "end": {"help": "Return to operational mode", "action": cmd_end},
            "list": {"help": "List available commands", "action": cmd_list},
            "pwd": {"help": "Show the current configuration path", "action": cmd_pwd},
            "discard": {"help": "Discard uncommitted changes", "action": cmd_discard},
            "commit": {
                "help": "Commit the candidate configuration",
                "action": cmd_commit,
                "children": {
                    "comment": {
                        "help": "Commit comment",
                        "children": {
                            "comment": {"kind": "word", "help": "Comment text", "action": cmd_commit},
                        },
                    },
                },
            },
            "validate": {"help": "Validate the candidate configuration", "action": cmd_validate},
            "show": {
                "help": "Show configuration",
                "children": _show_config_tree(),
            },
        },
        # Configuration mode, top level only
        "config-internal": {
            "hostname": {
                "help": "Set the shell hostname",
                "children": {
                    "hostname": {"kind": "word", "help": "New hostname", "action": cmd_hostname},
                },
            },
        },
    }


def build_commands(schema: SchemaContext) -> Commands:
    """Build the command trie: internal commands, then schema-derived ones."""
    commands = Commands()
    tree = build_command_tree()
    register_tree(commands, commands.exec_root, tree["exec"])
    register_tree(commands, commands.config_dflt_internal, tree["config-default"])
    register_tree(commands, commands.config_root_internal, tree["config-internal"])
    register_schema_commands(commands, schema, cmd_config_enter, cmd_config_leaf)
    return commands
