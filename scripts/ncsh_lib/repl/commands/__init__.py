"""
ncsh_lib.repl.commands - Command handlers for the REPL

This package contains command handler functions organized by feature area:
- internal: Mode transitions, list, hostname, pwd, discard, commit, validate
- show: Configuration, state and schema show commands
- config: Schema-derived configuration commands
- routing: OSPFv2 show commands
"""

# Internal commands
from .internal import (
    cmd_config,
    cmd_exit_exec,
    cmd_exit_config,
    cmd_end,
    cmd_list,
    cmd_hostname,
    cmd_pwd,
    cmd_discard,
    cmd_commit,
    cmd_validate,
)

# Show commands
from .show import (
    cmd_show_config,
    cmd_show_config_changes,
    cmd_show_state,
    cmd_show_schema_modules,
)

# Configuration commands
from .config import (
    cmd_config_enter,
    cmd_config_leaf,
)

# Routing commands
from .routing import (
    cmd_show_ospf_interface,
    cmd_show_ospf_neighbor,
    cmd_show_ospf_route,
)

__all__ = [
    # Internal
    'cmd_config', 'cmd_exit_exec', 'cmd_exit_config', 'cmd_end',
    'cmd_list', 'cmd_hostname', 'cmd_pwd',
    'cmd_discard', 'cmd_commit', 'cmd_validate',
    # Show
    'cmd_show_config', 'cmd_show_config_changes',
    'cmd_show_state', 'cmd_show_schema_modules',
    # Configuration
    'cmd_config_enter', 'cmd_config_leaf',
    # Routing
    'cmd_show_ospf_interface', 'cmd_show_ospf_neighbor', 'cmd_show_ospf_route',
]
