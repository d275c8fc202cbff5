"""
ncsh_lib.repl.display - Display functions for the REPL

This package contains functions for displaying configuration and state:
- config: Command-line rendering, documents and diffs of configuration
- live: OSPFv2 operational state tables and detail listings
- pager: Output paging through an external pager process
"""

from .config import (
    flatten_config,
    diff_config,
    render_document,
    OUTPUT_FORMATS,
)

from .live import (
    ospf_interface_table,
    ospf_interface_detail,
    ospf_neighbor_table,
    ospf_neighbor_detail,
    ospf_route_table,
)

from .pager import (
    page_output,
    page_table,
    render_table,
    new_table,
)

__all__ = [
    # Config display
    'flatten_config',
    'diff_config',
    'render_document',
    'OUTPUT_FORMATS',
    # Live display
    'ospf_interface_table',
    'ospf_interface_detail',
    'ospf_neighbor_table',
    'ospf_neighbor_detail',
    'ospf_route_table',
    # Paging
    'page_output',
    'page_table',
    'render_table',
    'new_table',
]
