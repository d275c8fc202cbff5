"""
Output paging for ncsh.

Long output is fed to an external pager process. Spawning, writing and
waiting form one scoped lifetime: the pager is always waited for, also
when writing fails or Ctrl-C is pressed while it runs.
"""

import subprocess

from rich.console import Console
from rich.table import Table

from ncsh_lib.config import get_pager_command


def page_output(ctx, data: str) -> None:
    """
    Display data through the pager, or print it directly.

    Raises:
        OSError: If the pager can't be spawned or written to
    """
    if not ctx.use_pager:
        print(data)
        return

    pager = subprocess.Popen(get_pager_command(), stdin=subprocess.PIPE, text=True)
    try:
        pager.stdin.write(data)
        pager.stdin.close()
    finally:
        if not pager.stdin.closed:
            try:
                pager.stdin.close()
            except BrokenPipeError:
                # The pager quit without reading everything.
                pass
        _wait_pager(pager)


def _wait_pager(pager: subprocess.Popen) -> None:
    """Wait until the pager exits. Ctrl-C belongs to the pager while it runs."""
    while True:
        try:
            pager.wait()
            return
        except KeyboardInterrupt:
            continue


def render_table(table: Table) -> str:
    """Render a rich table to plain text."""
    console = Console(width=200, color_system=None)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def page_table(ctx, table: Table) -> None:
    """Display a table through the pager. Empty tables print nothing."""
    if table.row_count == 0:
        return
    page_output(ctx, render_table(table))


def new_table(*columns: str) -> Table:
    """Borderless table with bold column titles."""
    table = Table(box=None, show_edge=False, header_style="bold", pad_edge=False)
    for column in columns:
        table.add_column(column)
    return table
