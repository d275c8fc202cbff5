"""
Settings for ncsh.

Paths and defaults used across the shell. Every path can be overridden
from the environment.
"""

import os
import shlex
import sys
from pathlib import Path


def _env_path(name: str, default: Path) -> Path:
    """Resolve a path from the environment, falling back to a default."""
    if os.environ.get(name):
        return Path(os.environ[name]).expanduser()
    return default


# Schema modules shipped with the package
SCHEMA_DIR = _env_path("NCSH_SCHEMA_DIR", Path(__file__).resolve().parent.parent / "schema" / "modules")

# Datastore documents
RUNNING_FILE = _env_path("NCSH_RUNNING_FILE", Path("/etc/ncsh/running.yaml"))
STATE_FILE = _env_path("NCSH_STATE_FILE", Path("/run/ncsh/state.yaml"))

# Prompt history
HISTORY_FILE = _env_path("NCSH_HISTORY_FILE", Path.home() / ".ncsh_history")

DEFAULT_HOSTNAME = "ncsh"

# Exit immediately if the data fits on one screen (-F), do not clear the
# screen on exit (-X).
DEFAULT_PAGER = "less -F -X"


def get_pager_command() -> list[str]:
    """Get the pager command line from env or default."""
    return shlex.split(os.environ.get("NCSH_PAGER") or DEFAULT_PAGER)


def paging_enabled() -> bool:
    """Page output only on an interactive terminal, unless disabled from env."""
    if os.environ.get("NCSH_NO_PAGER"):
        return False
    return sys.stdout.isatty()
