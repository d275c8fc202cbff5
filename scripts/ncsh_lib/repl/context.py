"""
Shell context and prompt utilities for ncsh.

This module contains:
- Operational / Configure: the shell mode; only Configure carries a nesting path
- PathSegment: one level of configuration nesting
- ShellContext: Session state (mode, datastores, command trie, paging)
- get_prompt_text: Generates the prompt string based on the current mode
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from ncsh_lib.commands import Commands
from ncsh_lib.config import DEFAULT_HOSTNAME, STATE_FILE
from ncsh_lib.schema import DataTree, SchemaContext, build_tree, load_document


@dataclass(frozen=True)
class PathSegment:
    """A configuration node entered by the operator, with its list keys."""
    name: str
    keys: Tuple[Tuple[str, str], ...] = ()

    def __str__(self) -> str:
        return self.name + "".join(f"[{k}='{v}']" for k, v in self.keys)


@dataclass(frozen=True)
class Operational:
    """Operational (EXEC) mode."""
    pass


@dataclass(frozen=True)
class Configure:
    """Configuration mode, nested inside the given configuration nodes."""
    nodes: Tuple[PathSegment, ...] = ()


Mode = Union[Operational, Configure]


class Datastore(Enum):
    RUNNING = "running"
    CANDIDATE = "candidate"


@dataclass
class ShellContext:
    """Tracks the shell mode and the configuration datastores."""
    schema: SchemaContext
    commands: Commands
    mode: Mode = field(default_factory=Operational)
    running: dict = field(default_factory=dict)
    candidate: dict = field(default_factory=dict)
    state_file: Path = STATE_FILE
    hostname: str = DEFAULT_HOSTNAME
    use_pager: bool = False
    commit_comment: Optional[str] = None  # Comment given with the last commit

    @property
    def dirty(self) -> bool:
        """True when the candidate differs from the running configuration."""
        return self.running != self.candidate

    def get_configuration(self, datastore: Datastore) -> DataTree:
        """
        Build a snapshot of a configuration datastore.

        Raises:
            DataValidationError: If the datastore doesn't conform to the schema
        """
        document = self.running if datastore == Datastore.RUNNING else self.candidate
        return build_tree(self.schema, document, config_only=True)

    def fetch_state(self) -> DataTree:
        """
        Build a snapshot of the operational state.

        Raises:
            OSError: If the state document can't be read
            yaml.YAMLError: If the state document isn't valid YAML
            DataValidationError: If the state doesn't conform to the schema
        """
        return build_tree(self.schema, load_document(self.state_file))

    def candidate_discard(self) -> None:
        self.candidate = copy.deepcopy(self.running)

    def candidate_commit(self, comment: Optional[str] = None) -> None:
        """
        Validate the candidate and make it the running configuration.

        The comment, if any, is kept with the committed configuration.

        Raises:
            DataValidationError: If the candidate is invalid
        """
        self.get_configuration(Datastore.CANDIDATE)
        self.running = copy.deepcopy(self.candidate)
        self.commit_comment = comment


def get_prompt_text(ctx: ShellContext) -> str:
    """Generate the prompt string based on the current mode."""
    if isinstance(ctx.mode, Configure):
        if ctx.mode.nodes:
            return f"{ctx.hostname}(config-{ctx.mode.nodes[-1].name})# "
        return f"{ctx.hostname}(config)# "
    return f"{ctx.hostname}# "


def data_path(mode: Mode) -> Optional[str]:
    """Data path of the configuration nesting, or None at the top level."""
    if isinstance(mode, Configure) and mode.nodes:
        return "".join(f"/{segment}" for segment in mode.nodes)
    return None
