#!/usr/bin/env python3
"""
ncsh_repl.py - Interactive network console shell

This module provides the mode-based command shell: operational commands
at the top level, and a configuration mode in which the candidate
configuration is edited, compared against the running configuration and
committed.
"""

import sys

import yaml
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from ncsh_lib.common import banner, error, info, log, warn
from ncsh_lib.config import HISTORY_FILE, RUNNING_FILE, SCHEMA_DIR, STATE_FILE, paging_enabled
from ncsh_lib.repl import CommandCompleter, create_context, get_prompt_text, handle_command
from ncsh_lib.schema import DataValidationError, SchemaError, load_document, load_schema


NCSH_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
})


def run_repl() -> int:
    """Main REPL entry point."""
    banner("ncsh network console", "Type 'list' for commands, 'exit' to quit")

    try:
        schema = load_schema(SCHEMA_DIR)
    except (OSError, SchemaError) as e:
        error(f"Failed to load schema: {e}")
        return 1
    log(f"Loaded {len(schema.modules)} schema module(s) from {SCHEMA_DIR}")

    running = {}
    try:
        running = load_document(RUNNING_FILE)
        if running:
            log(f"Loaded running configuration from {RUNNING_FILE}")
        else:
            info(f"No running configuration found at {RUNNING_FILE}")
    except (OSError, yaml.YAMLError, DataValidationError) as e:
        warn(f"Failed to load running configuration: {e}")

    try:
        ctx = create_context(schema, running, state_file=STATE_FILE, use_pager=paging_enabled())
    except DataValidationError as e:
        warn(f"Invalid running configuration, starting empty: {e}")
        ctx = create_context(schema, {}, state_file=STATE_FILE, use_pager=paging_enabled())

    HISTORY_FILE.parent.mkdir(parents=True, exist_ok=True)
    session = PromptSession(
        history=FileHistory(str(HISTORY_FILE)),
        completer=CommandCompleter(ctx),
        style=NCSH_STYLE,
    )

    # Main loop
    while True:
        try:
            cmd = session.prompt([('class:prompt', get_prompt_text(ctx))])

            if not handle_command(cmd, ctx):
                break

        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break

    if ctx.dirty:
        warn("Uncommitted changes discarded")
    print("Goodbye!")
    return 0


def main() -> None:
    sys.exit(run_repl())


if __name__ == "__main__":
    main()
