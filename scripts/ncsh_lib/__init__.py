"""
ncsh_lib - Shared library for the ncsh network console shell

This package contains the components of the ncsh interactive shell:
schema-typed data trees, the command token trie, configuration rendering
and the mode-based REPL built on top of them.
"""

__version__ = "1.0.0"
