"""
Session notices for ncsh.

Startup, load and exit notices are tagged and colored so they stand apart
from command output, which is printed plain. Warnings and errors go to
stderr. Colors are only used when the stream is a terminal.
"""

import sys
from typing import Optional, TextIO


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    NC = "\033[0m"  # No Color / Reset


def paint(color: str, text: str, stream: Optional[TextIO] = None) -> str:
    """Wrap text in a color if stream (default stdout) is a terminal."""
    stream = stream or sys.stdout
    if not stream.isatty():
        return text
    return f"{color}{text}{Colors.NC}"


def _notice(tag: str, color: str, msg: str, stream: TextIO) -> None:
    print(f"{paint(color, tag, stream)} {msg}", file=stream)


def log(msg: str) -> None:
    """Success notice, green [+]."""
    _notice("[+]", Colors.GREEN, msg, sys.stdout)


def warn(msg: str) -> None:
    """Warning notice, yellow [!] on stderr."""
    _notice("[!]", Colors.YELLOW, msg, sys.stderr)


def error(msg: str) -> None:
    """Error notice, red [ERROR] on stderr."""
    _notice("[ERROR]", Colors.RED, msg, sys.stderr)


def info(msg: str) -> None:
    """Informational notice, cyan [i]."""
    _notice("[i]", Colors.CYAN, msg, sys.stdout)


def banner(title: str, hint: str) -> None:
    print()
    print(paint(Colors.BOLD, title))
    print(hint)
    print()
