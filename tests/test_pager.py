"""Tests for output paging."""
import os
import shlex
import signal
import subprocess
import sys
import threading
from types import SimpleNamespace

import pytest

from ncsh_lib.config import get_pager_command, paging_enabled
from ncsh_lib.repl import handle_command
from ncsh_lib.repl.display import new_table, page_output, page_table


# Pager that reads everything, then records what it got in a file
READING_PAGER = (
    "import pathlib, sys\n"
    "data = sys.stdin.read()\n"
    "pathlib.Path(sys.argv[1]).write_text(data)\n"
)

# Pager that ignores Ctrl-C and takes its time, like less
SLOW_PAGER = (
    "import pathlib, signal, sys, time\n"
    "signal.signal(signal.SIGINT, signal.SIG_IGN)\n"
    "sys.stdin.read()\n"
    "time.sleep(1.5)\n"
    "pathlib.Path(sys.argv[1]).write_text('done')\n"
)

# Pager that exits without reading its input
QUITTING_PAGER = "pass\n"


class RecordingPopen(subprocess.Popen):
    """subprocess.Popen that keeps track of the processes it started."""
    instances = []

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        RecordingPopen.instances.append(self)


@pytest.fixture
def pager_script(monkeypatch, tmp_path):
    """Install a Python script as the pager; returns the file it writes."""
    RecordingPopen.instances = []
    monkeypatch.setattr("ncsh_lib.repl.display.pager.subprocess.Popen", RecordingPopen)
    marker = tmp_path / "pager.out"

    def install(script):
        monkeypatch.setenv("NCSH_PAGER", shlex.join([sys.executable, "-c", script, str(marker)]))
        return marker

    return install


def paged():
    return SimpleNamespace(use_pager=True)


class TestPageOutput:
    """Tests for page_output."""

    def test_without_pager(self, pager_script, capsys):
        page_output(SimpleNamespace(use_pager=False), "hello")
        assert capsys.readouterr().out == "hello\n"
        assert RecordingPopen.instances == []

    def test_pager_gets_everything(self, pager_script):
        marker = pager_script(READING_PAGER)
        page_output(paged(), "hello\nworld\n")
        assert marker.read_text() == "hello\nworld\n"
        assert RecordingPopen.instances[0].returncode == 0

    def test_pager_waited_after_broken_pipe(self, pager_script):
        pager_script(QUITTING_PAGER)
        with pytest.raises(BrokenPipeError):
            page_output(paged(), "x" * 1_000_000)
        assert RecordingPopen.instances[0].returncode is not None

    @pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX signals")
    def test_pager_waited_across_ctrl_c(self, pager_script):
        """Ctrl-C while the pager runs doesn't give the terminal back early."""
        marker = pager_script(SLOW_PAGER)
        timer = threading.Timer(0.3, os.kill, (os.getpid(), signal.SIGINT))
        timer.start()
        try:
            page_output(paged(), "hello\n")
        finally:
            timer.cancel()
        assert marker.read_text() == "done"
        assert RecordingPopen.instances[0].returncode == 0

    def test_spawn_failure_reported(self, ctx, monkeypatch, capsys):
        def missing_pager(*args, **kwargs):
            raise FileNotFoundError("no such pager")

        monkeypatch.setattr("ncsh_lib.repl.display.pager.subprocess.Popen", missing_pager)
        ctx.use_pager = True
        assert handle_command("show running", ctx)
        assert capsys.readouterr().out == "% failed to print configuration: no such pager\n"

    def test_empty_table_prints_nothing(self, pager_script, capsys):
        page_table(paged(), new_table("Name"))
        assert capsys.readouterr().out == ""
        assert RecordingPopen.instances == []


class TestPagerSettings:

    def test_pager_from_env(self, monkeypatch):
        monkeypatch.setenv("NCSH_PAGER", "more -s")
        assert get_pager_command() == ["more", "-s"]

    def test_default_pager(self, monkeypatch):
        monkeypatch.delenv("NCSH_PAGER", raising=False)
        assert get_pager_command() == ["less", "-F", "-X"]

    def test_paging_disabled_from_env(self, monkeypatch):
        monkeypatch.setenv("NCSH_NO_PAGER", "1")
        assert paging_enabled() is False
