"""Tests for shell modes, prompts and session state."""
import pytest

from ncsh_lib.repl import (
    Configure,
    Operational,
    PathSegment,
    create_context,
    data_path,
    get_prompt_text,
    mode_roots,
)
from ncsh_lib.repl.navigation import mode_config_exit
from ncsh_lib.schema import DataValidationError


ETH0 = PathSegment("interface", (("name", "eth0"),))
NESTED = Configure((PathSegment("interfaces"), ETH0))


class TestPrompt:
    """Tests for get_prompt_text."""

    def test_operational(self, ctx):
        assert get_prompt_text(ctx) == "ncsh# "

    def test_configure_top(self, ctx):
        ctx.mode = Configure()
        assert get_prompt_text(ctx) == "ncsh(config)# "

    def test_configure_nested(self, ctx):
        ctx.mode = NESTED
        ctx.hostname = "r1"
        assert get_prompt_text(ctx) == "r1(config-interface)# "


class TestDataPath:

    def test_top_level(self):
        assert data_path(Operational()) is None
        assert data_path(Configure()) is None

    def test_nested(self):
        assert data_path(NESTED) == "/interfaces/interface[name='eth0']"

    def test_multiple_keys(self):
        segment = PathSegment("control-plane-protocol", (("type", "ospfv2"), ("name", "main")))
        assert str(segment) == "control-plane-protocol[type='ospfv2'][name='main']"


class TestModes:
    """Tests for mode transitions and active trie roots."""

    def test_exit_pops_one_level(self, ctx):
        ctx.mode = NESTED
        mode_config_exit(ctx)
        assert ctx.mode == Configure((PathSegment("interfaces"),))
        mode_config_exit(ctx)
        assert ctx.mode == Configure()
        mode_config_exit(ctx)
        assert ctx.mode == Operational()

    def test_operational_roots(self, ctx):
        assert mode_roots(ctx.commands, Operational()) == [ctx.commands.exec_root]

    def test_configure_top_roots(self, ctx):
        commands = ctx.commands
        assert mode_roots(commands, Configure()) == [
            commands.config_dflt_internal,
            commands.config_root_internal,
            commands.config_root,
        ]

    def test_configure_nested_roots(self, ctx):
        commands = ctx.commands
        assert mode_roots(commands, NESTED) == [
            commands.config_dflt_internal,
            commands.schema_tokens[("interfaces", "interface")],
        ]


class TestDatastores:
    """Tests for the running and candidate datastores."""

    def test_candidate_is_a_copy(self, schema, state_file):
        running = {"system": {"hostname": "r1"}}
        ctx = create_context(schema, running, state_file=state_file)
        ctx.candidate["system"]["hostname"] = "r2"
        assert running["system"]["hostname"] == "r1"
        assert ctx.dirty

    def test_discard(self, schema, state_file):
        ctx = create_context(schema, {"system": {"hostname": "r1"}}, state_file=state_file)
        ctx.candidate["system"]["contact"] = "noc"
        ctx.candidate_discard()
        assert ctx.candidate == {"system": {"hostname": "r1"}}
        assert not ctx.dirty

    def test_commit(self, ctx):
        ctx.candidate = {"system": {"hostname": "r1"}}
        ctx.candidate_commit()
        assert ctx.running == {"system": {"hostname": "r1"}}
        assert not ctx.dirty
        assert ctx.commit_comment is None

    def test_commit_invalid(self, ctx):
        ctx.candidate = {"bogus": "1"}
        with pytest.raises(DataValidationError):
            ctx.candidate_commit()
        assert ctx.running == {}
        assert ctx.commit_comment is None

    def test_invalid_running(self, schema, state_file):
        with pytest.raises(DataValidationError):
            create_context(schema, {"system": {"bogus": "1"}}, state_file=state_file)
