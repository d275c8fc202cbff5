"""End-to-end tests for command dispatch."""
import json

import yaml

from ncsh_lib.repl import Configure, Operational, PathSegment, create_context, get_prompt_text, handle_command


def run(ctx, *lines):
    """Run command lines, returning the result of the last one."""
    result = True
    for line in lines:
        result = handle_command(line, ctx)
    return result


class TestSession:
    """Tests for a configuration session."""

    def test_edit_and_commit(self, ctx, capsys):
        """Enter a list entry, set a leaf, review and commit."""
        assert run(ctx, "configure")
        assert ctx.mode == Configure()

        run(ctx, "interfaces interface eth0")
        assert ctx.mode == Configure((
            PathSegment("interfaces"),
            PathSegment("interface", (("name", "eth0"),)),
        ))
        assert get_prompt_text(ctx) == "ncsh(config-interface)# "

        run(ctx, "mtu 9000")
        assert ctx.candidate == {"interfaces": {"interface": [{"name": "eth0", "mtu": "9000"}]}}
        assert ctx.dirty
        capsys.readouterr()

        run(ctx, "show changes")
        out = capsys.readouterr().out
        assert "+interfaces interface eth0\n" in out
        assert "+ mtu 9000\n" in out

        run(ctx, "commit")
        assert capsys.readouterr().out == "% configuration committed successfully\n"
        assert not ctx.dirty

        run(ctx, "exit")
        assert ctx.mode == Configure((PathSegment("interfaces"),))
        run(ctx, "end")
        assert ctx.mode == Operational()

        run(ctx, "show running")
        assert capsys.readouterr().out == "!\ninterfaces interface eth0\n mtu 9000\n!\n\n"

    def test_pwd(self, ctx, capsys):
        run(ctx, "configure", "pwd")
        assert capsys.readouterr().out == "/\n"
        run(ctx, "interfaces interface eth0", "pwd")
        assert capsys.readouterr().out == "/interfaces/interface[name='eth0']\n"

    def test_entering_np_container_creates_nothing(self, ctx):
        run(ctx, "configure", "system")
        assert ctx.mode == Configure((PathSegment("system"),))
        assert ctx.candidate == {}

    def test_entering_presence_container(self, ctx, capsys):
        run(ctx, "configure", "system ntp")
        assert ctx.candidate == {"system": {"ntp": {}}}
        run(ctx, "show candidate")
        assert capsys.readouterr().out == "system ntp\n!\n\n"

    def test_leaf_from_top_level(self, ctx):
        run(ctx, "configure", "system hostname r1")
        assert ctx.mode == Configure()
        assert ctx.candidate == {"system": {"hostname": "r1"}}

    def test_leaf_list_values(self, ctx):
        run(ctx, "configure",
            "system dns-resolver search a.example",
            "system dns-resolver search a.example",
            "system dns-resolver search b.example")
        assert ctx.candidate["system"]["dns-resolver"]["search"] == ["a.example", "b.example"]

    def test_discard(self, ctx):
        run(ctx, "configure", "system hostname r1", "discard")
        assert ctx.candidate == {}
        assert not ctx.dirty

    def test_validate(self, ctx, capsys):
        run(ctx, "configure", "validate")
        assert capsys.readouterr().out == "% candidate configuration validated successfully\n"
        ctx.candidate = {"bogus": "1"}
        run(ctx, "validate")
        assert capsys.readouterr().out == "% /bogus: unknown node\n"

    def test_commit_with_comment(self, ctx, capsys):
        run(ctx, "configure", "system hostname r1", "commit comment initial")
        assert capsys.readouterr().out == "% configuration committed successfully\n"
        assert ctx.running == {"system": {"hostname": "r1"}}
        assert ctx.commit_comment == "initial"

        run(ctx, "system contact noc", "commit")
        assert ctx.commit_comment is None

    def test_commit_comment_needs_text(self, ctx, capsys):
        run(ctx, "configure", "system hostname r1", "commit comment")
        assert capsys.readouterr().out == "% incomplete command\n"
        assert ctx.running == {}

    def test_commit_invalid_keeps_running(self, ctx, capsys):
        run(ctx, "configure")
        ctx.candidate = {"bogus": "1"}
        run(ctx, "commit")
        assert capsys.readouterr().out == "% /bogus: unknown node\n"
        assert ctx.running == {}

    def test_hostname(self, ctx):
        run(ctx, "configure", "hostname r1")
        assert ctx.hostname == "r1"
        assert get_prompt_text(ctx) == "r1(config)# "

    def test_hostname_only_at_top_level(self, ctx, capsys):
        run(ctx, "configure", "interfaces", "hostname r1")
        assert capsys.readouterr().out == "% unknown command\n"
        assert ctx.hostname == "ncsh"


class TestDispatch:
    """Tests for handle_command outside of a session flow."""

    def test_exit_ends_shell(self, ctx):
        assert handle_command("exit", ctx) is False

    def test_blank_and_comment_lines(self, ctx, capsys):
        assert handle_command("", ctx)
        assert handle_command("   ", ctx)
        assert handle_command("! a comment", ctx)
        assert capsys.readouterr().out == ""

    def test_unknown_command_keeps_session(self, ctx, capsys):
        assert handle_command("frobnicate", ctx)
        assert capsys.readouterr().out == "% unknown command\n"

    def test_abbreviation_ambiguous_across_roots(self, ctx, capsys):
        run(ctx, "configure")
        assert handle_command("s", ctx)
        assert capsys.readouterr().out == "% ambiguous command\n"
        assert ctx.mode == Configure()

    def test_incomplete_command(self, ctx, capsys):
        assert handle_command("show", ctx)
        assert capsys.readouterr().out == "% incomplete command\n"

    def test_list_operational(self, ctx, capsys):
        run(ctx, "list")
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "CONFIGURE "
        assert "---" not in lines

    def test_list_configure(self, ctx, capsys):
        run(ctx, "configure", "list")
        lines = capsys.readouterr().out.splitlines()
        assert lines.count("---") == 2
        assert lines[0] == "EXIT "
        assert "HOSTNAME hostname " in lines
        assert "INTERFACES " in lines


class TestShowCommands:
    """Tests for the configuration, state and schema show commands."""

    def test_unknown_format(self, ctx, capsys):
        run(ctx, "show running format xml")
        assert capsys.readouterr().out == "% unknown format: xml (expected json, yaml)\n"

    def test_running_json(self, schema, state_file, capsys):
        ctx = create_context(schema, {"system": {"hostname": "r1"}}, state_file=state_file)
        run(ctx, "show running format json")
        assert json.loads(capsys.readouterr().out) == {"system": {"hostname": "r1"}}

    def test_running_yaml_with_defaults(self, ctx, capsys):
        run(ctx, "show running with-defaults format yaml")
        doc = yaml.safe_load(capsys.readouterr().out)
        assert doc["system"]["clock"]["timezone-name"] == "UTC"

    def test_show_candidate_from_configure(self, ctx, capsys):
        run(ctx, "configure", "system contact noc")
        capsys.readouterr()
        run(ctx, "show candidate")
        assert capsys.readouterr().out == "system contact noc\n!\n\n"
        run(ctx, "show running")
        assert capsys.readouterr().out == "!\n\n"

    def test_state(self, ctx, state_file, capsys):
        state_file.write_text("interfaces:\n  interface:\n    - name: eth0\n      oper-status: up\n")
        run(ctx, "show state")
        doc = json.loads(capsys.readouterr().out)
        iface = doc["interfaces"]["interface"][0]
        assert iface["oper-status"] == "up"
        assert iface["mtu"] == "1500"

    def test_state_xpath(self, ctx, state_file, capsys):
        state_file.write_text("interfaces:\n  interface:\n    - name: eth0\n      oper-status: up\n")
        run(ctx, "show state xpath /interfaces/interface[name='eth0']/oper-status")
        assert json.loads(capsys.readouterr().out) == [{"oper-status": "up"}]

    def test_state_bad_xpath(self, ctx, capsys):
        run(ctx, "show state xpath /interfaces/interface[name=eth0]")
        out = capsys.readouterr().out
        assert out.startswith("% invalid predicate in path segment")

    def test_state_invalid(self, ctx, state_file, capsys):
        state_file.write_text("bogus: 1\n")
        run(ctx, "show state")
        assert capsys.readouterr().out == "% failed to fetch state data: /bogus: unknown node\n"

    def test_schema_modules(self, ctx, capsys):
        run(ctx, "show schema modules")
        out = capsys.readouterr().out
        assert out.startswith(" Flags: I - Implemented\n")
        for name in ("ncsh-interfaces", "ncsh-routing", "ncsh-system"):
            assert name in out
