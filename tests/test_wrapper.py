"""
Tests for wrappers — availability guard and argument forwarding.
"""

import logging

from lazyshim.adapters.mock import MockResolver, MockRunner
from lazyshim.adapters.shell.command import PathResolver
from lazyshim.core.cache import CommandCache
from lazyshim.core.models.fragment import WrapperSpec
from lazyshim.core.wrapper import TOOL_NOT_FOUND_EXIT, Wrapper, wrap


class TestWrapAvailable:
    def test_forwards_args_verbatim(self, cache, runner):
        git = wrap("git", cache=cache, runner=runner)
        args = ["commit", "-m", "two words", "--", "$HOME", "*"]
        assert git(args) == 0
        assert runner.call_log == [["/usr/bin/git", *args]]

    def test_no_args(self, cache, runner):
        wrap("git", cache=cache, runner=runner)()
        assert runner.call_log == [["/usr/bin/git"]]

    def test_relays_exit_code(self, cache, runner):
        runner.set_exit_code("/usr/bin/git", 42)
        assert wrap("git", cache=cache, runner=runner)(["status"]) == 42

    def test_probes_once_across_calls(self, cache, resolver, runner):
        git = wrap("git", cache=cache, runner=runner)
        for _ in range(5):
            git(["status"])
        assert resolver.probe_count("git") == 1
        assert runner.call_count == 5

    def test_prefix_args(self, cache, runner):
        compose = wrap("compose", command="docker", prefix_args=["compose"],
                       cache=cache, runner=runner)
        compose(["up", "-d"])
        assert runner.call_log == [["/usr/bin/docker", "compose", "up", "-d"]]


class TestWrapMissing:
    def test_returns_not_found_without_spawning(self, cache, runner):
        code = wrap("doesnotexist123", cache=cache, runner=runner)([])
        assert code == TOOL_NOT_FOUND_EXIT
        assert code != 0
        assert runner.call_count == 0

    def test_emits_warning(self, cache, runner, caplog):
        with caplog.at_level(logging.WARNING, logger="lazyshim"):
            wrap("doesnotexist123", cache=cache, runner=runner)(["x"])
        assert "doesnotexist123 not found" in caplog.text

    def test_warning_includes_install_hint(self, cache, runner, caplog):
        w = wrap("kubectl", install_hint="see kubernetes.io", cache=cache, runner=runner)
        with caplog.at_level(logging.WARNING, logger="lazyshim"):
            w(["get", "pods"])
        assert "see kubernetes.io" in caplog.text

    def test_stays_missing(self, cache, resolver, runner):
        w = wrap("doesnotexist123", cache=cache, runner=runner)
        for _ in range(3):
            assert w() == TOOL_NOT_FOUND_EXIT
        assert resolver.probe_count("doesnotexist123") == 1


class TestAlternatives:
    def test_prefers_primary(self, cache, runner):
        w = wrap("container", command="docker", alternatives=["podman"],
                 cache=cache, runner=runner)
        w(["ps"])
        assert runner.call_log[0][0] == "/usr/bin/docker"

    def test_falls_back(self, runner):
        cache = CommandCache(MockResolver({"podman": "/usr/bin/podman"}))
        w = wrap("container", command="docker", alternatives=["podman"],
                 cache=cache, runner=runner)
        w(["ps"])
        assert runner.call_log == [["/usr/bin/podman", "ps"]]

    def test_none_installed(self, runner, caplog):
        cache = CommandCache(MockResolver())
        w = wrap("container", command="docker", alternatives=["podman"],
                 cache=cache, runner=runner)
        with caplog.at_level(logging.WARNING, logger="lazyshim"):
            assert w(["ps"]) == TOOL_NOT_FOUND_EXIT
        assert "none of docker, podman" in caplog.text
        assert runner.call_count == 0


class TestWithoutCache:
    def test_direct_lookup_each_call(self, resolver, runner):
        git = Wrapper(WrapperSpec(name="git"), resolver=resolver, runner=runner)
        git(["log"])
        git(["log"])
        assert resolver.probe_count("git") == 2
        assert runner.call_count == 2

    def test_defaults_to_path_resolver(self, fake_tool, monkeypatch):
        fake_tool("mytool")
        monkeypatch.setenv("PATH", str(fake_tool.bin_dir))
        runner = MockRunner()
        w = Wrapper(WrapperSpec(name="mytool"), runner=runner)
        assert w.is_available()
        assert w.locate() == str(fake_tool.bin_dir / "mytool")


class TestEndToEnd:
    def test_real_process_exit_code(self, fake_tool):
        fake_tool("fails", "exit 3")
        cache = CommandCache(PathResolver(path=str(fake_tool.bin_dir)))
        assert wrap("fails", cache=cache)([]) == 3

    def test_signal_death_relayed_as_shell_status(self, fake_tool):
        fake_tool("selfkill", "kill -TERM $$")
        cache = CommandCache(PathResolver(path=str(fake_tool.bin_dir)))
        assert wrap("selfkill", cache=cache)([]) == 143

    def test_real_process_receives_args(self, fake_tool, tmp_path):
        out = tmp_path / "argv.txt"
        fake_tool("echoargs", f'for a in "$@"; do printf "%s\\n" "$a"; done > "{out}"')
        cache = CommandCache(PathResolver(path=str(fake_tool.bin_dir)))
        assert wrap("echoargs", cache=cache)(["a b", "--flag", ""]) == 0
        assert out.read_text().split("\n")[:3] == ["a b", "--flag", ""]

    def test_missing_tool_scenario(self, caplog):
        runner = MockRunner()
        with caplog.at_level(logging.WARNING, logger="lazyshim"):
            code = wrap("doesnotexist123", runner=runner)([])
        assert code != 0
        assert runner.call_count == 0
        assert "doesnotexist123" in caplog.text
