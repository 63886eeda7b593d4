"""Unit tests for shell detection and hook snippets."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from pytest_mock import MockerFixture

from promptr.enums import Shell
from promptr.exceptions import ShellError
from promptr.shell import detect_shell, init_script, load_script, resolve_process_name

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem


class TestDetectShell:
    def test_promptr_shell_wins(self) -> None:
        assert detect_shell({"PROMPTR_SHELL": "zsh", "SHELL": "/bin/bash"}) is Shell.ZSH

    def test_shell_path(self) -> None:
        assert detect_shell({"SHELL": "/usr/local/bin/bash"}) is Shell.BASH

    def test_parent_process_fallback(self, mocker: MockerFixture) -> None:
        resolve = mocker.patch(
            "promptr.shell._shell.resolve_process_name", return_value="bash"
        )

        assert detect_shell({}, parent_pid=4242) is Shell.BASH
        resolve.assert_called_once_with(4242)

    def test_unknown_shell(self) -> None:
        with pytest.raises(ShellError, match="fish"):
            detect_shell({"SHELL": "/usr/bin/fish"})

    def test_plain_is_not_a_shell(self) -> None:
        with pytest.raises(ShellError):
            detect_shell({"PROMPTR_SHELL": "plain"})

    def test_undetectable(self, mocker: MockerFixture) -> None:
        mocker.patch("promptr.shell._shell.resolve_process_name", return_value=None)

        with pytest.raises(ShellError):
            detect_shell({}, parent_pid=1)


class TestResolveProcessName:
    def test_linux_proc(self, fs: FakeFilesystem, mocker: MockerFixture) -> None:
        mocker.patch("promptr.shell._process.sys.platform", "linux")
        fs.create_file("/proc/77/comm", contents="bash\n")

        assert resolve_process_name(77) == "bash"

    def test_linux_missing_process(self, fs: FakeFilesystem, mocker: MockerFixture) -> None:
        mocker.patch("promptr.shell._process.sys.platform", "linux")

        assert resolve_process_name(77) is None

    def test_ps_fallback_strips_login_dash_and_path(self, mocker: MockerFixture) -> None:
        mocker.patch("promptr.shell._process.sys.platform", "darwin")
        run = mocker.patch("promptr.shell._process.run_text", return_value="-/bin/bash")

        assert resolve_process_name(12) == "bash"
        run.assert_called_once_with(["ps", "-o", "comm=", "-p", "12"])

    def test_ps_failure(self, mocker: MockerFixture) -> None:
        mocker.patch("promptr.shell._process.sys.platform", "darwin")
        mocker.patch("promptr.shell._process.run_text", return_value=None)

        assert resolve_process_name(12) is None


class TestScripts:
    def test_init_script(self) -> None:
        script = init_script(Shell.BASH, "/opt/promptr/bin/promptr")

        assert "if [[ $- == *i* ]]; then" in script
        assert "/opt/promptr/bin/promptr current-config >" in script
        assert "PROMPT_COMMAND=promptr_prompt" in script
        assert "local code=$?" in script
        assert "/opt/promptr/bin/promptr prompt --shell bash" in script
        assert "must be run from an interactive shell" in script

    def test_init_script_writes_the_reported_config_file(self) -> None:
        script = init_script(Shell.BASH, "promptr")

        assert 'promptr_conf_file="$(promptr location --file)"' in script
        assert 'promptr current-config > "${promptr_conf_file}"' in script
        assert "promptr.json" not in script

    def test_load_script_does_not_write_config(self) -> None:
        script = load_script(Shell.BASH, "promptr")

        assert "current-config" not in script
        assert "PROMPT_COMMAND=promptr_prompt" in script

    def test_executable_is_quoted(self) -> None:
        script = load_script(Shell.BASH, str(Path("/my tools/promptr")))

        assert "'/my tools/promptr' location --file" in script

    @pytest.mark.parametrize("shell", [Shell.ZSH, Shell.PLAIN])
    def test_only_bash(self, shell: Shell) -> None:
        with pytest.raises(ShellError):
            init_script(shell, "promptr")
        with pytest.raises(ShellError):
            load_script(shell, "promptr")
