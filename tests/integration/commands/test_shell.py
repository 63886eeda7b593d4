"""Integration tests for the init and load commands."""

from collections.abc import Callable

import pytest


class TestInit:
    def test_bash_script(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        promptr_cli_with_exit_code: Callable[..., int],
    ) -> None:
        monkeypatch.setenv("PROMPTR_SHELL", "bash")

        exit_code = promptr_cli_with_exit_code("init")

        out = capsys.readouterr().out
        assert exit_code == 0
        assert out.startswith("if [[ $- == *i* ]]; then")
        assert "current-config >" in out
        assert "PROMPT_COMMAND=promptr_prompt" in out
        assert "prompt --shell bash" in out

    def test_shell_from_login_shell_path(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        promptr_cli: Callable[..., None],
    ) -> None:
        monkeypatch.setenv("SHELL", "/usr/local/bin/bash")

        promptr_cli("init")

        assert "PROMPT_COMMAND=promptr_prompt" in capsys.readouterr().out

    @pytest.mark.parametrize("shell", ["fish", "zsh"])
    def test_unsupported_shell(
        self,
        shell: str,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        promptr_cli_with_exit_code: Callable[..., int],
    ) -> None:
        monkeypatch.setenv("PROMPTR_SHELL", shell)

        exit_code = promptr_cli_with_exit_code("init")

        captured = capsys.readouterr()
        assert exit_code == 6
        assert captured.out == ""
        assert "Error:" in captured.err
        assert shell in captured.err


class TestLoad:
    def test_bash_script(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        promptr_cli_with_exit_code: Callable[..., int],
    ) -> None:
        monkeypatch.setenv("PROMPTR_SHELL", "bash")

        exit_code = promptr_cli_with_exit_code("load")

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "PROMPT_COMMAND=promptr_prompt" in out
        assert "current-config" not in out
        assert "mkdir" not in out

    def test_unsupported_shell(
        self,
        monkeypatch: pytest.MonkeyPatch,
        promptr_cli_with_exit_code: Callable[..., int],
    ) -> None:
        monkeypatch.setenv("PROMPTR_SHELL", "tcsh")

        assert promptr_cli_with_exit_code("load") == 6
