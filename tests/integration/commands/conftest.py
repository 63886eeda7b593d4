from collections.abc import Callable
from pathlib import Path
from typing import Any

import orjson
import pytest
from rich.console import Console

from promptr.cli import create_app


@pytest.fixture
def promptr_cli(console: Console) -> Callable[..., None]:
    """Create CLI app for testing.

    Runs through the meta app so global options such as ``--config`` apply.
    Returns a callable that runs the CLI and suppresses SystemExit. Use
    promptr_cli_with_exit_code when you need to check the exit code.
    """

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> None:
        """Run CLI app and suppress SystemExit from cyclopts."""

        try:
            app.meta(args)
        except SystemExit:
            pass

    return _run


@pytest.fixture
def promptr_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code."""

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        """Run CLI app and return exit code (0 if no SystemExit)."""

        try:
            app.meta(args)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a configuration file with the given segments and theme."""

    def _write(
        segments: list[dict[str, Any]],  # pyright: ignore[reportExplicitAny]
        theme: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
        name: str = "promptr.json",
    ) -> Path:
        path = tmp_path / "config" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        document = {"promptr_config": 12, "segments": segments, "theme": theme or {}}
        path.write_bytes(orjson.dumps(document))
        return path

    return _write
