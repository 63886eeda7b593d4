# pyright: reportUnusedCallResult=false
"""Prompt rendering commands."""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter
from rich.console import Console
from rich.table import Table

from promptr.enums import Shell
from promptr.render import render, terminal_width
from promptr.segments import SegmentContext, build_segments, collect_fragments
from promptr.theme import RgbColor, ThemeResolver

from ._context import CLIContext
from ._shared import ExitCode, get_error_console

if TYPE_CHECKING:
    from collections.abc import Mapping

    from promptr.render import Fragment
    from promptr.theme import Color

# Stand-ins for what the shell hook passes, so segments can be inspected
# from a plain command line
SEGMENT_DEBUG_ENV = {
    "code": "123",
    "hostname": "dummy-hostname.dummy-domain",
}


def _fragments(
    ctx: CLIContext, env: "Mapping[str, str]", theme: ThemeResolver
) -> list["Fragment"]:
    logger = ctx.get_logger()
    context = SegmentContext(env=env, cwd=Path.cwd(), theme=theme, logger=logger)
    segments = build_segments(ctx.config.segments, logger)
    return collect_fragments(segments, context)


def prompt(
    *,
    width: Annotated[
        int | None, Parameter(help="Terminal width in cells (default: detected)")
    ] = None,
    shell: Annotated[
        Shell, Parameter(help="Shell whose prompt escaping to use")
    ] = Shell.BASH,
) -> None:
    """Render the prompt. Called by the shell hook.

    Args:
        width: Terminal width in cells.
        shell: Shell whose prompt escaping to use.
    """
    ctx = CLIContext.get_current()
    env = dict(os.environ)
    theme = ThemeResolver(ctx.config.theme)
    fragments = _fragments(ctx, env, theme)

    columns = width if width is not None else terminal_width(env)
    print(render(fragments, columns, theme=theme, shell=shell), end="")


def _describe_color(color: "Color") -> str:
    if isinstance(color, RgbColor):
        return f"rgb({color.r}, {color.g}, {color.b})"
    return str(color)


def segment(idx: int, /) -> None:
    """Show the fragment at a position in the prompt.

    Args:
        idx: Zero-based fragment index.
    """
    ctx = CLIContext.get_current()
    env = {**os.environ, **SEGMENT_DEBUG_ENV}
    theme = ThemeResolver(ctx.config.theme)
    fragments = _fragments(ctx, env, theme)

    if not 0 <= idx < len(fragments):
        get_error_console().print(
            f"[red]Error:[/red] Segment not found, count={len(fragments)}"
        )
        raise SystemExit(ExitCode.NOT_FOUND)

    fragment = fragments[idx]
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("text", repr(fragment.text))
    table.add_row("fg", _describe_color(fragment.fg))
    table.add_row("bg", _describe_color(fragment.bg))
    table.add_row("separator", fragment.separator.value)
    table.add_row("source", fragment.source)
    Console().print(table)
