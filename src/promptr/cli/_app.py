"""The command-line interface for promptr."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from promptr.config import safe_load_config
from promptr.utils import create_logger

from ._commands import register_commands
from ._commands._context import CLIContext

APP_HELP = "A powerline-style prompt generator for bash."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="promptr",
        help=APP_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Log diagnostics at debug level")] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Launch promptr with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Log diagnostics at debug level.
            config: Explicit path to config file.
        """
        loaded_config, config_error = safe_load_config(config_path=config)

        logger = create_logger(
            level="debug" if verbose else loaded_config.logging.level.value,
            log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
            log_file=loaded_config.logging.file,
        )
        if config_error is not None:
            logger.warning("config_load_failed", error=config_error)

        ctx = CLIContext(
            config=loaded_config,
            verbose=verbose,
            config_path=config,
            config_error=config_error,
            logger=logger,
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


def main() -> None:
    """Default entrypoint for the `promptr` CLI."""
    app = create_app()
    app.meta()
