# ruff: noqa: TC003  # Path needed at runtime for dataclass field
"""CLI context for global state management.

The CLIContext is set once at CLI startup by the meta command and made
available to all commands via contextvars.
"""

import contextvars
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from promptr.config import PromptrConfig


_current_cli_context: contextvars.ContextVar["CLIContext | None"] = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded configuration.
        verbose: Log at debug level regardless of the configuration.
        config_path: Explicit configuration file from ``--config``.
        config_error: Error message if config loading failed.
        logger: Diagnostics logger.
    """

    config: "PromptrConfig" = field(repr=False)
    verbose: bool = False
    config_path: Path | None = None
    config_error: str | None = None
    logger: "FilteringBoundLogger | None" = field(default=None, repr=False)

    @classmethod
    def get_current(cls) -> "CLIContext":
        """Get the current CLIContext, or a default one if none is set."""
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx

        from promptr.config import default_config

        return cls(config=default_config())

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to the default context."""
        _current_cli_context.set(None)

    def get_logger(self) -> "FilteringBoundLogger":
        if self.logger is not None:
            return self.logger

        from promptr.utils import create_null_logger

        return create_null_logger()
