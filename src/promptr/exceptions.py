"""promptr exceptions."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class PromptrError(Exception):
    """Base exception for promptr errors."""


class ConfigError(PromptrError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: "Path | None" = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# Segment Exceptions
# =============================================================================


class SegmentError(PromptrError):
    """Base exception for segment errors.

    Attributes:
        segment: Name of the segment that failed.
    """

    def __init__(self, message: str, *, segment: str) -> None:
        """Initialize with error message and segment name."""
        super().__init__(message)
        self.segment: str = segment


class UnknownSegmentError(SegmentError):
    """Raised when the configuration names a segment that does not exist."""


# =============================================================================
# Repository Exceptions
# =============================================================================


class RepositoryError(PromptrError):
    """Raised when git metadata is present but cannot be interpreted.

    Attributes:
        path: The metadata file or directory that could not be read.
    """

    def __init__(self, message: str, *, path: "Path | None" = None) -> None:
        """Initialize with error message and offending path."""
        super().__init__(message)
        self.path: Path | None = path


# =============================================================================
# Shell Exceptions
# =============================================================================


class ShellError(PromptrError):
    """Raised when the invoking shell cannot be identified or is unsupported."""
