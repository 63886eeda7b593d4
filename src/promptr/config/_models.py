"""Configuration models.

The configuration document is parsed with orjson and validated with these
frozen pydantic models. Unknown keys are rejected so that typos surface as
validation errors instead of being silently ignored.
"""

from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from promptr.exceptions import ConfigLoadError, ConfigValidationError
from promptr.theme import ThemeDocument
from promptr.utils import load_json, load_json_file

from ._defaults import CONFIG_MAGIC

if TYPE_CHECKING:
    from pathlib import Path


class LogLevel(StrEnum):
    """Log level threshold values."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty writes to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class SegmentConfig(BaseModel):
    """One entry of the ``segments`` list.

    Attributes:
        name: Registry name of the segment.
        args: Segment-specific arguments, validated by the segment itself.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    name: str
    args: dict[str, Any] | None = None  # pyright: ignore[reportExplicitAny]


class PromptrConfig(BaseModel):
    """The complete configuration document.

    Attributes:
        promptr_config: Magic number, must be 12.
        segments: Segments to render, in order.
        theme: Theme overrides layered over the built-in theme.
        logging: Diagnostics settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    promptr_config: Literal[12] = CONFIG_MAGIC
    segments: list[SegmentConfig]
    theme: ThemeDocument = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, source: str | None = None) -> Self:  # pyright: ignore[reportExplicitAny]
        """Create configuration from a dictionary.

        Args:
            data: Parsed configuration document.
            source: Where the document came from, for error messages.

        Returns:
            The validated configuration.

        Raises:
            ConfigValidationError: If validation fails.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error.get("loc", ()))
            msg = f"Invalid configuration value for '{key}': {error['msg']}"
            raise ConfigValidationError(
                msg,
                key=key,
                value=error.get("input"),
                expected=str(error["msg"]),
                source=source,
            ) from e

    @classmethod
    def from_json(cls, text: str | bytes, *, source: str | None = None) -> Self:
        """Create configuration from JSON text.

        Raises:
            ConfigLoadError: If the text is not a JSON object.
            ConfigValidationError: If validation fails.
        """
        return cls._from_parsed(load_json(text), source=source, path=None)

    @classmethod
    def from_file(cls, path: "Path") -> Self:
        """Load configuration from a JSON file.

        Args:
            path: Path to the configuration file.

        Returns:
            The validated configuration.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        return cls._from_parsed(load_json_file(path), source=str(path), path=path)

    @classmethod
    def _from_parsed(
        cls,
        data: dict[str, object] | list[object] | None,
        *,
        source: str | None,
        path: "Path | None",
    ) -> Self:
        if not isinstance(data, dict):
            msg = "Configuration must be a JSON object"
            if source:
                msg = f"{msg}: {source}"
            raise ConfigLoadError(msg, path=path)
        return cls.from_dict(data, source=source)

    def to_json_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Dump the configuration as JSON-compatible data.

        Unset color channels and segment arguments are omitted.
        """
        return self.model_dump(mode="json", exclude_none=True)
