"""Segment base class and context.

A segment turns the live environment into zero or more fragments. Returning
no fragments means the segment does not apply right now (no repository, no
battery, not inside screen) and is never an error.
"""

# ruff: noqa: TC003  # Path needed at runtime for dataclass field
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Final, Generic, Self, TypeVar, cast

from pydantic import BaseModel, ConfigDict, ValidationError

from promptr.exceptions import SegmentError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from structlog.typing import FilteringBoundLogger

    from promptr.render import Fragment
    from promptr.theme import Style, ThemeResolver


class SegmentArgs(BaseModel):
    """Base for segment arguments. Unknown keys are rejected."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


@dataclass(frozen=True, slots=True)
class SegmentContext:
    """Snapshot of everything segments read.

    Attributes:
        env: Environment variables, including those the shell hook passes
            (``code``, ``hostname``, ``jobs``, ``dirs``, ``uid``).
        cwd: Absolute working directory.
        theme: Theme resolver for the render.
        logger: Diagnostics logger.
    """

    env: "Mapping[str, str]"
    cwd: Path
    theme: "ThemeResolver"
    logger: "FilteringBoundLogger" = field(repr=False)


ArgsT = TypeVar("ArgsT", bound=SegmentArgs)


class Segment(ABC, Generic[ArgsT]):
    """A prompt segment.

    Subclasses set ``name`` (the registry key), ``kind`` (the theme section
    they are styled from) and ``args_model``.
    """

    __slots__: Final = ("args",)

    name: ClassVar[str]
    kind: ClassVar[str]
    args_model: ClassVar[type[SegmentArgs]] = SegmentArgs

    def __init__(self, args: ArgsT) -> None:
        self.args: ArgsT = args

    @classmethod
    def from_config(cls, raw: "Mapping[str, Any] | None" = None) -> Self:  # pyright: ignore[reportExplicitAny]
        """Create the segment from its configuration arguments.

        Args:
            raw: The ``args`` object from the configuration, or None for
                defaults.

        Returns:
            The configured segment.

        Raises:
            SegmentError: If the arguments fail validation.
        """
        try:
            args = cls.args_model.model_validate(dict(raw or {}))
        except ValidationError as e:
            msg = f"Invalid arguments for segment '{cls.name}': {e.errors()[0]['msg']}"
            raise SegmentError(msg, segment=cls.name) from e
        return cls(cast("ArgsT", args))

    def style(self, context: SegmentContext, sub_state: str = "default") -> "Style":
        """Resolve this segment's style for a sub-state."""
        return context.theme.resolve(self.kind, sub_state)

    @abstractmethod
    def compute(self, context: SegmentContext) -> list["Fragment"]:
        """Compute the fragments to show.

        Args:
            context: The render context.

        Returns:
            Fragments in display order. Empty when the segment does not
            apply.
        """
