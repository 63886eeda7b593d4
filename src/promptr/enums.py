"""Enumeration types for promptr."""

from enum import StrEnum


class Shell(StrEnum):
    """Shells whose prompt escaping promptr knows how to produce."""

    BASH = "bash"
    ZSH = "zsh"
    PLAIN = "plain"


class Separator(StrEnum):
    """Separator drawn after a fragment.

    The thick separator is the usual powerline arrow. The thin one is used
    between fragments that share a background.
    """

    THIN = "thin"
    THICK = "thick"


class OperationKind(StrEnum):
    """Git operations that leave marker files behind while in progress."""

    REBASE = "rebase"
    CHERRY_PICK = "cherry_pick"
    REVERT = "revert"
    MERGE = "merge"
    BISECT = "bisect"
