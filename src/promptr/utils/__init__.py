"""Utilities shared across promptr."""

from ._exec import run_text
from ._json import dump_json, load_json, load_json_file
from ._logging import LogFormatType, create_logger, create_null_logger

__all__ = [
    "LogFormatType",
    "create_logger",
    "create_null_logger",
    "dump_json",
    "load_json",
    "load_json_file",
    "run_text",
]
