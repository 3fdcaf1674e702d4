"""Utility helpers for the linter."""

from .code import iter_code_files
from .fileio import read_text_file, read_yaml_file
from .react import get_prop_value

__all__ = [
    "iter_code_files",
    "read_text_file",
    "read_yaml_file",
    "get_prop_value",
]
