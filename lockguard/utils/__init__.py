"""Utility helpers for the linter."""

from .fileio import read_yaml_file, read_text_file
from .discovery import is_excluded, should_check_file, iter_candidate_files
from .ignore import GitignoreIndex

__all__ = [
    "read_yaml_file",
    "read_text_file",
    "is_excluded",
    "should_check_file",
    "iter_candidate_files",
    "GitignoreIndex",
]
