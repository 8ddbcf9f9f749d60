"""Utility functions for themeshift."""

from themeshift.utils.constants import Constants
from themeshift.utils.helpers import (
    ensure_directory_exists,
    expand_file_path,
    read_json_file,
    write_file_safely,
    write_json_file,
)
from themeshift.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "ensure_directory_exists",
    "expand_file_path",
    "read_json_file",
    "setup_logger",
    "write_file_safely",
    "write_json_file",
]
