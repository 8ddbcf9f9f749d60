"""Shared file helpers for the migration tools."""

import json
import os
from pathlib import Path
from typing import Any, Callable, TextIO

from loguru import logger


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def ensure_directory_exists(dir_path: str | Path) -> None:
    """Create directory if it doesn't exist, with consistent error handling.

    Args:
        dir_path: Directory path to create (may be string or Path)

    Raises:
        PermissionError: If directory creation is denied
        OSError: If directory creation fails for other OS-related reasons
    """
    dir_str = str(dir_path)
    try:
        os.makedirs(dir_str, exist_ok=True)
    except PermissionError:
        logger.error(f"✗ Permission denied creating output directory: {dir_str}")
        logger.error("  Please check directory permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error creating output directory {dir_str}: {e}")
        raise


def write_file_safely(
    file_path: str | Path,
    content_writer: Callable[[TextIO], None],
    operation_name: str = "writing file",
) -> None:
    """Write to a file with consistent error handling.

    Parent directories are created as needed.

    Args:
        file_path: Path to the file to write
        content_writer: Callable that takes a file handle and writes content
        operation_name: Description of the operation for error messages

    Raises:
        PermissionError: If file writing is denied
        OSError: If file writing fails for OS-related reasons
    """
    file_str = str(file_path)
    try:
        parent_dir = os.path.dirname(file_str) or "."
        ensure_directory_exists(parent_dir)

        with open(file_str, "w", encoding="utf-8") as f:
            content_writer(f)
    except PermissionError:
        logger.error(f"✗ Permission denied {operation_name}: {file_str}")
        logger.error("  Please check file permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error {operation_name} {file_str}: {e}")
        raise


def read_json_file(file_path: str | Path, description: str = "JSON file") -> Any:
    """Load a JSON document, logging a specific message for each failure kind.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON
        PermissionError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8
    """
    file_str = expand_file_path(str(file_path)) or str(file_path)
    try:
        with open(file_str, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"✗ {description} not found: {file_str}")
        logger.error("  Please check the file path and try again")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"✗ Invalid JSON in {description} {file_str}: {e}")
        logger.error("  Please validate your JSON syntax")
        raise ValueError(f"Invalid JSON in {file_str}: {e}") from e
    except PermissionError:
        logger.error(f"✗ Permission denied reading {description}: {file_str}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {description} {file_str}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise


def write_json_file(file_path: str | Path, payload: Any, operation_name: str) -> None:
    """Serialize payload as indented JSON to file_path."""

    def write_json_content(f: TextIO) -> None:
        json.dump(payload, f, indent=2, ensure_ascii=False)
        f.write("\n")

    write_file_safely(file_path, write_json_content, operation_name)
