"""Candidate source file discovery."""

import os
from pathlib import Path

from loguru import logger

from themeshift.core import FileFilter


class InvalidTargetError(ValueError):
    """Raised when a target path does not exist or is not a file or directory."""


def is_candidate(path: Path, file_filter: FileFilter) -> bool:
    """Check a file name against the filter's extensions and exclusion markers."""
    if path.suffix.lower() not in file_filter.extensions:
        return False
    return not any(marker in path.name for marker in file_filter.exclude_markers)


def discover_files(target: str | Path, file_filter: FileFilter) -> list[Path]:
    """Enumerate candidate files under target in a stable order.

    A regular file target is returned as-is. A directory is walked recursively,
    skipping excluded directory names, with directories and files visited in
    sorted order.

    Raises:
        InvalidTargetError: If target does not exist or is neither a file nor a directory
    """
    root = Path(target)
    if root.is_file():
        return [root]
    if not root.is_dir():
        if root.exists():
            message = f"Target is neither a file nor a directory: {root}"
        else:
            message = f"Target does not exist: {root}"
        logger.error(f"✗ {message}")
        raise InvalidTargetError(message)

    excluded_dirs = set(file_filter.exclude_dirs)
    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Prune in place so os.walk never descends into excluded directories
        dirnames[:] = sorted(d for d in dirnames if d not in excluded_dirs)
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if path.is_file() and is_candidate(path, file_filter):
                files.append(path)

    logger.debug(f"Discovered {len(files)} candidate files under {root}")
    return files
