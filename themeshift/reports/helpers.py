"""Helper functions for console report generation."""

from datetime import datetime
from typing import TextIO

from themeshift.utils import Constants


def write_report_header(f: TextIO, title: str, width: int = Constants.REPORT_WIDTH) -> None:
    """Write a standard report header.

    Args:
        f: File object to write to
        title: Report title
        width: Width of separator line
    """
    f.write("\n")
    f.write("=" * width + "\n")
    f.write(f"{title}\n")
    f.write("=" * width + "\n")


def write_subsection_header(f: TextIO, title: str, width: int = Constants.REPORT_WIDTH) -> None:
    """Write a subsection header preceded by a blank line."""
    f.write("\n")
    f.write(f"{title}\n")
    f.write("-" * width + "\n")


def percent(part: int, total: int) -> int:
    """Whole-number percentage, 0 when total is 0."""
    if total <= 0:
        return 0
    return round(part / total * 100)


def iso_timestamp() -> str:
    return datetime.now().isoformat(timespec="seconds")
