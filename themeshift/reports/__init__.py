"""Report generation for themeshift."""

from .analysis import build_analysis_export, export_analysis, write_analysis_report
from .helpers import percent, write_report_header
from .migration import export_migration_results, write_migration_summary

__all__ = [
    "build_analysis_export",
    "export_analysis",
    "export_migration_results",
    "percent",
    "write_analysis_report",
    "write_migration_summary",
    "write_report_header",
]
