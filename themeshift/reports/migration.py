"""Migration summary report and results export."""

from pathlib import Path
from typing import TextIO

from loguru import logger

from themeshift.migration.results import MigrationResult, MigrationSummary
from themeshift.reports.helpers import iso_timestamp, write_report_header, write_subsection_header
from themeshift.utils import write_json_file


def write_migration_summary(f: TextIO, summary: MigrationSummary, dry_run: bool = False) -> None:
    """Write the run summary printed at the end of migrate-colors."""
    title = "MIGRATION SUMMARY (DRY RUN)" if dry_run else "MIGRATION SUMMARY"
    write_report_header(f, title)
    f.write(f"Total files processed: {summary.total_files}\n")
    f.write(f"Successful migrations: {summary.successful}\n")
    f.write(f"Files unchanged: {summary.unchanged}\n")
    f.write(f"Errors: {summary.failed}\n")
    f.write(f"Total replacements: {summary.total_replacements}\n")

    if summary.pattern_usage:
        write_subsection_header(f, "Pattern usage:")
        for category, count in summary.pattern_usage.items():
            f.write(f"  {category}: {count} files\n")

    if summary.failures:
        write_subsection_header(f, "Errors encountered:")
        for failure in summary.failures:
            f.write(f"  {failure.file}: {failure.error}\n")


def export_migration_results(
    output_path: str | Path, results: list[MigrationResult], time_taken_minutes: float
) -> None:
    """Write results in the format generate-docs --batch reads."""
    payload = {
        "results": [result.to_json_dict() for result in results],
        "timeTaken": round(time_taken_minutes, 2),
        "generatedAt": iso_timestamp(),
    }
    write_json_file(output_path, payload, "writing migration results")
    logger.info(f"Migration results exported to: {output_path}")
