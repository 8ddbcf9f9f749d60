"""Component analysis report and JSON export."""

from pathlib import Path
from typing import TextIO

from loguru import logger

from themeshift.analysis.models import AnalysisSummary, ComponentAnalysis
from themeshift.reports.helpers import (
    iso_timestamp,
    percent,
    write_report_header,
    write_subsection_header,
)
from themeshift.utils import Constants, write_json_file


def _write_component(f: TextIO, component: ComponentAnalysis, details: list[str]) -> None:
    f.write(f"  {component.relative_path}\n")
    for line in details + component.automation_notes:
        f.write(f"    - {line}\n")


def write_analysis_report(f: TextIO, summary: AnalysisSummary) -> None:
    """Write the human-readable analysis report."""
    total = summary.total_components
    manual_count = len(summary.needs_manual)

    write_report_header(f, "COMPONENT ANALYSIS REPORT")

    write_subsection_header(f, "Overview")
    f.write(f"  Total components: {total}\n")
    f.write(
        f"  Automation ready: {summary.automation_ready} "
        f"({percent(summary.automation_ready, total)}%)\n"
    )
    f.write(f"  Needs manual: {manual_count} ({percent(manual_count, total)}%)\n")

    write_subsection_header(f, "Category Distribution")
    for category, count in sorted(summary.categories.items(), key=lambda item: -item[1]):
        f.write(f"  {category}: {count} components\n")

    write_subsection_header(f, "Complexity Breakdown")
    for tier, count in summary.complexity_breakdown.items():
        f.write(f"  {tier.capitalize()}: {count} ({percent(count, total)}%)\n")

    write_subsection_header(f, "Risk Assessment")
    for level, count in summary.risk_breakdown.items():
        f.write(f"  {level.capitalize()} risk: {count}\n")

    write_subsection_header(f, "Estimated Pattern Usage")
    for pattern, count in sorted(summary.pattern_coverage.items(), key=lambda item: -item[1]):
        f.write(f"  {pattern}: {count} components\n")

    if summary.top_candidates:
        write_subsection_header(f, "Top Automation Candidates")
        for component in summary.top_candidates:
            patterns = ", ".join(component.estimated_patterns) or "None detected"
            _write_component(
                f,
                component,
                [f"{component.dark_class_count} dark classes", f"Patterns: {patterns}"],
            )

    if summary.needs_manual:
        write_subsection_header(f, "Components Requiring Manual Migration")
        limit = Constants.MANUAL_PREVIEW_LIMIT
        for component in summary.needs_manual[:limit]:
            _write_component(
                f,
                component,
                [
                    f"Complexity: {component.complexity.value}, "
                    f"Risk: {component.risk_level.value}",
                    f"{component.dark_class_count} dark classes",
                ],
            )
        if manual_count > limit:
            f.write(f"  ... and {manual_count - limit} more\n")

    write_subsection_header(f, "Recommendations")
    f.write(
        f"  1. Start with {len(summary.top_candidates)} simple components for a test run\n"
    )
    f.write(
        f"  2. {summary.complexity_breakdown.get('medium', 0)} medium complexity components "
        "can be automated with verification\n"
    )
    f.write(f"  3. Reserve {manual_count} components for manual migration\n")
    f.write(
        f"  4. Expected automation success rate: {percent(summary.automation_ready, total)}%\n"
    )


def build_analysis_export(
    summary: AnalysisSummary, components: list[ComponentAnalysis]
) -> dict:
    return {
        "summary": summary.to_json_dict(),
        "components": [component.to_json_dict() for component in components],
        "generatedAt": iso_timestamp(),
    }


def export_analysis(
    output_path: str | Path, summary: AnalysisSummary, components: list[ComponentAnalysis]
) -> None:
    """Write the summary and per-file analyses as one JSON document."""
    write_json_file(
        output_path, build_analysis_export(summary, components), "writing analysis export"
    )
    logger.info(f"Detailed results exported to: {output_path}")
