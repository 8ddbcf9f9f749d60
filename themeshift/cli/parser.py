"""Command-line parsers for the themeshift tools."""

import argparse

from themeshift.utils import Constants


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments every tool accepts."""
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")


def create_migrate_parser() -> argparse.ArgumentParser:
    """Create the migrate-colors argument parser."""
    parser = argparse.ArgumentParser(
        prog="migrate-colors",
        description="Replace dark-mode class pairs with semantic color tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Migrate a single file
  %(prog)s components/ui/avatar.tsx

  # Dry run on a directory
  %(prog)s --dry-run components/ui/

  # Apply only surface patterns
  %(prog)s --pattern surface components/

  # Save results for generate-docs --batch
  %(prog)s --export migration-results.json components/display/
        """,
    )
    parser.add_argument("target", nargs="?", help="File or directory to migrate")
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Show what would be changed without modifying files",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        dest="category",
        type=str,
        help="Apply one pattern category only (surface|border|text)",
    )
    parser.add_argument(
        "--patterns-file",
        dest="pattern_file",
        type=str,
        help="YAML file with a custom pattern table",
    )
    parser.add_argument(
        "-e",
        "--export",
        type=str,
        help="Write per-file results to a JSON file",
    )
    _add_common_arguments(parser)
    return parser


def create_analyze_parser() -> argparse.ArgumentParser:
    """Create the analyze-components argument parser."""
    parser = argparse.ArgumentParser(
        prog="analyze-components",
        description="Assess component complexity and automation readiness",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze all components
  %(prog)s components/

  # Analyze one category and export the results
  %(prog)s --export analysis.json components/display/

Scoring weights and thresholds can be changed in the "scoring" section of a
JSON config file passed with --config.
        """,
    )
    parser.add_argument("target", nargs="?", help="Directory (or single file) to analyze")
    parser.add_argument(
        "-e",
        "--export",
        type=str,
        help="Export summary and per-component details to a JSON file",
    )
    _add_common_arguments(parser)
    return parser


def create_docs_parser() -> argparse.ArgumentParser:
    """Create the generate-docs argument parser."""
    parser = argparse.ArgumentParser(
        prog="generate-docs",
        description="Generate markdown documentation for a migration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Document an automated migration
  %(prog)s components/ui/avatar.tsx

  # Document a manual migration that took 30 minutes
  %(prog)s --method manual --time 30 components/auth/login.tsx

  # Add custom notes
  %(prog)s --notes "Required manual review for custom animations" components/display/chart.tsx

  # Generate a batch summary from migrate-colors --export output
  %(prog)s --batch migration-results.json

Documents are written under {Constants.DEFAULT_DOCS_DIR}/ unless --output is given.
        """,
    )
    parser.add_argument(
        "target", nargs="?", help="Component file, or results JSON file with --batch"
    )
    parser.add_argument("-o", "--output", type=str, help="Output path for the markdown file")
    parser.add_argument("-t", "--time", type=float, help="Minutes spent on the migration")
    parser.add_argument(
        "-m",
        "--method",
        choices=["script", "manual"],
        default="script",
        help="Migration method (default: script)",
    )
    parser.add_argument(
        "-n",
        "--notes",
        action="append",
        default=[],
        help="Additional implementation note (repeatable)",
    )
    parser.add_argument(
        "--batch",
        action="store_true",
        help="Generate a batch summary from a results JSON file",
    )
    parser.add_argument("--analysis", type=str, help="Component analysis JSON file")
    parser.add_argument("--migration", type=str, help="Migration result JSON file")
    _add_common_arguments(parser)
    return parser


def create_tests_parser() -> argparse.ArgumentParser:
    """Create the generate-tests argument parser."""
    parser = argparse.ArgumentParser(
        prog="generate-tests",
        description="Generate migration validation tests for a component",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate tests for a component
  %(prog)s components/ui/button.tsx

  # Unit tests only, custom output
  %(prog)s --type unit --output tests/button.test.tsx components/ui/button.tsx

  # High-risk component
  %(prog)s --risk high components/auth/login-form.tsx
        """,
    )
    parser.add_argument("target", nargs="?", help="Component file")
    parser.add_argument(
        "-o", "--output", type=str, help="Output path (default: <dir>/__tests__/<name>.test.tsx)"
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="test_type",
        choices=["unit", "visual", "both"],
        default="both",
        help="Test type (default: both)",
    )
    parser.add_argument(
        "-r",
        "--risk",
        choices=["low", "medium", "high"],
        default="medium",
        help="Risk level, sets visual regression tolerance (default: medium)",
    )
    _add_common_arguments(parser)
    return parser
