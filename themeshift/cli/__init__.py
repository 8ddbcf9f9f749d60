"""Command-line interface for themeshift."""

from themeshift.cli.parser import (
    create_analyze_parser,
    create_docs_parser,
    create_migrate_parser,
    create_tests_parser,
)

__all__ = [
    "create_analyze_parser",
    "create_docs_parser",
    "create_migrate_parser",
    "create_tests_parser",
]
