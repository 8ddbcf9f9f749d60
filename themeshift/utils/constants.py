"""Shared constants for themeshift."""


class Constants:
    """Fixed values shared across the migration tools."""

    # File discovery
    MIGRATE_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")
    ANALYZE_EXTENSIONS = (".tsx", ".jsx")
    EXCLUDED_DIRS = ("node_modules", "dist", "build", ".next", "scripts", "coverage", ".git")
    EXCLUDED_NAME_MARKERS = (".test.", ".spec.")
    ANALYZE_EXCLUDED_NAME_MARKERS = (".test.", ".spec.", ".stories.")

    # Import inserted when migrated text uses semantic tokens
    HELPER_IMPORT_LINE = 'import { cn } from "@/lib/utils";'
    HELPER_IMPORT_SOURCE = "@/lib/utils"
    SEMANTIC_TOKENS = (
        "bg-surface",
        "bg-popover",
        "bg-muted",
        "border-surface-border",
        "border-input",
        "text-surface-foreground",
        "text-muted-foreground",
    )

    # Documentation
    DEFAULT_DOCS_DIR = "docs/migrations"
    BATCH_SUMMARY_FILENAME = "batch-migration-summary.md"
    MANUAL_BASELINE_MINUTES = 25
    DEFAULT_TIME_TAKEN_MINUTES = 5
    DEFAULT_BATCH_TIME_MINUTES = 60

    # Visual regression tolerance (percent) per risk level
    VISUAL_TOLERANCES = {"low": 15, "medium": 10, "high": 5}

    # Console report layout
    REPORT_WIDTH = 60
    MANUAL_PREVIEW_LIMIT = 10
