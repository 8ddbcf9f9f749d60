"""Color migration for themeshift."""

from themeshift.migration.migrator import ColorMigrator
from themeshift.migration.results import MigrationResult, MigrationSummary, Transformation

__all__ = ["ColorMigrator", "MigrationResult", "MigrationSummary", "Transformation"]
