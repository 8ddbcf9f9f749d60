"""Entry point for migrate-colors."""

import sys
import time

from loguru import logger

from themeshift.cli.common import bootstrap, require_target
from themeshift.cli.parser import create_migrate_parser
from themeshift.core import load_pattern_table
from themeshift.data import InvalidTargetError
from themeshift.migration import ColorMigrator
from themeshift.reports import export_migration_results, write_migration_summary


def main(argv: list[str] | None = None) -> int:
    """Run migrate-colors and return the process exit code."""
    parser = create_migrate_parser()
    args = parser.parse_args(argv)

    try:
        # Dry runs always list what would change
        config = bootstrap(args, parser, force_verbose=args.dry_run)
        table = load_pattern_table(config.pattern_file)
    except (ValueError, OSError):
        return 1

    target = require_target(args, "file or directory")
    if target is None:
        return 1

    if config.category and config.category not in table.categories:
        parser.error(
            f"Unknown pattern category '{config.category}' "
            f"(available: {', '.join(table.categories)})"
        )

    migrator = ColorMigrator(table, config)
    start_time = time.time()
    try:
        migrator.migrate_path(target)
    except InvalidTargetError:
        return 1
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Migration interrupted by user")
        raise
    elapsed_minutes = (time.time() - start_time) / 60

    summary = migrator.summarize()
    write_migration_summary(sys.stdout, summary, dry_run=config.dry_run)

    if config.export:
        try:
            export_migration_results(config.export, migrator.results, elapsed_minutes)
        except OSError:
            return 1

    return 1 if summary.failed else 0


if __name__ == "__main__":
    sys.exit(main())
