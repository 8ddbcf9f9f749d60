"""Color replacement engine: rewrites dark-mode class pairs into semantic tokens."""

from pathlib import Path
import re

from loguru import logger

from themeshift.core import Config, PatternTable
from themeshift.data.files import discover_files
from themeshift.migration.results import MigrationResult, MigrationSummary, Transformation

# ES import statements ending a line (LF or CRLF), including multi-line ones
IMPORT_STATEMENT = re.compile(r"^import\b[^;]+;(?=[ \t]*\r?$)", re.MULTILINE)


def read_source_file(path: Path) -> str:
    """Read a source file as UTF-8 without translating line endings."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_source_file(path: Path, content: str) -> None:
    """Overwrite a source file as UTF-8 without translating line endings."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


class ColorMigrator:
    """Apply the pattern table to files, one file at a time.

    Each file is processed independently: a read or write failure is recorded
    in that file's result and the batch carries on.
    """

    def __init__(self, table: PatternTable, config: Config | None = None):
        self.table = table
        self.config = config or Config()
        if self.config.category is not None and self.config.category not in table.categories:
            raise ValueError(
                f"Unknown pattern category '{self.config.category}' "
                f"(available: {', '.join(table.categories)})"
            )
        self._results: list[MigrationResult] = []

    @property
    def results(self) -> list[MigrationResult]:
        return list(self._results)

    def apply_patterns(self, content: str) -> tuple[str, list[Transformation]]:
        """Apply the active entries to content in declaration order.

        Returns:
            Tuple of (rewritten content, transformations that fired)
        """
        transformations: list[Transformation] = []
        for entry in self.table.entries_for(self.config.category):
            content, count = entry.apply(content)
            if count:
                transformations.append(
                    Transformation(
                        category=entry.category,
                        matcher=entry.source,
                        replacement=entry.replacement,
                        count=count,
                    )
                )
                logger.info(
                    f"  [{entry.category}] {count} replacement(s): "
                    f"{entry.source} → {entry.replacement}"
                )
        return content, transformations

    def needs_helper_import(self, content: str) -> bool:
        """Check whether content uses a semantic token but lacks the helper import."""
        if not any(token in content for token in self.config.marker_tokens):
            return False
        if self.config.import_line in content:
            return False
        source = re.escape(self.config.import_source)
        return re.search(rf"from\s+[\"']{source}[\"']", content) is None

    def insert_helper_import(self, content: str) -> str:
        """Insert the helper import after the last import statement, if needed.

        Files without any import statement are returned unchanged.
        """
        if not self.needs_helper_import(content):
            return content

        imports = list(IMPORT_STATEMENT.finditer(content))
        if not imports:
            return content

        newline = "\r\n" if "\r\n" in content else "\n"
        position = imports[-1].end()
        logger.debug(f"  Inserting helper import at offset {position}")
        return content[:position] + newline + self.config.import_line + content[position:]

    def migrate_file(self, file_path: str | Path) -> MigrationResult:
        """Migrate one file and record its result."""
        path = Path(file_path)
        try:
            content, transformations = self.apply_patterns(read_source_file(path))
            replacements = sum(t.count for t in transformations)

            if replacements > 0:
                content = self.insert_helper_import(content)
                if not self.config.dry_run:
                    write_source_file(path, content)
                logger.info(f"✓ {path}: {replacements} replacement(s)")
                if self.config.dry_run:
                    logger.info("  (dry run - no changes written)")
            else:
                logger.info(f"⏭ {path}: No dark mode patterns found")

            categories: list[str] = []
            for transformation in transformations:
                if transformation.category not in categories:
                    categories.append(transformation.category)

            result = MigrationResult(
                file=str(path),
                success=True,
                replacements=replacements,
                patterns=categories,
                transformations=transformations,
            )
        except (OSError, UnicodeError) as e:
            logger.error(f"✗ {path}: {e}")
            result = MigrationResult(file=str(path), success=False, error=str(e))

        self._results.append(result)
        return result

    def migrate_path(self, target: str | Path) -> list[MigrationResult]:
        """Migrate a single file or every candidate file under a directory.

        Raises:
            InvalidTargetError: If target is missing or not a file/directory
        """
        target_path = Path(target)
        files = discover_files(target_path, self.config.migrate_files)
        if target_path.is_dir():
            logger.info(f"Found {len(files)} files to process in {target_path}")

        return [self.migrate_file(path) for path in files]

    def summarize(self) -> MigrationSummary:
        return MigrationSummary.from_results(self._results)
