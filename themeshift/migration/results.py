"""Migration result models."""

from pydantic import Field

from themeshift.core.records import Record


class Transformation(Record):
    """One pattern that fired in a file, with its match count."""

    category: str
    matcher: str
    replacement: str
    count: int = Field(ge=1)


class MigrationResult(Record):
    """Outcome of migrating a single file."""

    file: str
    success: bool = False
    replacements: int = Field(0, ge=0)
    patterns: list[str] = Field(default_factory=list)
    error: str | None = None
    transformations: list[Transformation] = Field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.success and self.replacements > 0


class MigrationSummary(Record):
    """Run-level aggregate of migration results."""

    total_files: int = 0
    successful: int = 0
    unchanged: int = 0
    failed: int = 0
    total_replacements: int = 0
    pattern_usage: dict[str, int] = Field(default_factory=dict)
    failures: list[MigrationResult] = Field(default_factory=list)

    @classmethod
    def from_results(cls, results: list[MigrationResult]) -> "MigrationSummary":
        pattern_usage: dict[str, int] = {}
        for result in results:
            for category in result.patterns:
                pattern_usage[category] = pattern_usage.get(category, 0) + 1

        failures = [r for r in results if not r.success]
        return cls(
            total_files=len(results),
            successful=sum(1 for r in results if r.changed),
            unchanged=sum(1 for r in results if r.success and r.replacements == 0),
            failed=len(failures),
            total_replacements=sum(r.replacements for r in results),
            pattern_usage=pattern_usage,
            failures=failures,
        )
